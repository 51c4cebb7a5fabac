"""
Paged response envelope shared by the list endpoints.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

from football_api.app.repositories.paging import PageResult

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """A slice of a sorted result set plus total-count metadata."""

    content: List[T]
    total_elements: int = Field(..., alias="totalElements")
    total_pages: int = Field(..., alias="totalPages")
    number: int
    size: int
    number_of_elements: int = Field(..., alias="numberOfElements")
    first: bool
    last: bool
    empty: bool

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_result(cls, result: PageResult) -> "Page":
        return cls(
            content=result.items,
            total_elements=result.total,
            total_pages=result.total_pages,
            number=result.page,
            size=result.size,
            number_of_elements=len(result.items),
            first=result.is_first,
            last=result.is_last,
            empty=not result.items,
        )
