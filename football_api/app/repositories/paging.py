"""
Pagination primitives shared by the repositories.

``PageRequest`` describes which slice of a sorted result set to load;
``PageResult`` carries that slice together with the total number of
matching rows.  Sorting and slicing are always executed by SQLite.
"""

import math
from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int
    sort_field: str
    descending: bool = False

    @property
    def offset(self) -> int:
        return self.page * self.size

    def order_by(self) -> str:
        """Return the ORDER BY clause body.

        ``sort_field`` must already be whitelisted by the caller; the
        trailing ``id`` keeps pages stable when sort keys tie.
        """
        direction = "DESC" if self.descending else "ASC"
        return f"{self.sort_field} {direction}, id ASC"


@dataclass
class PageResult(Generic[T]):
    items: List[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    def map(self, func: Callable[[T], U]) -> "PageResult[U]":
        return PageResult(
            items=[func(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )


def contains_pattern(text: str) -> str:
    """Build a case-insensitive LIKE pattern matching ``text`` anywhere.

    Use with ``ulower(column) LIKE ? ESCAPE '\\'``; ``%`` and ``_`` in the
    user's text are matched literally.
    """
    escaped = text.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
