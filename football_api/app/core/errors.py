"""
Business errors raised by the service layer.

Services raise these typed errors; the API layer decides which HTTP
status each one maps to on a per-endpoint basis.  All of them derive
from ``ValueError`` so callers that only care about "the request could
not be honoured" can catch a single type.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str


class FootballError(ValueError):
    """Base class for errors the API reports to the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FootballError):
    """A request payload failed field validation."""

    def __init__(self, errors: List[FieldError]) -> None:
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


class DuplicateError(FootballError):
    """A uniqueness constraint (team name/acronym, player name) would be violated."""


class NotFoundError(FootballError):
    """A referenced team or player does not exist."""


class ConflictError(FootballError):
    """The current state forbids the operation, e.g. a player already on a team."""
