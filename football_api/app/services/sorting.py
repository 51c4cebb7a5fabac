"""
Normalisation of the ``sortBy`` / ``sortDirection`` query parameters.
"""

import logging
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


def resolve_sort_field(sort_by: Optional[str], aliases: Mapping[str, str], default: str) -> str:
    """Map a client-supplied sort key to a whitelisted column.

    Matching is case-insensitive and ignores surrounding whitespace.
    Blank keys silently give ``default``; unknown keys give ``default``
    and log a warning.
    """
    if sort_by is None or not sort_by.strip():
        return default
    column = aliases.get(sort_by.strip().lower())
    if column is None:
        logger.warning("Invalid sort field %r, falling back to %r", sort_by, default)
        return default
    return column


def is_descending(sort_direction: Optional[str]) -> bool:
    """Only ``desc`` (any case) sorts descending; anything else is ascending."""
    return sort_direction is not None and sort_direction.strip().lower() == "desc"
