"""
Response helpers shared by the endpoint modules.

Business failures are answered with a small JSON body
``{"error": ..., "message": ...}``; paging and lookup failures are
answered with a bare status code and no body.
"""

import logging
from typing import Annotated, List, Optional

from fastapi import Path, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from football_api.app.core.config import settings
from football_api.app.core.errors import FieldError, ValidationError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "Erreur de validation"
TRANSFER_ERROR = "Erreur de transfert"
INTERNAL_ERROR = "Erreur interne"
INTERNAL_ERROR_MESSAGE = "Une erreur inattendue s'est produite"

# SQLite integers are signed 64-bit.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

EntityId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]


def error_response(
    status_code: int, error: str, message: str, details: Optional[List[FieldError]] = None
) -> JSONResponse:
    content = {"error": error, "message": message}
    if details is not None:
        content["details"] = [{"field": d.field, "message": d.message} for d in details]
    return JSONResponse(status_code=status_code, content=content)


def paging_is_valid(page: int, size: int) -> bool:
    """Check the bounds of the ``page`` and ``size`` query parameters."""
    if page < 0:
        logger.warning("Invalid page number: %s", page)
        return False
    if size <= 0 or size > settings.max_page_size:
        logger.warning("Invalid page size: %s", size)
        return False
    if page * size > SQLITE_INTEGER_MAX:
        logger.warning("Page number out of range: %s", page)
        return False
    return True


def _field_path(location) -> str:
    # ("body", "joueurs", 0, "nom") -> "joueurs[0].nom"
    path = ""
    for part in location:
        if part in ("body", "query", "path"):
            continue
        if isinstance(part, int):
            # A leading int is the character offset of a JSON decode error.
            if path:
                path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies and query parameters with 400 instead of 422."""
    details = [FieldError(_field_path(err.get("loc", ())), err.get("msg", "")) for err in exc.errors()]
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, details)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_ERROR,
        "; ".join(f"{d.field}: {d.message}" for d in details),
        details,
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, exc.message, exc.errors)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full traceback server-side and hide it from the client."""
    logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)
