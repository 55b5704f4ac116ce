"""Render validation errors as 400 JSON responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.responses import JSONResponse

from ...primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request

logger = logging.getLogger(__name__)

VALIDATION_STATUS_CODE = 400


def validation_error_response(error: ValidationError) -> JSONResponse:
    """400 response listing every ``{field, message}`` pair in order."""
    return JSONResponse(status_code=VALIDATION_STATUS_CODE, content=error.to_dict())


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    if not isinstance(exc, ValidationError):
        raise exc
    logger.info(
        "Rejected %s %s: %d invalid field(s)",
        request.method,
        request.url.path,
        len(exc.failures),
    )
    return validation_error_response(exc)


def install_exception_handlers(app: FastAPI) -> None:
    """Register the ValidationError handler on *app*.

    Example:
        ```python
        app = FastAPI()
        install_exception_handlers(app)
        ```
    """
    app.add_exception_handler(ValidationError, validation_exception_handler)
