"""FastAPI integration for fluentcheck."""

from .dependencies import bind_body, get_params, params_with, request_values
from .responses import (
    install_exception_handlers,
    validation_error_response,
    validation_exception_handler,
)

__all__: list[str] = [
    # Dependencies
    "bind_body",
    "get_params",
    "params_with",
    "request_values",
    # Responses
    "install_exception_handlers",
    "validation_error_response",
    "validation_exception_handler",
]
