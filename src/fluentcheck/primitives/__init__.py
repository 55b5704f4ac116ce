"""Primitives: exceptions, failure codes."""

from __future__ import annotations

from .codes import ValidationCode
from .exceptions import (
    ConfigurationError,
    FluentCheckError,
    PayloadDecodeError,
    UnregisteredValidatorError,
    ValidationError,
    ValidatorRegistrationError,
)

__all__ = [
    "ConfigurationError",
    "FluentCheckError",
    "PayloadDecodeError",
    "UnregisteredValidatorError",
    "ValidationCode",
    "ValidationError",
    "ValidatorRegistrationError",
]
