"""Validation and configuration exceptions for fluentcheck."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .codes import ValidationCode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..validation.result import ValidationFailure


class FluentCheckError(Exception):
    """Root exception for the entire fluentcheck package."""


class ValidationError(FluentCheckError):
    """Raised (or returned by ``check()``) when request validation fails.

    Carries the ordered failures, at most one per field. ``errors`` offers
    the same data as ``{field: [messages]}`` for callers that prefer a
    mapping.
    """

    code: str = ValidationCode.FAILED.value
    default_message: str = "validation failed"

    def __init__(
        self,
        failures: Iterable[ValidationFailure] = (),
        message: str | None = None,
    ) -> None:
        self.failures: tuple[ValidationFailure, ...] = tuple(failures)
        self.message = message or self.default_message
        super().__init__(self._describe())

    @property
    def errors(self) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for failure in self.failures:
            errors.setdefault(failure.field, []).append(failure.message)
        return errors

    @property
    def fields(self) -> list[str]:
        return [failure.field for failure in self.failures]

    def to_dict(self) -> dict[str, Any]:
        """Render the client-facing error body."""
        return {
            "code": self.code,
            "message": self.message,
            "fields": [failure.to_dict() for failure in self.failures],
        }

    def _describe(self) -> str:
        if not self.failures:
            return self.message
        details = "; ".join(f"{f.field}: {f.message}" for f in self.failures)
        return f"{self.message}: {details}"


class PayloadDecodeError(ValidationError):
    """Raised when a request body cannot be decoded into the target type."""

    default_message = "request body could not be decoded"


class ConfigurationError(FluentCheckError):
    """Base class for programming errors in how validators are wired."""


class UnregisteredValidatorError(ConfigurationError, LookupError):
    """Raised when no entity validator is registered for a type."""

    def __init__(self, model_type: type[Any]) -> None:
        self.model_type = model_type
        super().__init__(f"No validator registered for {model_type.__name__}")


class ValidatorRegistrationError(ConfigurationError):
    """Raised on a conflicting registration or one made after ``freeze()``."""
