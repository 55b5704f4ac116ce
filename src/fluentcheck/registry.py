"""Validator Registry with conflict detection and an explicit startup phase."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .primitives.exceptions import (
    UnregisteredValidatorError,
    ValidatorRegistrationError,
)

if TYPE_CHECKING:
    from .ports.validation import IValidator
    from .validation.result import ValidationResult

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Maps a model type to its entity validator.

    Build one during application startup, let each feature register its
    validators, then call :meth:`freeze`. After that the registry is only
    read, so request handlers may share it without locking.

    **Conflict detection:** registering a different validator for a type
    that already has one raises ``ValidatorRegistrationError``. Registering
    the same instance again is a no-op.
    """

    def __init__(self) -> None:
        self._validators: dict[type[Any], IValidator[Any]] = {}
        self._frozen = False

    # ── Registration ─────────────────────────────────────────────

    def register(self, model_type: type[Any], validator: IValidator[Any]) -> None:
        if self._frozen:
            msg = (
                f"Cannot register validator for {model_type.__name__}: "
                "registry is frozen"
            )
            raise ValidatorRegistrationError(msg)
        existing = self._validators.get(model_type)
        if existing is not None and existing is not validator:
            msg = (
                f"Duplicate validator for {model_type.__name__}: "
                f"{type(existing).__name__} already registered, "
                f"cannot register {type(validator).__name__}"
            )
            raise ValidatorRegistrationError(msg)
        self._validators[model_type] = validator
        logger.debug(
            "Registered validator %s -> %s",
            model_type.__name__,
            type(validator).__name__,
        )

    def freeze(self) -> None:
        """End the startup phase; later registrations are rejected."""
        self._frozen = True
        logger.debug("Validator registry frozen with %d type(s)", len(self._validators))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ── Lookup ───────────────────────────────────────────────────

    def get(self, model_type: type[Any]) -> IValidator[Any] | None:
        return self._validators.get(model_type)

    def lookup(self, model_type: type[Any]) -> IValidator[Any]:
        """Return the validator for *model_type* or raise
        ``UnregisteredValidatorError``."""
        validator = self._validators.get(model_type)
        if validator is None:
            raise UnregisteredValidatorError(model_type)
        return validator

    def is_registered(self, model_type: type[Any]) -> bool:
        return model_type in self._validators

    def validate(self, instance: Any) -> ValidationResult:
        """Validate *instance* with the validator registered for its type."""
        return self.lookup(type(instance)).validate(instance)

    # ── Introspection ────────────────────────────────────────────

    def registered_types(self) -> list[type[Any]]:
        return list(self._validators)

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all registrations and unfreeze (testing utility)."""
        self._validators.clear()
        self._frozen = False


__all__ = ["ValidatorRegistry"]
