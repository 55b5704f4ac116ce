"""IValidator / IParameterSource: the engine's two seams."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..params.source import ParameterSource
    from ..validation.result import ValidationResult

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class IValidator(Protocol[T_contra]):
    """Protocol for whole-object validators.

    Implemented by :class:`~fluentcheck.entity.validator.EntityValidator`
    and stored in :class:`~fluentcheck.registry.ValidatorRegistry`.
    """

    def validate(self, instance: T_contra) -> ValidationResult:
        """Validate *instance* and return its ordered failures.

        Must never raise for rule outcomes and never mutate *instance*.
        """
        ...


@runtime_checkable
class IParameterSource(Protocol):
    """Name → raw string lookup supplied by the transport layer."""

    def lookup(self, source: ParameterSource, name: str) -> str | None:
        """Return the raw value of *name* in *source*, or None if absent."""
        ...
