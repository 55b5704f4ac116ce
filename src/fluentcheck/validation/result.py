"""ValidationFailure and ValidationResult: ordered, first-wins field errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class ValidationFailure:
    """A single ``{field, message}`` pair, optionally tagged with a code."""

    field: str
    message: str
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"field": self.field, "message": self.message}
        if self.code is not None:
            data["code"] = str(self.code)
        return data


def default_failures_factory() -> list[ValidationFailure]:
    """Factory for the mutable ``failures`` default of ValidationResult."""
    return []


@dataclass
class ValidationResult:
    """Ordered failures of one ``validate()`` call.

    Only the first failure for a field is kept; later ones are dropped so the
    caller sees one message per field in declaration order.

    Usage::

        result = ValidationResult.success()
        result.add_error("name", "must not be empty")
        if not result:
            raise result.to_error()
    """

    failures: list[ValidationFailure] = field(default_factory=default_failures_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.failures) == 0

    @property
    def errors(self) -> dict[str, list[str]]:
        return {f.field: [f.message] for f in self.failures}

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, failures: Iterable[ValidationFailure]) -> ValidationResult:
        result = cls()
        for item in failures:
            result.add(item)
        return result

    # ── Mutation ─────────────────────────────────────────────────

    def has_failure(self, field_name: str) -> bool:
        return any(f.field == field_name for f in self.failures)

    def add(self, failure: ValidationFailure) -> bool:
        """Append *failure* unless its field already failed."""
        if self.has_failure(failure.field):
            return False
        self.failures.append(failure)
        return True

    def add_error(
        self, field_name: str, message: str, code: str | None = None
    ) -> bool:
        """Add a single error for *field_name* (first one wins)."""
        return self.add(ValidationFailure(field_name, message, code))

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result with *other*'s failures appended (first wins)."""
        merged = ValidationResult(list(self.failures))
        for item in other.failures:
            merged.add(item)
        return merged

    # ── Conversion ───────────────────────────────────────────────

    def to_error(self) -> ValidationError | None:
        """The aggregate error shared with the request aggregator, or None."""
        if self.is_valid:
            return None
        return ValidationError(self.failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self.failures)

    def __len__(self) -> int:
        return len(self.failures)

    def __bool__(self) -> bool:
        return self.is_valid
