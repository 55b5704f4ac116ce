"""EntityValidator: declarative per-type rule set for whole objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.codes import ValidationCode
from ..validation.result import ValidationFailure, ValidationResult
from .builder import FieldRuleBuilder

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..validation.config import ValidationMessages

T = TypeVar("T")

CUSTOM_FIELD = "_custom"


def attribute_extractor(path: str) -> Callable[[Any], Any]:
    """Build an extractor for a dotted attribute path.

    Mapping segments are read with ``.get`` so missing payload keys read as
    None; missing attributes raise ``AttributeError``.
    """
    parts = path.split(".")

    def extract(instance: Any) -> Any:
        current = instance
        for part in parts:
            if current is None:
                return None
            if isinstance(current, Mapping):
                current = current.get(part)
            else:
                current = getattr(current, part)
        return current

    return extract


class EntityValidator(Generic[T]):
    """Validates instances of ``T`` against declared field rule chains.

    Declarations are evaluated in order; each field reports at most its
    first failing rule. :meth:`validate` never mutates the instance and
    never raises for rule outcomes.

    Usage::

        class CreateUserValidator(EntityValidator[CreateUser]):
            def __init__(self) -> None:
                super().__init__()
                self.field("name").not_empty().length(2, 50)
                self.field("email").not_empty().email_address()
                self.field("password").min_length(8).must(
                    lambda user, pwd: user.name not in pwd
                ).with_message("password must not contain the user name")

        result = CreateUserValidator().validate(command)
    """

    def __init__(self, *, messages: ValidationMessages | None = None) -> None:
        self._messages = messages
        self._fields: list[FieldRuleBuilder[T, Any]] = []
        self._object_rules: list[tuple[str, Callable[[T], str | None]]] = []

    def field(
        self, name: str, extractor: Callable[[T], Any] | None = None
    ) -> FieldRuleBuilder[T, Any]:
        """Declare a field; *extractor* defaults to attribute access by *name*."""
        builder: FieldRuleBuilder[T, Any] = FieldRuleBuilder(
            name, extractor or attribute_extractor(name), self._messages
        )
        self._fields.append(builder)
        return builder

    def rule(
        self, check: Callable[[T], str | None], *, field: str = CUSTOM_FIELD
    ) -> None:
        """Object-level check returning a failure message, or None when valid."""
        self._object_rules.append((field, check))

    @property
    def field_names(self) -> list[str]:
        return [builder.name for builder in self._fields]

    def validate(self, instance: T) -> ValidationResult:
        result = ValidationResult()
        for builder in self._fields:
            failure = builder.evaluate(instance)
            if failure is not None:
                result.add(failure)
        for field_name, check in self._object_rules:
            message = check(instance)
            if message is not None:
                result.add(
                    ValidationFailure(field_name, message, ValidationCode.CUSTOM.value)
                )
        return result


__all__ = ["CUSTOM_FIELD", "EntityValidator", "attribute_extractor"]
