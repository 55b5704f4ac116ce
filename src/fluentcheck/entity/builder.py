"""FieldRuleBuilder: fluent rule declarations for one object field."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Sized
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.codes import ValidationCode
from ..validation.config import DEFAULT_MESSAGES, EMAIL_PATTERN
from ..validation.result import ValidationFailure

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.validation import IValidator
    from ..validation.config import ValidationMessages

T = TypeVar("T")
V = TypeVar("V")

_EMAIL = re.compile(EMAIL_PATTERN)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _size(value: Any) -> int:
    if value is None:
        return 0
    return len(value)


class FieldRuleBuilder(Generic[T, V]):
    """Ordered rules for one field, evaluated first-failure-wins.

    Each rule method appends a closure; :meth:`with_message` and
    :meth:`with_code` rewrap the closure added last, so they only affect
    that declaration.

    Comparison and format rules let ``None`` and empty values through;
    use :meth:`not_empty` to demand a value.
    """

    def __init__(
        self,
        name: str,
        extractor: Callable[[T], V],
        messages: ValidationMessages | None = None,
    ) -> None:
        self.name = name
        self._extractor = extractor
        self._messages = messages or DEFAULT_MESSAGES
        self._rules: list[Callable[[T, V], ValidationFailure | None]] = []
        self._condition: Callable[[T], bool] | None = None

    # ── Plumbing ─────────────────────────────────────────────────

    def _add(
        self,
        passes: Callable[[T, V], bool],
        message: str,
        code: ValidationCode | None,
    ) -> FieldRuleBuilder[T, V]:
        failure = ValidationFailure(self.name, message, str(code) if code else None)

        def rule(instance: T, value: V) -> ValidationFailure | None:
            return None if passes(instance, value) else failure

        self._rules.append(rule)
        return self

    def _rewrap_last(self, **changes: Any) -> FieldRuleBuilder[T, V]:
        if not self._rules:
            raise ValueError(
                f"No rule declared for field {self.name!r} before modifying it"
            )
        last = self._rules[-1]

        def rule(instance: T, value: V) -> ValidationFailure | None:
            failure = last(instance, value)
            if failure is None:
                return None
            return dataclasses.replace(failure, **changes)

        self._rules[-1] = rule
        return self

    def evaluate(self, instance: T) -> ValidationFailure | None:
        """Run the rules in order and return the first failure, if any."""
        if self._condition is not None and not self._condition(instance):
            return None
        value = self._extractor(instance)
        for rule in self._rules:
            failure = rule(instance, value)
            if failure is not None:
                return failure
        return None

    # ── Modifiers ────────────────────────────────────────────────

    def with_message(self, message: str) -> FieldRuleBuilder[T, V]:
        """Override the failure text of the rule declared just before."""
        return self._rewrap_last(message=message)

    def with_code(self, code: ValidationCode | str) -> FieldRuleBuilder[T, V]:
        return self._rewrap_last(code=str(code))

    def when(self, condition: Callable[[T], bool]) -> FieldRuleBuilder[T, V]:
        """Only validate this field when *condition(instance)* holds.

        Repeated ``when``/``unless`` calls combine: every guard must allow it.
        """
        previous = self._condition
        if previous is None:
            self._condition = condition
        else:
            self._condition = lambda instance: previous(instance) and condition(
                instance
            )
        return self

    def unless(self, condition: Callable[[T], bool]) -> FieldRuleBuilder[T, V]:
        return self.when(lambda instance: not condition(instance))

    # ── Presence & strings ───────────────────────────────────────

    def not_empty(self) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: not _is_blank(v),
            self._messages.not_empty,
            ValidationCode.NOT_EMPTY,
        )

    def length(self, minimum: int, maximum: int) -> FieldRuleBuilder[T, V]:
        """Length in Unicode code points (or items for collections)."""
        return self._add(
            lambda _, v: minimum <= _size(v) <= maximum,
            self._messages.length.format(min=minimum, max=maximum),
            ValidationCode.LENGTH,
        )

    def min_length(self, minimum: int) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: _size(v) >= minimum,
            self._messages.min_length.format(min=minimum),
            ValidationCode.MIN_LENGTH,
        )

    def max_length(self, maximum: int) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: _size(v) <= maximum,
            self._messages.max_length.format(max=maximum),
            ValidationCode.MAX_LENGTH,
        )

    def matches(self, pattern: str | re.Pattern[str]) -> FieldRuleBuilder[T, V]:
        """*pattern* must be found somewhere in the value."""
        regex = re.compile(pattern)
        return self._add(
            lambda _, v: _is_blank(v) or regex.search(str(v)) is not None,
            self._messages.pattern,
            ValidationCode.PATTERN,
        )

    def email_address(self) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: _is_blank(v) or _EMAIL.fullmatch(str(v)) is not None,
            self._messages.email,
            ValidationCode.EMAIL,
        )

    def in_(self, *allowed: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or v in allowed,
            self._messages.one_of.format(values=", ".join(str(a) for a in allowed)),
            ValidationCode.IN,
        )

    # ── Numbers ──────────────────────────────────────────────────

    def greater_than(self, bound: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or v > bound,
            self._messages.greater_than.format(value=bound),
            ValidationCode.GREATER_THAN,
        )

    def greater_than_or_equal(self, bound: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or v >= bound,
            self._messages.greater_than_or_equal.format(value=bound),
            ValidationCode.GREATER_THAN,
        )

    def less_than(self, bound: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or v < bound,
            self._messages.less_than.format(value=bound),
            ValidationCode.LESS_THAN,
        )

    def less_than_or_equal(self, bound: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or v <= bound,
            self._messages.less_than_or_equal.format(value=bound),
            ValidationCode.LESS_THAN,
        )

    def inclusive_between(self, minimum: Any, maximum: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or minimum <= v <= maximum,
            self._messages.range.format(min=minimum, max=maximum),
            ValidationCode.RANGE,
        )

    def exclusive_between(self, minimum: Any, maximum: Any) -> FieldRuleBuilder[T, V]:
        return self._add(
            lambda _, v: v is None or minimum < v < maximum,
            self._messages.exclusive_between.format(min=minimum, max=maximum),
            ValidationCode.RANGE,
        )

    # ── Escape hatches ───────────────────────────────────────────

    def must(self, predicate: Callable[[T, V], bool]) -> FieldRuleBuilder[T, V]:
        """*predicate(instance, value)* must return True.

        Receives the whole object, so it can compare against sibling fields.
        """
        return self._add(predicate, self._messages.predicate, ValidationCode.CUSTOM)

    def set_validator(self, validator: IValidator[Any]) -> FieldRuleBuilder[T, V]:
        """Validate a nested object; its first failure is reported as
        ``<field>.<nested field>``."""

        def rule(instance: T, value: V) -> ValidationFailure | None:
            if value is None:
                return None
            nested = validator.validate(value)
            if nested.is_valid:
                return None
            first = nested.failures[0]
            return dataclasses.replace(first, field=f"{self.name}.{first.field}")

        self._rules.append(rule)
        return self
