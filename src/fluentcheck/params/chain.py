"""Fluent per-parameter rule chains.

A chain is created by :class:`~fluentcheck.params.validator.ParameterValidator`
for one named raw value. It coerces the value once, then every rule call
either passes or records a failure on the shared aggregator. Nothing is
raised mid-chain; the handler asks the aggregator once all parameters have
been read.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import urlsplit

from ..primitives.codes import ValidationCode
from ..validation.config import DEFAULT_CONFIG
from .coercion import BOOLEAN, FLOAT, INT64, INTEGER, STRING, CoercionError, ScalarType

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..validation.config import ValidationConfig
    from .aggregator import RequestValidationAggregator
    from .source import ParameterSource, RawParameter

T = TypeVar("T")
N = TypeVar("N", int, float)
C = TypeVar("C", bound="ParamChain[Any]")

_ALPHA = re.compile(r"[a-zA-Z]+")
_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")


def _join(values: tuple[Any, ...]) -> str:
    return ", ".join(str(v) for v in values)


class ParamChain(Generic[T]):
    """Base chain: presence policy, coercion and resolution."""

    def __init__(
        self,
        aggregator: RequestValidationAggregator,
        parameter: RawParameter,
        scalar: ScalarType[T],
        *,
        required: bool = True,
        config: ValidationConfig | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._parameter = parameter
        self._scalar = scalar
        self._config = config or DEFAULT_CONFIG
        self._messages = self._config.messages
        self._required = required
        self._value: T = scalar.zero
        self._parsed = False

        aggregator.attach(self)
        if parameter.raw is not None and parameter.is_present:
            try:
                self._value = scalar.coerce(parameter.raw)
                self._parsed = True
            except CoercionError:
                self._fail(
                    self._messages.invalid_type.format(type=scalar.label),
                    scalar.code,
                )

    # ── Introspection ────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._parameter.name

    @property
    def source(self) -> ParameterSource:
        return self._parameter.source

    @property
    def raw(self) -> str | None:
        return self._parameter.raw

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def failed(self) -> bool:
        return self._aggregator.has_failure(self.name)

    # ── Presence ─────────────────────────────────────────────────

    def required(self: C) -> C:
        """A missing or empty value is a failure (the default)."""
        self._required = True
        return self

    def optional(self: C) -> C:
        """A missing value skips every remaining rule without failing."""
        self._required = False
        return self

    def settle(self) -> None:
        """Record the missing-value failure if the field is required and absent."""
        if self._required and not self._parameter.is_present:
            self._fail(self._messages.required, ValidationCode.REQUIRED)

    # ── Resolution ───────────────────────────────────────────────

    def value(self) -> T:
        """The coerced value, or the type's zero value once the field failed."""
        self.settle()
        if self._parsed and not self.failed:
            return self._value
        return self._scalar.zero

    def value_or(self, default: T) -> T:
        """The coerced value if present and valid, otherwise *default*.

        Never records a failure. Pair with :meth:`optional` so a required
        but missing value is still reported by ``check()``.
        """
        if self._parsed and not self.failed:
            return self._value
        return default

    # ── Escape hatch ─────────────────────────────────────────────

    def custom(self: C, check: Callable[[Any], str | None]) -> C:
        """Run *check* on the coerced value; a returned message is recorded.

        Skipped when the value is absent or the field already failed.

        Example:
            ```python
            username = params.query_string("username").custom(
                lambda v: None if v.islower() else "must be lowercase"
            ).value()
            ```
        """
        if self._active():
            message = check(self._value)
            if message is not None:
                self._fail(message, ValidationCode.CUSTOM)
        return self

    # ── Rule plumbing ────────────────────────────────────────────

    def _active(self) -> bool:
        """True when a constraint should look at the coerced value.

        Absent values are never parsed, so presence is left to :meth:`settle`
        and ``optional()`` may still follow earlier rules.
        """
        return self._parsed and not self.failed

    def _fail(self, message: str, code: ValidationCode | str | None = None) -> None:
        self._aggregator.record(
            self.name, message, str(code) if code is not None else None
        )

    def _rule(self: C, ok: bool, message: str, code: ValidationCode) -> C:
        if not ok:
            self._fail(message, code)
        return self


class _NumericParamChain(ParamChain[N]):
    def positive(self: C) -> C:
        if self._active():
            self._rule(
                self._value > 0, self._messages.positive, ValidationCode.POSITIVE
            )
        return self

    def non_negative(self: C) -> C:
        if self._active():
            self._rule(
                self._value >= 0,
                self._messages.non_negative,
                ValidationCode.NON_NEGATIVE,
            )
        return self

    def range(self: C, minimum: N, maximum: N) -> C:
        """Inclusive bounds."""
        if self._active():
            self._rule(
                minimum <= self._value <= maximum,
                self._messages.range.format(min=minimum, max=maximum),
                ValidationCode.RANGE,
            )
        return self

    def min(self: C, minimum: N) -> C:
        if self._active():
            self._rule(
                self._value >= minimum,
                self._messages.min.format(min=minimum),
                ValidationCode.MIN,
            )
        return self

    def max(self: C, maximum: N) -> C:
        if self._active():
            self._rule(
                self._value <= maximum,
                self._messages.max.format(max=maximum),
                ValidationCode.MAX,
            )
        return self


class IntParamChain(_NumericParamChain[int]):
    """Chain for integer and 64-bit integer parameters."""

    def in_(self, *allowed: int) -> IntParamChain:
        if self._active():
            self._rule(
                self._value in allowed,
                self._messages.one_of.format(values=_join(allowed)),
                ValidationCode.IN,
            )
        return self


class FloatParamChain(_NumericParamChain[float]):
    """Chain for floating-point parameters."""


class BoolParamChain(ParamChain[bool]):
    """Chain for boolean parameters; only presence and coercion apply."""


class StringParamChain(ParamChain[str]):
    """Chain for string parameters. Lengths count Unicode code points."""

    def not_empty(self) -> StringParamChain:
        """Reject values made only of whitespace."""
        if self._active():
            self._rule(
                self._value.strip() != "",
                self._messages.not_empty,
                ValidationCode.NOT_EMPTY,
            )
        return self

    def min_length(self, minimum: int) -> StringParamChain:
        if self._active():
            self._rule(
                len(self._value) >= minimum,
                self._messages.min_length.format(min=minimum),
                ValidationCode.MIN_LENGTH,
            )
        return self

    def max_length(self, maximum: int) -> StringParamChain:
        if self._active():
            self._rule(
                len(self._value) <= maximum,
                self._messages.max_length.format(max=maximum),
                ValidationCode.MAX_LENGTH,
            )
        return self

    def length(self, minimum: int, maximum: int) -> StringParamChain:
        if self._active():
            self._rule(
                minimum <= len(self._value) <= maximum,
                self._messages.length.format(min=minimum, max=maximum),
                ValidationCode.LENGTH,
            )
        return self

    def pattern(
        self, regex: str | re.Pattern[str], message: str | None = None
    ) -> StringParamChain:
        """The whole value must match *regex*.

        *regex* is compiled when the rule is declared, so an invalid pattern
        raises ``re.error`` even when the parameter is absent.
        """
        compiled = re.compile(regex)
        if self._active():
            self._rule(
                compiled.fullmatch(self._value) is not None,
                message or self._messages.pattern,
                ValidationCode.PATTERN,
            )
        return self

    def email(self) -> StringParamChain:
        if self._active():
            self._rule(
                re.fullmatch(self._config.email_pattern, self._value) is not None,
                self._messages.email,
                ValidationCode.EMAIL,
            )
        return self

    def url(self) -> StringParamChain:
        """Absolute http(s) URL with a host."""
        if self._active():
            parts = urlsplit(self._value)
            self._rule(
                parts.scheme in ("http", "https") and bool(parts.netloc),
                self._messages.url,
                ValidationCode.URL,
            )
        return self

    def alpha(self) -> StringParamChain:
        if self._active():
            self._rule(
                _ALPHA.fullmatch(self._value) is not None,
                self._messages.alpha,
                ValidationCode.PATTERN,
            )
        return self

    def alphanumeric(self) -> StringParamChain:
        if self._active():
            self._rule(
                _ALPHANUMERIC.fullmatch(self._value) is not None,
                self._messages.alphanumeric,
                ValidationCode.PATTERN,
            )
        return self

    def in_(self, *allowed: str) -> StringParamChain:
        """Case-sensitive membership."""
        if self._active():
            self._rule(
                self._value in allowed,
                self._messages.one_of.format(values=_join(allowed)),
                ValidationCode.IN,
            )
        return self

    def not_in(self, *values: str) -> StringParamChain:
        if self._active():
            self._rule(
                self._value not in values,
                self._messages.not_one_of.format(values=_join(values)),
                ValidationCode.NOT_IN,
            )
        return self


CHAIN_TYPES: dict[str, tuple[ScalarType[Any], type[ParamChain[Any]]]] = {
    "int": (INTEGER, IntParamChain),
    "int64": (INT64, IntParamChain),
    "str": (STRING, StringParamChain),
    "bool": (BOOLEAN, BoolParamChain),
    "float": (FLOAT, FloatParamChain),
}


__all__ = [
    "BoolParamChain",
    "CHAIN_TYPES",
    "FloatParamChain",
    "IntParamChain",
    "ParamChain",
    "StringParamChain",
]
