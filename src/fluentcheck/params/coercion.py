"""Scalar coercion of raw request strings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from ..primitives.codes import ValidationCode

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT_REJECT = re.compile(r"[\s_]")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class CoercionError(ValueError):
    """Raised by a parser when the raw string is not a valid literal."""


@dataclass(frozen=True)
class ScalarType(Generic[T]):
    """How one target type is parsed and what its zero value is."""

    label: str
    parse: Callable[[str], T]
    zero: T
    code: ValidationCode

    def coerce(self, raw: str) -> T:
        try:
            return self.parse(raw)
        except (TypeError, ValueError) as exc:
            raise CoercionError(f"invalid {self.label} value: {raw!r}") from exc


def parse_int(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise CoercionError(raw)
    return int(raw)


def parse_int64(raw: str) -> int:
    value = parse_int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise CoercionError(raw)
    return value


def parse_bool(raw: str) -> bool:
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    raise CoercionError(raw)


def parse_float(raw: str) -> float:
    if _FLOAT_REJECT.search(raw):
        raise CoercionError(raw)
    try:
        value = float(raw)
    except ValueError as exc:
        raise CoercionError(raw) from exc
    if math.isnan(value):
        raise CoercionError(raw)
    return value


def parse_str(raw: str) -> str:
    return raw


INTEGER: ScalarType[int] = ScalarType(
    "integer", parse_int, 0, ValidationCode.INVALID_INTEGER
)
INT64: ScalarType[int] = ScalarType(
    "64-bit integer", parse_int64, 0, ValidationCode.INVALID_INTEGER
)
STRING: ScalarType[str] = ScalarType("string", parse_str, "", ValidationCode.FAILED)
BOOLEAN: ScalarType[bool] = ScalarType(
    "boolean", parse_bool, False, ValidationCode.INVALID_BOOLEAN
)
FLOAT: ScalarType[float] = ScalarType(
    "float", parse_float, 0.0, ValidationCode.INVALID_NUMBER
)
