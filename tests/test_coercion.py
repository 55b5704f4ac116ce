import pytest

from fluentcheck.params.coercion import (
    BOOLEAN,
    FLOAT,
    INT64,
    INT64_MAX,
    INT64_MIN,
    INTEGER,
    STRING,
    CoercionError,
    parse_bool,
    parse_float,
    parse_int,
)
from fluentcheck.primitives.codes import ValidationCode


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("42", 42), ("-5", -5), ("+7", 7), ("007", 7), ("0", 0)],
)
def test_parse_int_accepts_decimal_literals(raw: str, expected: int) -> None:
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1.5", " 1", "1 ", "1_000", "0x10", "", "-"])
def test_parse_int_rejects_non_decimal(raw: str) -> None:
    with pytest.raises(CoercionError):
        parse_int(raw)


def test_int64_bounds() -> None:
    assert INT64.coerce(str(INT64_MAX)) == INT64_MAX
    assert INT64.coerce(str(INT64_MIN)) == INT64_MIN
    with pytest.raises(CoercionError):
        INT64.coerce(str(INT64_MAX + 1))
    with pytest.raises(CoercionError):
        INT64.coerce(str(INT64_MIN - 1))


@pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true_literals(raw: str) -> None:
    assert parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false_literals(raw: str) -> None:
    assert parse_bool(raw) is False


@pytest.mark.parametrize("raw", ["yes", "no", "tRuE", "2", "on"])
def test_parse_bool_rejects_other_words(raw: str) -> None:
    with pytest.raises(CoercionError):
        parse_bool(raw)


def test_parse_float() -> None:
    assert parse_float("1.5") == 1.5
    assert parse_float("-2e3") == -2000.0
    assert parse_float("3") == 3.0


@pytest.mark.parametrize("raw", ["nan", "NaN", "abc", " 1.0", "1_0.5", ""])
def test_parse_float_rejects(raw: str) -> None:
    with pytest.raises(CoercionError):
        parse_float(raw)


def test_scalar_types_carry_zero_values_and_codes() -> None:
    assert INTEGER.zero == 0
    assert STRING.zero == ""
    assert BOOLEAN.zero is False
    assert FLOAT.zero == 0.0
    assert INTEGER.code is ValidationCode.INVALID_INTEGER
    assert BOOLEAN.code is ValidationCode.INVALID_BOOLEAN
    assert FLOAT.code is ValidationCode.INVALID_NUMBER


def test_coerce_wraps_parser_errors_with_label() -> None:
    with pytest.raises(CoercionError, match="invalid integer value: 'abc'"):
        INTEGER.coerce("abc")


def test_string_is_taken_verbatim() -> None:
    assert STRING.coerce("  spaced  ") == "  spaced  "
