import logging

import pytest

from fluentcheck.params.aggregator import RequestValidationAggregator, new_aggregator
from fluentcheck.primitives.exceptions import ValidationError


def test_new_aggregator_is_valid() -> None:
    aggregator = new_aggregator()

    assert aggregator.is_valid
    assert aggregator.check() is None
    assert aggregator.failures == []


def test_record_keeps_first_failure_per_field() -> None:
    aggregator = RequestValidationAggregator()

    assert aggregator.record("id", "must be positive") is True
    assert aggregator.record("id", "must not be greater than 10") is False

    error = aggregator.check()
    assert error is not None
    assert error.errors == {"id": ["must be positive"]}


def test_failures_are_reported_in_visit_order() -> None:
    aggregator = RequestValidationAggregator()
    aggregator.track("a")
    aggregator.track("b")
    aggregator.track("c")

    aggregator.record("c", "third")
    aggregator.record("a", "first")

    assert [f.field for f in aggregator.failures] == ["a", "c"]


def test_record_without_track_appends_field() -> None:
    aggregator = RequestValidationAggregator()
    aggregator.track("a")

    aggregator.record("z", "late")
    aggregator.record("a", "early")

    assert [f.field for f in aggregator.failures] == ["a", "z"]


def test_check_is_idempotent() -> None:
    aggregator = RequestValidationAggregator()
    aggregator.record("name", "must not be empty", "VALIDATION.NOT_EMPTY")

    first = aggregator.check()
    second = aggregator.check()

    assert first is not None
    assert second is not None
    assert first.failures == second.failures
    assert first.to_dict() == second.to_dict()


def test_ensure_valid() -> None:
    aggregator = RequestValidationAggregator()
    aggregator.ensure_valid()

    aggregator.record("page", "must be between 1 and 100")
    with pytest.raises(ValidationError) as exc_info:
        aggregator.ensure_valid()
    assert exc_info.value.fields == ["page"]


def test_check_logs_failed_fields(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fluentcheck.params.aggregator")
    aggregator = RequestValidationAggregator()
    aggregator.record("id", "must be positive")

    aggregator.check()

    assert "Request validation failed for 1 field(s): id" in caplog.text
