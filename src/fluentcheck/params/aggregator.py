"""RequestValidationAggregator: request-scoped, first-wins failure collector."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import ValidationError
from ..validation.result import ValidationFailure

if TYPE_CHECKING:
    from .chain import ParamChain

logger = logging.getLogger(__name__)


class RequestValidationAggregator:
    """Collects at most one failure per field for a single request.

    Every parameter chain created from the same
    :class:`~fluentcheck.params.validator.ParameterValidator` writes here.
    Failures are reported in the order their fields were first visited,
    and :meth:`check` turns them into one :class:`ValidationError` so the
    client sees every violated field in a single response.

    Usage::

        aggregator = RequestValidationAggregator()
        aggregator.record("id", "must be positive")
        aggregator.record("id", "ignored, id already failed")
        error = aggregator.check()  # ValidationError with one failure
    """

    def __init__(self) -> None:
        self._order: dict[str, int] = {}
        self._failures: dict[str, ValidationFailure] = {}
        self._chains: list[ParamChain[Any]] = []

    # ── Recording ────────────────────────────────────────────────

    def track(self, field_name: str) -> None:
        """Reserve the reporting position of *field_name* (first visit wins)."""
        self._order.setdefault(field_name, len(self._order))

    def attach(self, chain: ParamChain[Any]) -> None:
        """Bind *chain* so pending presence checks are settled by :meth:`check`."""
        self.track(chain.name)
        self._chains.append(chain)

    def record(
        self, field_name: str, message: str, code: str | None = None
    ) -> bool:
        """Record a failure unless *field_name* already has one."""
        if field_name in self._failures:
            return False
        self.track(field_name)
        self._failures[field_name] = ValidationFailure(field_name, message, code)
        return True

    # ── Reading ──────────────────────────────────────────────────

    def has_failure(self, field_name: str) -> bool:
        return field_name in self._failures

    @property
    def failures(self) -> list[ValidationFailure]:
        """Failures in field visiting order."""
        return sorted(self._failures.values(), key=lambda f: self._order[f.field])

    @property
    def is_valid(self) -> bool:
        self._settle()
        return not self._failures

    def check(self) -> ValidationError | None:
        """Return None when every field passed, else one aggregate error.

        Idempotent: state is never cleared, so repeated calls give the same
        failures.
        """
        self._settle()
        if not self._failures:
            return None
        failures = self.failures
        logger.debug(
            "Request validation failed for %d field(s): %s",
            len(failures),
            ", ".join(f.field for f in failures),
        )
        return ValidationError(failures)

    def ensure_valid(self) -> None:
        """Raise the :meth:`check` error, if any."""
        error = self.check()
        if error is not None:
            raise error

    def _settle(self) -> None:
        for chain in self._chains:
            chain.settle()


def new_aggregator() -> RequestValidationAggregator:
    return RequestValidationAggregator()


__all__ = ["RequestValidationAggregator", "new_aggregator"]
