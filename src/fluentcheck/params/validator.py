"""ParameterValidator: per-request facade over the parameter chains."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from ..validation.config import DEFAULT_CONFIG
from .aggregator import RequestValidationAggregator
from .chain import (
    CHAIN_TYPES,
    BoolParamChain,
    FloatParamChain,
    IntParamChain,
    ParamChain,
    StringParamChain,
)
from .source import ParameterSource, RawParameter, RequestValues

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..ports.validation import IParameterSource
    from ..primitives.exceptions import ValidationError
    from ..validation.config import ValidationConfig
    from ..validation.result import ValidationFailure


class ParameterValidator:
    """Extracts typed, validated values from one request.

    Each ``<source>_<type>(name)`` call returns a fresh chain bound to this
    validator's aggregator. Failures accumulate; the handler calls
    :meth:`check` once at the end and renders every failure together.

    Usage::

        params = ParameterValidator(values)
        user_id = params.path_int("id").positive().value()
        page = params.query_int("page").optional().range(1, 100).value_or(1)
        if (error := params.check()) is not None:
            return bad_request(error.to_dict())
    """

    def __init__(
        self,
        source: IParameterSource,
        *,
        config: ValidationConfig | None = None,
        aggregator: RequestValidationAggregator | None = None,
    ) -> None:
        self._source = source
        self._config = config or DEFAULT_CONFIG
        self._aggregator = aggregator or RequestValidationAggregator()

    @classmethod
    def from_mappings(
        cls,
        *,
        path: Mapping[str, str] | None = None,
        query: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        config: ValidationConfig | None = None,
    ) -> ParameterValidator:
        values = RequestValues.from_mappings(path=path, query=query, headers=headers)
        return cls(values, config=config)

    @property
    def aggregator(self) -> RequestValidationAggregator:
        return self._aggregator

    @property
    def config(self) -> ValidationConfig:
        return self._config

    # ── Generic entry point ──────────────────────────────────────

    def param(
        self, source: ParameterSource | str, name: str, kind: str = "str"
    ) -> ParamChain[Any]:
        """Create a chain for *name* in *source* coerced as *kind*.

        *kind* is one of ``int``, ``int64``, ``str``, ``bool``, ``float``.
        """
        source = ParameterSource(source)
        try:
            scalar, chain_cls = CHAIN_TYPES[kind]
        except KeyError:
            raise ValueError(
                f"Unsupported parameter type {kind!r}; "
                f"expected one of {', '.join(CHAIN_TYPES)}"
            ) from None
        parameter = RawParameter(
            name=name, source=source, raw=self._source.lookup(source, name)
        )
        return chain_cls(
            self._aggregator,
            parameter,
            scalar,
            required=source not in self._config.optional_sources,
            config=self._config,
        )

    # ── Path ─────────────────────────────────────────────────────

    def path_int(self, name: str) -> IntParamChain:
        return cast("IntParamChain", self.param(ParameterSource.PATH, name, "int"))

    def path_int64(self, name: str) -> IntParamChain:
        return cast("IntParamChain", self.param(ParameterSource.PATH, name, "int64"))

    def path_string(self, name: str) -> StringParamChain:
        return cast("StringParamChain", self.param(ParameterSource.PATH, name, "str"))

    def path_bool(self, name: str) -> BoolParamChain:
        return cast("BoolParamChain", self.param(ParameterSource.PATH, name, "bool"))

    def path_float(self, name: str) -> FloatParamChain:
        return cast("FloatParamChain", self.param(ParameterSource.PATH, name, "float"))

    # ── Query ────────────────────────────────────────────────────

    def query_int(self, name: str) -> IntParamChain:
        return cast("IntParamChain", self.param(ParameterSource.QUERY, name, "int"))

    def query_int64(self, name: str) -> IntParamChain:
        return cast("IntParamChain", self.param(ParameterSource.QUERY, name, "int64"))

    def query_string(self, name: str) -> StringParamChain:
        return cast("StringParamChain", self.param(ParameterSource.QUERY, name, "str"))

    def query_bool(self, name: str) -> BoolParamChain:
        return cast("BoolParamChain", self.param(ParameterSource.QUERY, name, "bool"))

    def query_float(self, name: str) -> FloatParamChain:
        return cast("FloatParamChain", self.param(ParameterSource.QUERY, name, "float"))

    # ── Header ───────────────────────────────────────────────────

    def header_int(self, name: str) -> IntParamChain:
        return cast("IntParamChain", self.param(ParameterSource.HEADER, name, "int"))

    def header_int64(self, name: str) -> IntParamChain:
        return cast("IntParamChain", self.param(ParameterSource.HEADER, name, "int64"))

    def header_string(self, name: str) -> StringParamChain:
        return cast("StringParamChain", self.param(ParameterSource.HEADER, name, "str"))

    def header_bool(self, name: str) -> BoolParamChain:
        return cast("BoolParamChain", self.param(ParameterSource.HEADER, name, "bool"))

    def header_float(self, name: str) -> FloatParamChain:
        return cast(
            "FloatParamChain", self.param(ParameterSource.HEADER, name, "float")
        )

    # ── Outcome ──────────────────────────────────────────────────

    def check(self) -> ValidationError | None:
        return self._aggregator.check()

    def ensure_valid(self) -> None:
        self._aggregator.ensure_valid()

    @property
    def is_valid(self) -> bool:
        return self._aggregator.is_valid

    @property
    def failures(self) -> list[ValidationFailure]:
        return self._aggregator.failures
