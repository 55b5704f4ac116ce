"""Request parameter extraction: sources, chains, aggregator, facade."""

from __future__ import annotations

from .aggregator import RequestValidationAggregator, new_aggregator
from .chain import (
    BoolParamChain,
    FloatParamChain,
    IntParamChain,
    ParamChain,
    StringParamChain,
)
from .source import ParameterSource, RawParameter, RequestValues
from .validator import ParameterValidator

__all__ = [
    "BoolParamChain",
    "FloatParamChain",
    "IntParamChain",
    "ParamChain",
    "ParameterSource",
    "ParameterValidator",
    "RawParameter",
    "RequestValidationAggregator",
    "RequestValues",
    "StringParamChain",
    "new_aggregator",
]
