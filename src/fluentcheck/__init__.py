"""fluentcheck: fluent request-parameter and entity validation.

Failures are recorded, never raised mid-chain, and surface as one
structured error per request. Only pydantic is required (payload
decoding); the FastAPI adapter lives in ``fluentcheck.contrib.fastapi``.
"""

from __future__ import annotations

# ── Binding ─────────────────────────────────────────────────────
from .binding import bind_and_validate, decode_payload

# ── Entity validation ───────────────────────────────────────────
from .entity import CUSTOM_FIELD, EntityValidator, FieldRuleBuilder

# ── Parameters ──────────────────────────────────────────────────
from .params import (
    BoolParamChain,
    FloatParamChain,
    IntParamChain,
    ParamChain,
    ParameterSource,
    ParameterValidator,
    RawParameter,
    RequestValidationAggregator,
    RequestValues,
    StringParamChain,
    new_aggregator,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IParameterSource, IValidator

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    ConfigurationError,
    FluentCheckError,
    PayloadDecodeError,
    UnregisteredValidatorError,
    ValidationCode,
    ValidationError,
    ValidatorRegistrationError,
)

# ── Registry ────────────────────────────────────────────────────
from .registry import ValidatorRegistry

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    ValidationConfig,
    ValidationFailure,
    ValidationMessages,
    ValidationResult,
)

__all__: list[str] = [
    # Parameters
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
    # Entity validation
    "CUSTOM_FIELD",
    "EntityValidator",
    "FieldRuleBuilder",
    # Registry & binding
    "ValidatorRegistry",
    "bind_and_validate",
    "decode_payload",
    # Ports
    "IParameterSource",
    "IValidator",
    # Validation
    "ValidationConfig",
    "ValidationFailure",
    "ValidationMessages",
    "ValidationResult",
    # Primitives
    "ConfigurationError",
    "FluentCheckError",
    "PayloadDecodeError",
    "UnregisteredValidatorError",
    "ValidationCode",
    "ValidationError",
    "ValidatorRegistrationError",
]
