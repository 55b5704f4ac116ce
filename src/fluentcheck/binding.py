"""Bind a request payload to a typed model, then validate it.

Decoding uses pydantic's ``TypeAdapter`` so the target may be a pydantic
model, a dataclass or a ``TypedDict``. Decode problems and rule failures
surface as the same :class:`~fluentcheck.primitives.exceptions.ValidationError`
shape the request aggregator produces.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .primitives.codes import ValidationCode
from .primitives.exceptions import PayloadDecodeError
from .validation.result import ValidationFailure, ValidationResult

if TYPE_CHECKING:
    from .registry import ValidatorRegistry

T = TypeVar("T")

logger = logging.getLogger(__name__)

BODY_FIELD = "body"
EMPTY_BODY_MESSAGE = "request body must not be empty"
INVALID_JSON_MESSAGE = "request body is not valid JSON"

Payload = bytes | bytearray | str | Mapping[str, Any] | None


@functools.lru_cache(maxsize=256)
def _adapter(model_type: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(model_type)


def _is_empty(payload: Payload) -> bool:
    if payload is None:
        return True
    if isinstance(payload, (bytes, bytearray, str)):
        return not payload.strip()
    return False


def _failures_from(exc: PydanticValidationError) -> ValidationResult:
    result = ValidationResult()
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        if error.get("type") == "json_invalid":
            result.add_error(
                loc or BODY_FIELD, INVALID_JSON_MESSAGE, ValidationCode.FAILED.value
            )
            continue
        code = (
            ValidationCode.REQUIRED.value
            if error.get("type") == "missing"
            else ValidationCode.FAILED.value
        )
        result.add_error(loc or BODY_FIELD, error.get("msg", "invalid value"), code)
    return result


def decode_payload(model_type: type[T], payload: Payload) -> T:
    """Decode JSON text/bytes or an already-parsed mapping into *model_type*.

    Raises:
        PayloadDecodeError: the body is empty or does not fit *model_type*.
    """
    if _is_empty(payload):
        raise PayloadDecodeError(
            [
                ValidationFailure(
                    BODY_FIELD, EMPTY_BODY_MESSAGE, ValidationCode.REQUIRED.value
                )
            ]
        )
    adapter = _adapter(model_type)
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return adapter.validate_json(payload)
        return adapter.validate_python(payload)
    except PydanticValidationError as exc:
        failures = _failures_from(exc)
        logger.debug(
            "Could not decode %s payload: %d field(s) rejected",
            model_type.__name__,
            len(failures),
        )
        raise PayloadDecodeError(failures.failures) from exc


def bind_and_validate(
    model_type: type[T], payload: Payload, registry: ValidatorRegistry
) -> T:
    """Decode *payload* into *model_type* and run its registered validator.

    Returns the decoded instance when every rule passes.

    Raises:
        PayloadDecodeError: the payload could not be decoded.
        UnregisteredValidatorError: no validator is registered for
            *model_type*; this is a wiring bug, not a bad request.
        ValidationError: one or more rules failed.
    """
    instance = decode_payload(model_type, payload)
    validator = registry.lookup(model_type)
    error = validator.validate(instance).to_error()
    if error is not None:
        raise error
    return instance


__all__ = ["BODY_FIELD", "bind_and_validate", "decode_payload"]
