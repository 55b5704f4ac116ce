"""Message catalogue and engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..params.source import ParameterSource

EMAIL_PATTERN = r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"


@dataclass(frozen=True, slots=True)
class ValidationMessages:
    """Default failure texts. Templates use ``str.format`` placeholders.

    Override individual entries with :func:`dataclasses.replace`::

        messages = replace(ValidationMessages(), required="is mandatory")
    """

    required: str = "field is required"
    invalid_type: str = "invalid {type} value"
    not_empty: str = "must not be empty"
    min_length: str = "length must be at least {min} characters"
    max_length: str = "length must not exceed {max} characters"
    length: str = "length must be between {min} and {max} characters"
    pattern: str = "has an invalid format"
    email: str = "must be a valid email address"
    url: str = "must be a valid URL"
    alpha: str = "must contain only letters"
    alphanumeric: str = "must contain only letters and digits"
    one_of: str = "must be one of: {values}"
    not_one_of: str = "must not be one of: {values}"
    positive: str = "must be positive"
    non_negative: str = "must not be negative"
    min: str = "must not be less than {min}"
    max: str = "must not be greater than {max}"
    range: str = "must be between {min} and {max}"
    greater_than: str = "must be greater than {value}"
    greater_than_or_equal: str = "must be greater than or equal to {value}"
    less_than: str = "must be less than {value}"
    less_than_or_equal: str = "must be less than or equal to {value}"
    exclusive_between: str = "must be between {min} and {max} (exclusive)"
    predicate: str = "is invalid"


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Settings for a :class:`~fluentcheck.params.validator.ParameterValidator`.

    Attributes:
        messages: Failure texts used by the parameter chains.
        optional_sources: Sources whose parameters start out optional.
            Empty by default, so every parameter is required until a chain
            calls ``optional()``.
        email_pattern: Full-match regex used by ``email()`` rules.
    """

    messages: ValidationMessages = field(default_factory=ValidationMessages)
    optional_sources: frozenset[ParameterSource] = frozenset()
    email_pattern: str = EMAIL_PATTERN


DEFAULT_MESSAGES = ValidationMessages()
DEFAULT_CONFIG = ValidationConfig()
