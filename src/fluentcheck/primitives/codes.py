"""Machine-readable failure codes (``VALIDATION.<KIND>``)."""

from __future__ import annotations

from enum import Enum


class ValidationCode(str, Enum):
    FAILED = "VALIDATION.FAILED"
    REQUIRED = "VALIDATION.REQUIRED"
    INVALID_INTEGER = "VALIDATION.INVALID_INTEGER"
    INVALID_BOOLEAN = "VALIDATION.INVALID_BOOLEAN"
    INVALID_NUMBER = "VALIDATION.INVALID_NUMBER"
    MIN_LENGTH = "VALIDATION.MIN_LENGTH"
    MAX_LENGTH = "VALIDATION.MAX_LENGTH"
    LENGTH = "VALIDATION.LENGTH"
    MIN = "VALIDATION.MIN"
    MAX = "VALIDATION.MAX"
    RANGE = "VALIDATION.RANGE"
    POSITIVE = "VALIDATION.POSITIVE"
    NON_NEGATIVE = "VALIDATION.NON_NEGATIVE"
    PATTERN = "VALIDATION.PATTERN"
    EMAIL = "VALIDATION.EMAIL"
    URL = "VALIDATION.URL"
    IN = "VALIDATION.IN"
    NOT_IN = "VALIDATION.NOT_IN"
    NOT_EMPTY = "VALIDATION.NOT_EMPTY"
    GREATER_THAN = "VALIDATION.GREATER_THAN"
    LESS_THAN = "VALIDATION.LESS_THAN"
    CUSTOM = "VALIDATION.CUSTOM"

    def __str__(self) -> str:
        return self.value
