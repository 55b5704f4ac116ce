"""Validation results and configuration shared by both front-ends."""

from __future__ import annotations

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_MESSAGES,
    ValidationConfig,
    ValidationMessages,
)
from .result import ValidationFailure, ValidationResult

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_MESSAGES",
    "ValidationConfig",
    "ValidationFailure",
    "ValidationMessages",
    "ValidationResult",
]
