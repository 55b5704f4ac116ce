"""Whole-object validation: field rule builders and EntityValidator."""

from __future__ import annotations

from .builder import FieldRuleBuilder
from .validator import CUSTOM_FIELD, EntityValidator, attribute_extractor

__all__ = [
    "CUSTOM_FIELD",
    "EntityValidator",
    "FieldRuleBuilder",
    "attribute_extractor",
]
