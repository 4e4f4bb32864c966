"""Composable matchers for validating nested values and exporting JSON Schema."""
from __future__ import annotations

from .api import assert_valid, is_valid, match, summarize, to_json_schema
from .exceptions import MatchError, SchemaDefinitionError, ShapeMatchError
from .matcher import Matcher
from .matchers import (
    ArrayMatcher,
    BooleanMatcher,
    EnumMatcher,
    NumberMatcher,
    ObjectMatcher,
    ObjectWithOnly,
    OptionalMatcher,
    StringMatcher,
    register_shorthand,
)
from .models import ErrorRecord, Relationship

__version__ = "0.1.0"

__all__ = [
    "ArrayMatcher",
    "BooleanMatcher",
    "EnumMatcher",
    "ErrorRecord",
    "MatchError",
    "Matcher",
    "NumberMatcher",
    "ObjectMatcher",
    "ObjectWithOnly",
    "OptionalMatcher",
    "Relationship",
    "SchemaDefinitionError",
    "ShapeMatchError",
    "StringMatcher",
    "assert_valid",
    "is_valid",
    "match",
    "register_shorthand",
    "summarize",
    "to_json_schema",
]
