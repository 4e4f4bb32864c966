"""Matcher implementations."""
from __future__ import annotations

from .array import ArrayMatcher
from .enum import EnumMatcher
from .objects import ObjectMatcher, ObjectWithOnly, UncheckedObject
from .optional import OptionalMatcher
from .registry import create_matcher, register_shorthand, shorthand_names
from .scalars import BooleanMatcher, NumberMatcher, StringMatcher

__all__ = [
    "ArrayMatcher",
    "BooleanMatcher",
    "EnumMatcher",
    "NumberMatcher",
    "ObjectMatcher",
    "ObjectWithOnly",
    "OptionalMatcher",
    "StringMatcher",
    "UncheckedObject",
    "create_matcher",
    "register_shorthand",
    "shorthand_names",
]
