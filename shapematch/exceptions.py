"""Exceptions raised by shapematch."""
from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import ErrorRecord


class ShapeMatchError(Exception):
    """Base exception for shapematch errors."""
    pass


class SchemaDefinitionError(ShapeMatchError, ValueError):
    """Raised when a matcher is constructed with an invalid configuration."""
    pass


class MatchError(ShapeMatchError):
    """Raised by ``assert_valid`` when a value does not match its schema."""

    def __init__(self, message: str, errors: List["ErrorRecord"]) -> None:
        super().__init__(message)
        self.errors = list(errors)


__all__ = ["MatchError", "SchemaDefinitionError", "ShapeMatchError"]
