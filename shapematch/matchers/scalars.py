"""Scalar leaf matchers: strings, numbers and booleans."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..matcher import Matcher
from ..models import ErrorRecord


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class StringMatcher(Matcher):
    """Match ``str`` values, optionally bounded by length."""

    def __init__(
        self,
        *,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        optional: bool = False,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(optional=optional, description=description)
        self.min_length = min_length
        self.max_length = max_length

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        if not isinstance(value, str):
            return [self.error(path, value, "should be a string")]
        if self.min_length is not None and len(value) < self.min_length:
            return [self.error(path, value, f"should be a string with length >= {self.min_length}")]
        if self.max_length is not None and len(value) > self.max_length:
            return [self.error(path, value, f"should be a string with length <= {self.max_length}")]
        return []

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "string"}
        if self.min_length is not None:
            schema["minLength"] = self.min_length
        if self.max_length is not None:
            schema["maxLength"] = self.max_length
        schema.update(super().to_json_schema())
        return schema


class NumberMatcher(Matcher):
    """Match ints and floats (never booleans).

    With ``parse=True`` numeric strings such as ``"12.5"`` are accepted and
    their parsed value is checked against the bounds.
    """

    def __init__(
        self,
        *,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        parse: bool = False,
        optional: bool = False,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(optional=optional, description=description)
        self.minimum = minimum
        self.maximum = maximum
        self.parse = parse

    def _coerce(self, value: Any) -> Optional[float]:
        if _is_number(value):
            return value
        if self.parse and isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        number = self._coerce(value)
        if number is None or number != number:  # NaN is never a valid number
            return [self.error(path, value, "should be a number")]
        if self.minimum is not None and number < self.minimum:
            return [self.error(path, value, f"should be a number >= {self.minimum}")]
        if self.maximum is not None and number > self.maximum:
            return [self.error(path, value, f"should be a number <= {self.maximum}")]
        return []

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "number"}
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        schema.update(super().to_json_schema())
        return schema


class BooleanMatcher(Matcher):
    def __init__(
        self,
        *,
        parse: bool = False,
        optional: bool = False,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(optional=optional, description=description)
        self.parse = parse

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        if isinstance(value, bool):
            return []
        if self.parse and isinstance(value, str) and value.strip().lower() in {"true", "false"}:
            return []
        return [self.error(path, value, "should be a boolean")]

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "boolean"}
        schema.update(super().to_json_schema())
        return schema


__all__ = ["BooleanMatcher", "NumberMatcher", "StringMatcher"]
