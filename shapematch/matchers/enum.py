"""Enum leaf matcher."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..exceptions import SchemaDefinitionError
from ..matcher import Matcher
from ..models import ErrorRecord
from ..settings import settings


def _display(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    return str(item)


def _same(candidate: Any, value: Any) -> bool:
    # True == 1 in Python; an enum of [1] must not accept True.
    if isinstance(candidate, bool) != isinstance(value, bool):
        return False
    return candidate == value


class EnumMatcher(Matcher):
    """Accept only values from a fixed list.

    ``name`` labels the error message (``should be a valid <name>``) and
    ``verbose`` appends the allowed values. ``type`` is passed through to the
    JSON Schema fragment as-is.
    """

    def __init__(
        self,
        *,
        values: Sequence[Any],
        name: Optional[str] = None,
        verbose: Optional[bool] = None,
        type: Optional[str] = None,
        optional: bool = False,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(optional=optional, description=description)
        if not isinstance(values, (list, tuple)) or not values:
            raise SchemaDefinitionError(f"Invalid enum values: {values}")
        self.values = list(values)
        self.name = name or "enum value"
        self.verbose = settings.ENUM_VERBOSE if verbose is None else bool(verbose)
        self.type = type

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        if any(_same(candidate, value) for candidate in self.values):
            return []
        message = f"should be a valid {self.name}"
        if self.verbose:
            message += f" ({','.join(_display(item) for item in self.values)})"
        return [self.error(path, value, message)]

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"enum": list(self.values)}
        if self.type is not None:
            schema["type"] = self.type
        schema.update(super().to_json_schema())
        return schema

    def __repr__(self) -> str:
        return f"EnumMatcher(values={self.values!r})"


__all__ = ["EnumMatcher"]
