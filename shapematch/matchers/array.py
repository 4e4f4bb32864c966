"""Array combinator."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..exceptions import SchemaDefinitionError
from ..matcher import Matcher, collect, index_path
from ..models import ErrorRecord
from .registry import create_matcher


class ArrayMatcher(Matcher):
    """Apply ``of`` to every element of a list, reporting ``path[i]`` paths."""

    def __init__(
        self,
        of: Any = None,
        *,
        min_items: Optional[int] = None,
        max_items: Optional[int] = None,
        optional: bool = False,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(optional=optional, description=description)
        if of is None:
            raise SchemaDefinitionError("Invalid array matcher: 'of' is required")
        self.of = create_matcher(of)
        self.min_items = min_items
        self.max_items = max_items

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        if not isinstance(value, (list, tuple)):
            return [self.error(path, value, "should be an array")]

        errors: List[ErrorRecord] = []
        if self.min_items is not None and len(value) < self.min_items:
            errors.append(self.error(path, value, f"should have at least {self.min_items} items"))
        if self.max_items is not None and len(value) > self.max_items:
            errors.append(self.error(path, value, f"should have at most {self.max_items} items"))
        for idx, item in enumerate(value):
            errors.extend(collect(self.of, index_path(path, idx), item))
        return errors

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "array", "items": self.of.to_json_schema()}
        if self.min_items is not None:
            schema["minItems"] = self.min_items
        if self.max_items is not None:
            schema["maxItems"] = self.max_items
        schema.update(super().to_json_schema())
        return schema

    def __repr__(self) -> str:
        return f"ArrayMatcher(of={self.of!r})"


__all__ = ["ArrayMatcher"]
