"""Object matchers: open shape and exact shape (``ObjectWithOnly``)."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import SchemaDefinitionError
from ..matcher import Matcher, child_path, collect
from ..models import ErrorRecord, Relationship
from ..relationships import check_relationships
from .registry import create_matcher


class UncheckedObject(Matcher):
    """Stand-in for a raw nested mapping in a schema.

    The key is declared, but its subtree is neither validated nor scanned for
    unknown keys, and it may be absent.
    """

    def __init__(self, literal: Mapping[str, Any]) -> None:
        super().__init__(optional=True)
        self.literal = literal

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        return []

    def to_json_schema(self) -> Dict[str, Any]:
        return {"type": "object"}


def _normalize_fields(fields: Any, kind: str) -> Dict[str, Matcher]:
    if not isinstance(fields, Mapping):
        raise SchemaDefinitionError(f"Invalid argument for {kind}: expected a mapping of fields, got {fields!r}")
    normalized: Dict[str, Matcher] = {}
    for key, spec in fields.items():
        if isinstance(spec, Mapping):
            normalized[key] = UncheckedObject(spec)
        else:
            normalized[key] = create_matcher(spec)
    return normalized


class ObjectMatcher(Matcher):
    """Validate declared fields of a mapping; undeclared keys are ignored."""

    def __init__(
        self,
        fields: Any,
        *,
        optional: bool = False,
        description: Optional[str] = None,
    ) -> None:
        super().__init__(optional=optional, description=description)
        self.fields = _normalize_fields(fields, type(self).__name__)

    def _match_fields(self, path: str, value: Mapping[str, Any]) -> List[ErrorRecord]:
        errors: List[ErrorRecord] = []
        for key, matcher in self.fields.items():
            if key not in value:
                if not matcher.is_optional:
                    errors.append(self.error(child_path(path, key), None, "is required"))
                continue
            errors.extend(collect(matcher, child_path(path, key), value[key]))
        return errors

    def _match_extra_keys(self, path: str, value: Mapping[str, Any]) -> List[ErrorRecord]:
        return []

    def match(
        self,
        path: str,
        value: Any,
        relationships: Optional[Iterable[Relationship]] = None,
    ) -> List[ErrorRecord]:
        if not isinstance(value, Mapping):
            return [self.error(path, value, "should be an object")]

        errors = self._match_fields(path, value)
        errors.extend(self._match_extra_keys(path, value))
        if not errors and relationships is not None:
            errors.extend(check_relationships(path, value, relationships))
        return errors

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {key: matcher.to_json_schema() for key, matcher in self.fields.items()},
            "required": [key for key, matcher in self.fields.items() if not matcher.is_optional],
        }
        schema.update(super().to_json_schema())
        return schema

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self.fields)!r})"


class ObjectWithOnly(ObjectMatcher):
    """Exact-shape object matcher: every key present must be declared.

    Declared keys are checked in declaration order, then each undeclared key
    found in the value is reported as ``should not exist`` in the value's own
    key order. Relationships are only checked when both passes are clean.
    """

    def _match_extra_keys(self, path: str, value: Mapping[str, Any]) -> List[ErrorRecord]:
        return [
            self.error(child_path(path, key), item, "should not exist")
            for key, item in value.items()
            if key not in self.fields
        ]

    def to_json_schema(self) -> Dict[str, Any]:
        schema = super().to_json_schema()
        schema["additionalProperties"] = False
        return schema


__all__ = ["ObjectMatcher", "ObjectWithOnly", "UncheckedObject"]
