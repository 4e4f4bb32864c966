"""Cross-field relationship checks run after structural validation."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Iterable, List

from pydantic import ValidationError

from .exceptions import SchemaDefinitionError
from .models import ErrorRecord, Relationship


def _coerce(constraint: Any) -> Relationship:
    if isinstance(constraint, Relationship):
        return constraint
    if isinstance(constraint, Mapping):
        try:
            return Relationship.model_validate(dict(constraint))
        except ValidationError as exc:
            raise SchemaDefinitionError(f"Invalid relationship: {dict(constraint)!r}") from exc
    raise SchemaDefinitionError(f"Invalid relationship: {constraint!r}")


def normalize_relationships(relationships: Iterable[Any]) -> List[Relationship]:
    return [_coerce(item) for item in relationships]


def _check_and(path: str, value: Mapping[str, Any], relationship: Relationship) -> List[ErrorRecord]:
    present = [name in value for name in relationship.values]
    if all(present) or not any(present):
        return []
    names = json.dumps(relationship.values, separators=(",", ":"), ensure_ascii=False)
    return [
        ErrorRecord(
            path=path,
            value=list(relationship.values),
            message=f"{names} are related and therefore required",
        )
    ]


_CHECKS = {
    "and": _check_and,
}


def check_relationships(
    path: str, value: Mapping[str, Any], relationships: Iterable[Any]
) -> List[ErrorRecord]:
    """Return one error per violated relationship, reported at ``path``."""
    errors: List[ErrorRecord] = []
    for relationship in normalize_relationships(relationships):
        errors.extend(_CHECKS[relationship.type](path, value, relationship))
    return errors


__all__ = ["check_relationships", "normalize_relationships"]
