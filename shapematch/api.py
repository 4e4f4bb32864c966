"""Convenience entry points wrapping schema normalization and matching."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import MatchError
from .matcher import Matcher
from .matchers import ObjectWithOnly, create_matcher
from .models import ErrorRecord
from .observability import get_logger
from .settings import settings

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

logger = get_logger(__name__)


def _as_matcher(schema: Any) -> Matcher:
    if isinstance(schema, Mapping):
        return ObjectWithOnly(schema)
    return create_matcher(schema)


def match(
    schema: Any,
    value: Any,
    relationships: Optional[Iterable[Any]] = None,
    path: str = "",
) -> List[ErrorRecord]:
    """Validate ``value``; a plain mapping ``schema`` is treated as ``ObjectWithOnly``."""
    return list(_as_matcher(schema).match(path, value, relationships) or [])


def is_valid(schema: Any, value: Any, relationships: Optional[Iterable[Any]] = None) -> bool:
    return not match(schema, value, relationships)


def summarize(errors: Iterable[ErrorRecord], limit: Optional[int] = None) -> str:
    limit = settings.SUMMARY_LIMIT if limit is None else max(limit, 1)
    items = list(errors)
    lines = ["Invalid value"]
    for record in items[:limit]:
        lines.append(f"- {record.path or '<root>'}: {record.message} (got {record.value!r})")
    if len(items) > limit:
        lines.append(f"... and {len(items) - limit} more")
    return "\n".join(lines)


def assert_valid(schema: Any, value: Any, relationships: Optional[Iterable[Any]] = None) -> None:
    """Raise :class:`MatchError` listing every error when ``value`` does not match."""
    errors = match(schema, value, relationships)
    if errors:
        logger.info("value_rejected", error_count=len(errors), first_path=errors[0].path)
        raise MatchError(summarize(errors), errors)


def to_json_schema(schema: Any) -> Dict[str, Any]:
    document = {"$schema": JSON_SCHEMA_DRAFT}
    document.update(_as_matcher(schema).to_json_schema())
    logger.debug("json_schema_exported", keys=sorted(document))
    return document


__all__ = ["JSON_SCHEMA_DRAFT", "assert_valid", "is_valid", "match", "summarize", "to_json_schema"]
