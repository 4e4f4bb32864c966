"""Base matcher contract and path helpers shared by every matcher."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from .models import ErrorRecord, Relationship
from .observability import get_logger

logger = get_logger(__name__)


def child_path(path: str, key: str) -> str:
    """Return the path of ``key`` inside the mapping located at ``path``."""
    return f"{path}.{key}" if path else str(key)


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


class Matcher(ABC):
    """Validate a value and describe the accepted shape as JSON Schema.

    Every matcher accepts ``optional`` and ``description``. ``match`` returns
    an ordered list of :class:`ErrorRecord`; an empty list means the value is
    valid. Invalid configuration raises at construction, never at match time.
    """

    def __init__(self, *, optional: bool = False, description: Optional[str] = None) -> None:
        self.optional = bool(optional)
        self.description = description

    @property
    def is_optional(self) -> bool:
        return self.optional

    @abstractmethod
    def match(
        self,
        path: str,
        value: Any,
        relationships: Optional[Iterable[Relationship]] = None,
    ) -> List[ErrorRecord]:
        raise NotImplementedError

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {}
        if self.description is not None:
            schema["description"] = self.description
        return schema

    @staticmethod
    def error(path: str, value: Any, message: str) -> ErrorRecord:
        return ErrorRecord(path=path, value=value, message=message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def collect(matcher: Matcher, path: str, value: Any) -> List[ErrorRecord]:
    """Call ``matcher.match`` and normalize its result to a list.

    Custom matchers returning ``None`` (or anything that is not a list or
    tuple) contribute no errors.
    """
    result = matcher.match(path, value)
    if isinstance(result, (list, tuple)):
        return list(result)
    if result:
        logger.warning("matcher_returned_non_list", matcher=repr(matcher), path=path)
    return []


__all__ = ["Matcher", "child_path", "collect", "index_path"]
