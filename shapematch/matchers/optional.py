"""Optional wrapper: a missing key is acceptable, a present one is checked."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..matcher import Matcher, collect
from ..models import ErrorRecord
from .registry import create_matcher


class OptionalMatcher(Matcher):
    """Wrap ``inner`` so the enclosing object tolerates the key being absent.

    The absence check belongs to the container; once the key is present the
    value is validated by ``inner`` at the same path.
    """

    def __init__(self, inner: Any, *, description: Optional[str] = None) -> None:
        super().__init__(optional=True, description=description)
        self.inner = create_matcher(inner)

    @property
    def is_optional(self) -> bool:
        return True

    def match(self, path: str, value: Any, relationships=None) -> List[ErrorRecord]:
        return collect(self.inner, path, value)

    def to_json_schema(self) -> Dict[str, Any]:
        schema = dict(self.inner.to_json_schema())
        schema.update(super().to_json_schema())
        return schema

    def __repr__(self) -> str:
        return f"OptionalMatcher({self.inner!r})"


__all__ = ["OptionalMatcher"]
