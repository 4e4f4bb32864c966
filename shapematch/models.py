"""Pydantic models shared between matchers and callers rendering results."""
from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ErrorRecord(BaseModel):
    """Single validation failure, located by its path from the root value."""

    model_config = ConfigDict(frozen=True)
    # Frozen but unhashable: ``value`` may be a list or dict.
    __hash__ = None

    path: str = Field(..., description="Location of the offending value, e.g. address[0].street")
    value: Any = Field(default=None, description="The offending value, echoed verbatim")
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "value": self.value, "message": self.message}


class Relationship(BaseModel):
    """Cross-field presence constraint checked after structural validation."""

    model_config = ConfigDict(frozen=True)

    type: Literal["and"] = Field(..., description="Relationship kind")
    values: List[str] = Field(..., min_length=1, description="Related field names, in order")


__all__ = ["ErrorRecord", "Relationship"]
