"""Resolve schema literals (matchers and shorthand names) into matchers."""
from __future__ import annotations

from difflib import get_close_matches
from typing import Any, Callable, Dict, List

from ..exceptions import SchemaDefinitionError
from ..matcher import Matcher
from ..observability import get_logger
from .scalars import BooleanMatcher, NumberMatcher, StringMatcher

MatcherFactory = Callable[[], Matcher]

logger = get_logger(__name__)

_shorthands: Dict[str, MatcherFactory] = {
    "string": StringMatcher,
    "number": NumberMatcher,
    "boolean": BooleanMatcher,
}


def register_shorthand(name: str, factory: MatcherFactory) -> None:
    """Make ``name`` usable wherever a matcher is expected."""
    if not name or not isinstance(name, str):
        raise SchemaDefinitionError(f"Invalid shorthand name: {name!r}")
    _shorthands[name.strip().lower()] = factory


def shorthand_names() -> List[str]:
    return sorted(_shorthands)


def _resolve_shorthand(name: str) -> Matcher:
    token = name.strip().lower()
    factory = _shorthands.get(token)
    if factory is not None:
        logger.debug("shorthand_resolved", shorthand=token)
        return factory()
    message = f"Unknown matcher shorthand '{name}'"
    matches = get_close_matches(token, list(_shorthands), n=1, cutoff=0.6)
    if matches:
        message += f"; did you mean '{matches[0]}'?"
    raise SchemaDefinitionError(message)


def create_matcher(spec: Any) -> Matcher:
    """Return a matcher for ``spec``: a Matcher instance or a shorthand name."""
    if isinstance(spec, Matcher):
        return spec
    if isinstance(spec, str):
        return _resolve_shorthand(spec)
    raise SchemaDefinitionError(f"Invalid matcher: {spec!r}")


__all__ = ["create_matcher", "register_shorthand", "shorthand_names"]
