"""Runtime settings for the matcher library."""
from __future__ import annotations

import os
from types import SimpleNamespace


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got '{value}'") from exc


LOG_LEVEL = os.getenv("SHAPEMATCH_LOG_LEVEL", "WARNING").strip().upper()
LOG_FORMAT = os.getenv("SHAPEMATCH_LOG_FORMAT", "console").strip().lower()  # "console" | "json"
if LOG_FORMAT not in {"console", "json"}:
    LOG_FORMAT = "console"

ENUM_VERBOSE = _env_flag("SHAPEMATCH_ENUM_VERBOSE")

SUMMARY_LIMIT = max(_env_int("SHAPEMATCH_SUMMARY_LIMIT", 20), 1)

settings = SimpleNamespace(
    LOG_LEVEL=LOG_LEVEL,
    LOG_FORMAT=LOG_FORMAT,
    ENUM_VERBOSE=ENUM_VERBOSE,
    SUMMARY_LIMIT=SUMMARY_LIMIT,
)

__all__ = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "ENUM_VERBOSE",
    "SUMMARY_LIMIT",
    "settings",
]
