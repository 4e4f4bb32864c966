from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shapematch.matcher import Matcher  # noqa: E402
from shapematch.settings import settings  # noqa: E402


def dump(errors) -> list:
    """Render error records as plain dicts for comparison."""
    return [error.to_dict() for error in errors]


class SilentMatcher(Matcher):
    """Custom matcher that returns nothing from ``match``."""

    def match(self, path, value, relationships=None):
        return None


@pytest.fixture()
def silent_matcher() -> Matcher:
    return SilentMatcher()


@pytest.fixture()
def colors() -> list:
    return ['blue', 'red', 'green']


@pytest.fixture()
def restore_settings():
    snapshot = dict(vars(settings))
    yield settings
    for key, value in snapshot.items():
        setattr(settings, key, value)
