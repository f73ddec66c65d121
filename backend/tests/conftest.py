"""Pytest setup: keep host requirements configuration out of the tests."""
from __future__ import annotations

import os

REQUIREMENTS_ENV_VARS = (
    "REQUIREMENTS_ROOT",
    "REQUIREMENT_TYPES",
    "REQUIREMENTS_LEVEL",
    "REQUIREMENTS_CONFIG",
    "REQUIREMENTS_SCAN_STANDALONE",
)


def pytest_sessionstart(session) -> None:
    """Drop requirements env overrides so defaults are deterministic."""
    for key in REQUIREMENTS_ENV_VARS:
        os.environ.pop(key, None)
