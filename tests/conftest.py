"""Pytest setup for CLI/settings tests.

This mirrors `backend/tests/conftest.py` so a developer's own requirements
configuration never leaks into test runs.
"""
from __future__ import annotations

import os

import pytest

REQUIREMENTS_ENV_VARS = (
    "REQUIREMENTS_ROOT",
    "REQUIREMENT_TYPES",
    "REQUIREMENTS_LEVEL",
    "REQUIREMENTS_CONFIG",
    "REQUIREMENTS_SCAN_STANDALONE",
)


def pytest_sessionstart(session) -> None:
    for key in REQUIREMENTS_ENV_VARS:
        os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Run each test from an empty directory so ./requirements.yaml is never picked up."""
    monkeypatch.chdir(tmp_path)
