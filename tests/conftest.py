"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

_ENV_PREFIX = "TWOFLOATS_"


@pytest.fixture(autouse=True)
def _clean_tolerance_env(monkeypatch):
    """Keep tolerance settings from the host environment out of tests."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
