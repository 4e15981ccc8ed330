"""Shared fixtures: put the fixture packages on sys.path and unload them after."""

from __future__ import annotations

import os
import sys

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
AUTOLOAD_ROOT = os.path.join(FIXTURES_DIR, "autoload")


def _unload_shopfront() -> None:
    for name in list(sys.modules):
        if name == "shopfront" or name.startswith("shopfront."):
            del sys.modules[name]


@pytest.fixture
def autoload_root(monkeypatch):
    """Make the ``shopfront`` fixture package importable for one test."""
    _unload_shopfront()
    monkeypatch.syspath_prepend(AUTOLOAD_ROOT)
    yield AUTOLOAD_ROOT
    _unload_shopfront()
