# tests/conftest.py
"""Shared fixtures: reset process-wide settings, debug topics and config cache per test."""

from __future__ import annotations

import pytest

from symbolic_colors import settings
from symbolic_colors.concrete import RGBAColor
from symbolic_colors.utils import clear_config_cache, reload_topics

RED = RGBAColor(1.0, 0.0, 0.0, 1.0)
BLUE = RGBAColor(0.0, 0.0, 1.0, 1.0)


class DictScheme:
    """Minimal non-strict scheme: exact names only, records every lookup."""

    def __init__(self, colors):
        self.colors = {str(k): v for k, v in colors.items()}
        self.calls = []

    def color_for(self, name):
        self.calls.append(name.value)
        return self.colors.get(name.value)


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    """Does: Start every test with prefix matching on, no default scheme, no topics."""
    monkeypatch.delenv("SYMBOLIC_COLORS_DEBUG_TOPICS", raising=False)
    reload_topics()
    clear_config_cache()
    settings.set_prefix_matching_enabled(True)
    settings.set_default_scheme(None)
    yield
    settings.set_prefix_matching_enabled(True)
    settings.set_default_scheme(None)
    clear_config_cache()


@pytest.fixture
def make_scheme():
    """Does: Factory for DictScheme instances."""
    return DictScheme


@pytest.fixture
def red_only():
    """Does: Scheme knowing only 'primary' -> red."""
    return DictScheme({"primary": RED})


@pytest.fixture
def red_blue():
    """Does: Scheme with 'primary' -> red and 'secondary' -> blue."""
    return DictScheme({"primary": RED, "secondary": BLUE})


@pytest.fixture
def empty_scheme():
    return DictScheme({})
