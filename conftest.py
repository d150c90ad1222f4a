"""
Root conftest.py — shared fixtures and custom markers.

Markers:
  @pytest.mark.pty: drives a real pseudo-terminal; skipped where the
    pty/termios modules are unavailable
"""
from __future__ import annotations

import importlib.util
import random

import pytest


_HAS_PTY = all(importlib.util.find_spec(name) is not None for name in ("pty", "termios", "tty"))


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "pty: mark test as driving a real pseudo-terminal (POSIX only)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.pty tests on platforms without pty support."""
    if _HAS_PTY:
        return
    skip_pty = pytest.mark.skip(reason="pty/termios not available on this platform")
    for item in items:
        if "pty" in item.keywords:
            item.add_marker(skip_pty)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for food placement."""
    return random.Random(1234)
