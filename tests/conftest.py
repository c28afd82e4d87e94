"""Core, always-on test fixtures and hooks.

Includes environment isolation, logging and common payload helpers.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from fallible import Error

if TYPE_CHECKING:
    from collections.abc import Callable


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_fallible_env(request, monkeypatch):
    """Ensure no FALLIBLE_* toggles leak into a test.

    Escape hatch: mark with @pytest.mark.allow_env_pollution to keep the
    current environment unchanged.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)


# --- Logging & Markers ---
@pytest.fixture
def fallible_debug_logs(caplog):
    """Capture DEBUG records from the fallible logger hierarchy."""
    caplog.set_level(logging.DEBUG, logger="fallible")
    return caplog


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep FALLIBLE_* environment variables"
    )


# --- Common helpers ---
@pytest.fixture
def make_error() -> Callable[..., Error]:
    """Build ``Error`` payloads with a default message."""

    def _make(message: str = "boom", **kwargs) -> Error:
        return Error(message, **kwargs)

    return _make
