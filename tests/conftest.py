"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures
here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_fallible_env(monkeypatch):
    """Clear FALLIBLE_* variables so settings start from defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hypothesis").setLevel(logging.WARNING)


# =============================================================================
# Shared Fixtures
# =============================================================================


class Boom(Exception):
    """Distinct exception type so tests can assert on identity and type."""


@pytest.fixture
def boom() -> Boom:
    """Return a fresh ``Boom("boom")`` instance."""
    return Boom("boom")
