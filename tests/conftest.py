"""
Shared pytest configuration for the stamp test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests use a fresh Typer CliRunner
    • every test sees a clean STAMP_* environment
    • CLI output can be pinned to a known instant
"""

from datetime import datetime

import pytest
from typer.testing import CliRunner

# ============================================================================
# FIXED INSTANT
# ============================================================================
FIXED_NOW = datetime(2024, 1, 5, 9, 30, 12)

STAMP_ENV_VARS = (
    "STAMP_TIMEZONE",
    "STAMP_ALWAYS_EXTENSION",
    "STAMP_PROJECT_START",
    "STAMP_PROJECT_WIDTH",
)


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove STAMP_* settings a developer's shell or .env may have exported."""
    for name in STAMP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def fixed_now() -> datetime:
    """2024-01-05 09:30:12, naive."""
    return FIXED_NOW


# ---------------------------------------------------------------------------
# Fixture: frozen_clock
# ---------------------------------------------------------------------------
@pytest.fixture
def frozen_clock(monkeypatch):
    """
    Pin the CLI's clock to FIXED_NOW.

    Records every timezone the CLI asked for in `.zones` so tests can check
    that settings reach the clock.
    """

    class FrozenClock:
        def __init__(self):
            self.now = FIXED_NOW
            self.zones = []

        def __call__(self, timezone=None):
            self.zones.append(timezone)
            return self.now

    clock = FrozenClock()
    monkeypatch.setattr("stamp.cli.main.current_time", clock)
    return clock
