"""
stamp/config.py

Runtime settings, read from the process environment.

Values can also live in a `.env` file in the working directory; the CLI
calls load_dotenv() on import so those values are visible here through
os.getenv(), the same way credentials reach the rest of the tool chain.

    STAMP_TIMEZONE          IANA zone, empty for system local time
    STAMP_ALWAYS_EXTENSION  append ".md" even without --ext
    STAMP_PROJECT_START     first project number (default 1)
    STAMP_PROJECT_WIDTH     project digit width (default 4)
"""

import os
from typing import Optional

from .errors import ConfigError
from .types import StampSettings

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def load_settings(timezone: Optional[str] = None) -> StampSettings:
    """
    Resolve settings from the environment.

    Parameters
    ----------
    timezone : str, optional
        Explicit zone (from a CLI flag). Takes precedence over STAMP_TIMEZONE.

    Raises
    ------
    ConfigError
        If an integer setting is malformed or not positive.
    """
    return {
        "timezone": timezone or os.getenv("STAMP_TIMEZONE", "").strip(),
        "always_extension": _env_bool("STAMP_ALWAYS_EXTENSION", False),
        "project_start": _env_int("STAMP_PROJECT_START", 1),
        "project_width": _env_int("STAMP_PROJECT_WIDTH", 4),
    }
