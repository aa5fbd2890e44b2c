"""
stamp

Note filename generator. Prints identifiers such as `2024-01-05`,
`2024-01-05-F093012` or `P0042` derived from the current date and time.

Public surface:

    from stamp import generate, NoteKind
"""

from .errors import InvalidKind, InvalidTimestamp, StampError
from .generator import current_time, generate, parse_daily
from .types import NoteKind

__version__ = "0.1.0"

# Stamped at release time; left at these values for source installs.
COMMIT = "none"
BUILD_DATE = "unknown"

__all__ = [
    "generate",
    "current_time",
    "parse_daily",
    "NoteKind",
    "StampError",
    "InvalidKind",
    "InvalidTimestamp",
    "__version__",
]
