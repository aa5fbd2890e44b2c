"""
Error taxonomy for stamp.

Every failure the generator or configuration layer can report derives from
StampError. The CLI catches StampError at the command boundary, prints a
one-line message and exits with status 1. Nothing below the CLI prints,
logs, or terminates the process.
"""

from typing import Any


class StampError(Exception):
    """Base class for all stamp failures."""


class InvalidKind(StampError):
    """Raised when a note kind is not one of the recognized NoteKind members."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"unknown note type: {value}")


class InvalidTimestamp(StampError):
    """Raised when no valid calendar timestamp is available."""


class DisambiguatorExhausted(StampError):
    """Raised when a suffix source yields a value that cannot render in six digits."""


class ConfigError(StampError):
    """Raised when environment configuration cannot be interpreted."""
