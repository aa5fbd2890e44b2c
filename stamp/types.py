"""
stamp/types.py

Centralized type definitions for stamp.

This module defines the closed NoteKind enumeration, the settings schema
and the structural interface every disambiguator source satisfies. Keeping
these in one place gives:

    • a single list of supported note kinds
    • a clear contract between the CLI, config loader and generator
    • easy injection of deterministic sources in tests
"""

from datetime import datetime
from enum import Enum
from typing import NamedTuple, Protocol, TypedDict

from .errors import InvalidKind


# ---------------------------------------------------------------------------
# NoteKind
# ---------------------------------------------------------------------------
# Closed set of note categories. Adding a kind means adding a member here
# and a format rule in stamp/generator.py; tests assert that every member
# has a rule.
# ---------------------------------------------------------------------------
class NoteKind(Enum):
    DEFAULT = "default"
    DAILY = "daily"
    FLEETING = "fleeting"
    VOICE = "voice"
    ANALOG = "analog"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    PROJECT = "project"

    @classmethod
    def parse(cls, text: str) -> "NoteKind":
        """
        Convert a subcommand name into a NoteKind.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises
        ------
        InvalidKind
            If `text` does not name a known kind.
        """
        try:
            return cls(text.strip().lower())
        except (AttributeError, ValueError):
            raise InvalidKind(text) from None


# ---------------------------------------------------------------------------
# SequenceSpec
# ---------------------------------------------------------------------------
# Describes a prefixed, zero-padded sequence code such as P0042.
# Empty prefix and non-positive width/start fall back to the project
# defaults (P, 4, 1).
# ---------------------------------------------------------------------------
class SequenceSpec(NamedTuple):
    prefix: str = "P"
    width: int = 4
    start: int = 1

    def normalized(self) -> "SequenceSpec":
        return SequenceSpec(
            prefix=self.prefix or "P",
            width=self.width if self.width > 0 else 4,
            start=self.start if self.start > 0 else 1,
        )


# ---------------------------------------------------------------------------
# StampSettings
# ---------------------------------------------------------------------------
# Resolved configuration, produced by stamp.config.load_settings().
# ---------------------------------------------------------------------------
class StampSettings(TypedDict):
    timezone: str
    always_extension: bool
    project_start: int
    project_width: int


# ---------------------------------------------------------------------------
# Disambiguator
# ---------------------------------------------------------------------------
# Anything that can hand out the numeric part of a Fleeting/Voice suffix or
# an Analog/Project number. Structural: ClockSuffix, MonotonicClockSuffix,
# SequenceCounter and simple test doubles all qualify.
# ---------------------------------------------------------------------------
class Disambiguator(Protocol):
    def next_value(self, now: datetime) -> int: ...
