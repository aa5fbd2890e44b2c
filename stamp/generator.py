"""
Identifier generator.

This module is the core of stamp: it maps a NoteKind and a timestamp to the
filename stem for that kind of note.

    Kind       Output                 Example
    --------   --------------------   ---------------------
    DEFAULT    YYYY-MM-DD-HHMM        2024-01-05-0930
    DAILY      YYYY-MM-DD             2024-01-05
    FLEETING   YYYY-MM-DD-F######     2024-01-05-F093012
    VOICE      YYYY-MM-DD-VT######    2024-01-05-VT093012
    ANALOG     YYYY-MM-DD-A<n>        2024-01-05-A3
    MONTHLY    YYYY-MM                2024-01
    YEARLY     YYYY                   2024
    PROJECT    P####                  P0042

generate() is pure apart from advancing the disambiguator source it is
given. It never reads the clock on its own; current_time() does that and the
caller passes the result in.
"""

from datetime import date, datetime, time
from typing import Callable, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .disambiguators import ClockSuffix, SequenceCounter
from .errors import ConfigError, DisambiguatorExhausted, InvalidKind, InvalidTimestamp
from .sequential import format_code
from .types import Disambiguator, NoteKind, SequenceSpec

SUFFIX_DIGITS = 6
_SUFFIX_LIMIT = 10**SUFFIX_DIGITS

Formatter = Callable[[datetime, Optional[Disambiguator], int], str]


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------
def current_time(timezone: Optional[str] = None) -> datetime:
    """
    Read the wall clock.

    Parameters
    ----------
    timezone : str, optional
        IANA zone name such as "Asia/Tokyo". Empty or None means the
        system's local time.

    Raises
    ------
    ConfigError
        If the zone name is unknown.
    InvalidTimestamp
        If the platform clock cannot be read.
    """
    tz = None
    if timezone:
        try:
            tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            # Zone directories such as "America" surface as IsADirectoryError.
            raise ConfigError(f"invalid timezone {timezone}") from e

    try:
        if tz is None:
            return datetime.now().astimezone()
        return datetime.now(tz)
    except (OSError, OverflowError) as e:
        raise InvalidTimestamp(f"system clock unavailable: {e}") from e


def _coerce_timestamp(now: object) -> datetime:
    if isinstance(now, datetime):
        return now
    if isinstance(now, date):
        return datetime.combine(now, time())
    raise InvalidTimestamp(f"not a calendar timestamp: {now!r}")


# ---------------------------------------------------------------------------
# Format rules
# ---------------------------------------------------------------------------
def _date_part(now: datetime) -> str:
    return f"{now.year:04d}-{now.month:02d}-{now.day:02d}"


def _suffix(now: datetime, source: Optional[Disambiguator]) -> str:
    value = (source or ClockSuffix()).next_value(now)
    if not 0 <= value < _SUFFIX_LIMIT:
        raise DisambiguatorExhausted(
            f"suffix {value} does not fit in {SUFFIX_DIGITS} digits"
        )
    return f"{value:0{SUFFIX_DIGITS}d}"


def _default(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    return f"{_date_part(now)}-{now.hour:02d}{now.minute:02d}"


def _daily(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    return _date_part(now)


def _fleeting(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    return f"{_date_part(now)}-F{_suffix(now, source)}"


def _voice(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    return f"{_date_part(now)}-VT{_suffix(now, source)}"


def _analog(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    number = (source or SequenceCounter()).next_value(now)
    return f"{_date_part(now)}-A{number}"


def _monthly(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    return f"{now.year:04d}-{now.month:02d}"


def _yearly(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    return f"{now.year:04d}"


def _project(now: datetime, source: Optional[Disambiguator], width: int) -> str:
    number = (source or SequenceCounter()).next_value(now)
    # Project codes never drop below four digits.
    return format_code(SequenceSpec("P", max(width, 4)), number)


_FORMATTERS: Dict[NoteKind, Formatter] = {
    NoteKind.DEFAULT: _default,
    NoteKind.DAILY: _daily,
    NoteKind.FLEETING: _fleeting,
    NoteKind.VOICE: _voice,
    NoteKind.ANALOG: _analog,
    NoteKind.MONTHLY: _monthly,
    NoteKind.YEARLY: _yearly,
    NoteKind.PROJECT: _project,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate(
    kind: NoteKind,
    now: datetime,
    source: Optional[Disambiguator] = None,
    *,
    project_width: int = 4,
) -> str:
    """
    Build the identifier for one note.

    Parameters
    ----------
    kind : NoteKind
        Which naming rule to apply.
    now : datetime
        Timestamp the identifier is derived from. A bare date counts as
        midnight of that day.
    source : Disambiguator, optional
        Supplies the six-digit suffix (FLEETING, VOICE) or the running
        number (ANALOG, PROJECT). Ignored by the other kinds. Defaults to
        the HHMMSS of `now` for suffixes and to 1 for running numbers.
    project_width : int
        Minimum digit count of PROJECT numbers.

    Raises
    ------
    InvalidKind
        If `kind` is not a NoteKind member.
    InvalidTimestamp
        If `now` is not a date or datetime.
    DisambiguatorExhausted
        If the suffix source yields a value outside 0..999999.
    """
    if not isinstance(kind, NoteKind):
        raise InvalidKind(kind)

    return _FORMATTERS[kind](_coerce_timestamp(now), source, project_width)


def parse_daily(identifier: str) -> date:
    """
    Parse a DAILY identifier (or the date prefix of a longer one) back into a date.

    Raises
    ------
    InvalidTimestamp
        If the first ten characters are not a valid YYYY-MM-DD date.
    """
    head = identifier[:10]
    try:
        parsed = datetime.strptime(head, "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidTimestamp(f"not a daily identifier: {identifier!r}") from e

    # strptime accepts unpadded fields; identifiers are always padded.
    if _date_part(datetime.combine(parsed, time())) != head:
        raise InvalidTimestamp(f"not a daily identifier: {identifier!r}")
    return parsed
