"""
Prefixed sequence codes (P0042, T007, ...).

A code is a prefix followed by a zero-padded number. Parsing is the reverse:
a case-insensitive prefix match followed by a run of digits; anything after
the digits (a title, a file extension) is ignored, so `p0042 Garden.md`
parses as 42 for prefix P.
"""

from typing import Optional

from .types import SequenceSpec


def format_code(spec: SequenceSpec, value: int) -> str:
    """Render `value` as prefix + zero-padded digits."""
    spec = spec.normalized()
    return f"{spec.prefix}{value:0{spec.width}d}"


def parse_code(name: str, spec: SequenceSpec) -> Optional[int]:
    """Return the numeric part of `name`, or None if it is not a code for `spec`."""
    spec = spec.normalized()
    prefix_len = len(spec.prefix)

    if name[:prefix_len].lower() != spec.prefix.lower():
        return None

    rest = name[prefix_len:]
    digits_end = 0
    while digits_end < len(rest) and rest[digits_end] in "0123456789":
        digits_end += 1

    if digits_end == 0:
        return None
    return int(rest[:digits_end])


def next_value(spec: SequenceSpec, after: Optional[str] = None) -> int:
    """
    Number that follows `after`.

    Falls back to `spec.start` when there is no previous code, when it does
    not parse, or when it lies below the start value.
    """
    spec = spec.normalized()
    if not after:
        return spec.start

    previous = parse_code(after, spec)
    if previous is None or previous < spec.start:
        return spec.start
    return previous + 1
