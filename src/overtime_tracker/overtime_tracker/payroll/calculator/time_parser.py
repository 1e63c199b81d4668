from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_INT_RE = re.compile(r"[+-]?[0-9]+")
_WHITESPACE_RE = re.compile(r"\s")


@dataclass(frozen=True)
class EndTime:
    """Clock-out time read from a free-form token."""

    hour: int
    minute: int

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute


def _to_int(value: str) -> Optional[int]:
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # more digits than int() accepts from a string
        return None


def _end_time(hour: int, minute: int) -> Optional[EndTime]:
    end = EndTime(hour=hour, minute=minute)
    try:
        float(end.minutes)
    except OverflowError:
        return None
    return end


def parse_end_time(token: str) -> Optional[EndTime]:
    """Read a clock-out time from a spreadsheet cell or form field.

    Shapes are tried in this order:

    - ``H.MM`` ("4.30"): hours below 12 are taken as PM, so "4.30" is 16:30.
    - ``H:MM`` / ``HH:MM`` ("18:30"): a literal 24-hour time.
    - three or four bare digits ("630", "1830"): the last two are minutes.

    Returns None for anything else, including values too large to do
    arithmetic with; never raises.
    """
    token = str(token or "")

    if "." in token:
        parts = token.split(".")
        hour = _to_int(parts[0])
        minute = _to_int(parts[1] or "0")
        if hour is None or minute is None:
            return None
        return _end_time(hour + 12 if hour < 12 else hour, minute)

    if ":" in token:
        parts = token.split(":")
        if len(parts) < 2:
            return None
        hour = _to_int(parts[0])
        minute = _to_int(parts[1])
        if hour is None or minute is None:
            return None
        return _end_time(hour, minute)

    digits = _WHITESPACE_RE.sub("", token)
    if len(digits) not in (3, 4):
        return None
    hour = _to_int(digits[:-2])
    minute = _to_int(digits[-2:])
    if hour is None or minute is None:
        return None
    return _end_time(hour, minute)
