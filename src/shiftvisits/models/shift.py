"""Shift type definitions and literal date/time formats."""
import re
from datetime import date, datetime, time
from enum import Enum
from typing import Optional

from shiftvisits.errors import MalformedRecordError

# Source documents print dates as DD/MM/YYYY and times as HH:mm:ss
DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M:%S"

_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")
_TIME_RE = re.compile(r"\d{2}:\d{2}:\d{2}")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

# Day shift covers [07:00:00, 19:00:00); everything else is night
DAY_SHIFT_START = time(7, 0, 0)
NIGHT_SHIFT_START = time(19, 0, 0)


def parse_date(value: str) -> date:
    """Parse a zero-padded DD/MM/YYYY literal into a date."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise MalformedRecordError(f"Invalid date {value!r}: expected DD/MM/YYYY")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise MalformedRecordError(f"Invalid date {value!r}: {e}") from e


def parse_time(value: str) -> time:
    """Parse a zero-padded HH:mm:ss literal into a time."""
    if not isinstance(value, str) or not _TIME_RE.fullmatch(value):
        raise MalformedRecordError(f"Invalid time {value!r}: expected HH:mm:ss")
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError as e:
        raise MalformedRecordError(f"Invalid time {value!r}: {e}") from e


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_time(t: time) -> str:
    return t.strftime(TIME_FORMAT)


def day_of_month(shift_date: str) -> Optional[int]:
    """
    Lenient day-of-month lookup.

    Returns None when the value does not split into three '/' parts or
    its first part has no leading integer.
    """
    parts = str(shift_date).split("/")
    if len(parts) != 3:
        return None
    m = _LEADING_INT_RE.match(parts[0])
    if not m:
        return None
    return int(m.group(1))


def is_even_day(shift_date: str) -> Optional[bool]:
    """
    Parity of the shift date's day of month.

    None when the value does not split into three '/' parts. A first part
    with no leading integer counts as odd.
    """
    if len(str(shift_date).split("/")) != 3:
        return None
    day = day_of_month(shift_date)
    return day is not None and day % 2 == 0


class ShiftType(str, Enum):
    """Day/night classification of a visit."""
    DIURNO = "DIURNO"    # Day shift, 07:00:00-18:59:59
    NOTURNO = "NOTURNO"  # Night shift, 19:00:00-06:59:59

    @property
    def label(self) -> str:
        return {
            ShiftType.DIURNO: "Day shift",
            ShiftType.NOTURNO: "Night shift",
        }[self]

    @property
    def is_night(self) -> bool:
        return self is ShiftType.NOTURNO

    @classmethod
    def from_time(cls, value: str) -> "ShiftType":
        """Classify a HH:mm:ss literal. Raises MalformedRecordError if malformed."""
        t = parse_time(value)
        if DAY_SHIFT_START <= t < NIGHT_SHIFT_START:
            return cls.DIURNO
        return cls.NOTURNO
