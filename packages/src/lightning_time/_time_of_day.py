"""Nanosecond-precision time-of-day value.

:class:`datetime.time` stops at microseconds, but the clock codec
works with nanoseconds.  :class:`TimeOfDay` fills that gap and knows
how to read and write the ``HH:MM:SS[.fraction]`` notation used on the
command line.

Textual form::

    12:00:00            whole seconds (fraction omitted)
    12:00:13.183        millisecond precision
    12:00:13.183593     microsecond precision
    12:00:13.183593750  nanosecond precision

``isoformat()`` picks the shortest of the three fraction widths that
represents the value exactly.  ``parse()`` accepts one to nine
fraction digits.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass

from lightning_time._errors import InvalidConversion
from lightning_time._validation import require_int_in_range

SECONDS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000

_ISO_PATTERN = re.compile(
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?"
)


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """Wall-clock time of day, from midnight up to the last nanosecond.

    Attributes:
        hour: 0–23.
        minute: 0–59.
        second: 0–59.  Leap seconds are not representable.
        nanosecond: 0–999,999,999.

    Raises:
        ValueError: If any field is out of range or not an ``int``.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        require_int_in_range("hour", self.hour, 24)
        require_int_in_range("minute", self.minute, 60)
        require_int_in_range("second", self.second, 60)
        require_int_in_range("nanosecond", self.nanosecond, NANOS_PER_SECOND)

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_seconds(cls, seconds: int, nanosecond: int = 0) -> TimeOfDay:
        """Build a time of day from whole seconds since midnight.

        Raises:
            ValueError: If *seconds* is outside ``0..86_399`` or
                *nanosecond* is out of range.
        """
        require_int_in_range("seconds", seconds, SECONDS_PER_DAY)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_time(cls, value: datetime.time) -> TimeOfDay:
        """Convert a :class:`datetime.time`, ignoring its ``tzinfo``."""
        return cls(value.hour, value.minute, value.second, value.microsecond * 1_000)

    @classmethod
    def parse(cls, text: str) -> TimeOfDay:
        """Parse ``HH:MM:SS`` with an optional ``.fraction`` of 1–9 digits.

        Raises:
            InvalidConversion: If *text* is not in that form or a
                component is out of range.
        """
        match = _ISO_PATTERN.fullmatch(text)
        if match is None:
            msg = f"Not a time of day (expected HH:MM:SS[.fraction]): {text!r}"
            raise InvalidConversion(msg, text=text)

        fraction = match["fraction"] or ""
        try:
            return cls(
                int(match["hour"]),
                int(match["minute"]),
                int(match["second"]),
                int(fraction.ljust(9, "0")),
            )
        except ValueError as exc:
            raise InvalidConversion(f"Time of day out of range: {exc}", text=text) from exc

    # -- conversions --------------------------------------------------------

    @property
    def seconds_from_midnight(self) -> int:
        """Whole seconds elapsed since midnight."""
        return (self.hour * 60 + self.minute) * 60 + self.second

    def to_time(self) -> datetime.time:
        """Convert to :class:`datetime.time`, truncating to microseconds."""
        return datetime.time(self.hour, self.minute, self.second, self.nanosecond // 1_000)

    def isoformat(self) -> str:
        """Render as ``HH:MM:SS`` plus the shortest exact fraction."""
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        nanos = self.nanosecond
        if nanos == 0:
            return base
        if nanos % 1_000_000 == 0:
            return f"{base}.{nanos // 1_000_000:03d}"
        if nanos % 1_000 == 0:
            return f"{base}.{nanos // 1_000:06d}"
        return f"{base}.{nanos:09d}"

    def __str__(self) -> str:
        return self.isoformat()
