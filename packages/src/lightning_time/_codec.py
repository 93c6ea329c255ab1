"""Clock codec: time of day ⇄ Lightning Time digits.

Lightning Time splits one calendar day into ``16**5`` equal ticks and
writes the elapsed tick count as five hex digits, most significant
first::

    bolts  zaps  sparks  charges  subcharges
      8     0      0       0         0        → 12:00:00 (half a day)

One bolt is 1/16 of a day (1 h 30 min), one zap 1/256 (5 min 37.5 s),
one spark 1/4096 (~21.1 s), one charge 1/65536 (~1.32 s) and one
subcharge 1/1048576 (~82.4 ms).

The forward conversion is computed in floating point, dividing by 16
level by level and taking ``floor(level) % 16`` at each one.  Digit
boundaries therefore match reference outputs bit-for-bit; do not
"simplify" it into integer shifts.
"""

from __future__ import annotations

import datetime
import logging
import math
from dataclasses import dataclass

from lightning_time._clock import SystemWallClock, WallClockPort
from lightning_time._errors import InvalidConversion
from lightning_time._time_of_day import TimeOfDay
from lightning_time._validation import require_int_in_range

logger = logging.getLogger(__name__)

DIGIT_BASE = 16
TICKS_PER_DAY = DIGIT_BASE**5
MILLIS_PER_DAY = 86_400_000
MILLIS_PER_SUBCHARGE = MILLIS_PER_DAY / TICKS_PER_DAY

_MILLIS_PER_HOUR = 1_000.0 * 60.0 * 60.0
_MILLIS_PER_MINUTE = 1_000.0 * 60.0


@dataclass(frozen=True, slots=True)
class LightningTime:
    """Immutable five-digit Lightning Time value.

    Each field is one base-16 digit (0–15), most significant first.
    All digits default to zero (midnight).

    Raises:
        ValueError: If a digit is out of range or not an ``int``.
    """

    bolts: int = 0
    zaps: int = 0
    sparks: int = 0
    charges: int = 0
    subcharges: int = 0

    def __post_init__(self) -> None:
        for name in ("bolts", "zaps", "sparks", "charges", "subcharges"):
            require_int_in_range(name, getattr(self, name), DIGIT_BASE)

    @property
    def elapsed(self) -> int:
        """Ticks elapsed since midnight, in ``[0, 16**5)``."""
        return (
            ((self.bolts * DIGIT_BASE + self.zaps) * DIGIT_BASE + self.sparks) * DIGIT_BASE
            + self.charges
        ) * DIGIT_BASE + self.subcharges

    @classmethod
    def from_time(cls, value: datetime.time | TimeOfDay) -> LightningTime:
        """Convert a :class:`datetime.time` or :class:`TimeOfDay`."""
        if isinstance(value, datetime.time):
            value = TimeOfDay.from_time(value)
        return from_time_of_day(value.hour, value.minute, value.second, value.nanosecond)

    def to_time_of_day(self) -> TimeOfDay:
        """Shortcut for :func:`to_time_of_day`."""
        return to_time_of_day(self)


def from_time_of_day(
    hour: int,
    minute: int,
    second: int,
    nanosecond: int = 0,
) -> LightningTime:
    """Convert a wall-clock time of day to Lightning Time.

    Total for every valid time of day: the result always has five
    in-range digits.  The time within the current subcharge is
    discarded (floor, never round).

    Raises:
        ValueError: If a component is out of range (caller error).
    """
    TimeOfDay(hour, minute, second, nanosecond)

    millis = (
        _MILLIS_PER_HOUR * hour
        + _MILLIS_PER_MINUTE * minute
        + 1_000.0 * second
        + nanosecond / 1.0e6
    )

    total_subcharges = millis / MILLIS_PER_SUBCHARGE
    total_charges = total_subcharges / DIGIT_BASE
    total_sparks = total_charges / DIGIT_BASE
    total_zaps = total_sparks / DIGIT_BASE
    total_bolts = total_zaps / DIGIT_BASE

    return LightningTime(
        bolts=math.floor(total_bolts) % DIGIT_BASE,
        zaps=math.floor(total_zaps) % DIGIT_BASE,
        sparks=math.floor(total_sparks) % DIGIT_BASE,
        charges=math.floor(total_charges) % DIGIT_BASE,
        subcharges=math.floor(total_subcharges) % DIGIT_BASE,
    )


def to_time_of_day(value: LightningTime) -> TimeOfDay:
    """Convert Lightning Time back to the start of its tick.

    Sub-nanosecond remainders round up to the next whole nanosecond,
    so feeding the result back into :func:`from_time_of_day` yields
    the same five digits.

    Raises:
        InvalidConversion: If the reconstructed time falls outside the
            day.  Unreachable for values built from in-range digits.
    """
    millis = value.elapsed * MILLIS_PER_SUBCHARGE

    seconds = math.floor(millis / 1_000.0)
    leftover_millis = millis % 1_000.0
    nanosecond = math.ceil(leftover_millis * 1.0e6)

    try:
        return TimeOfDay.from_seconds(seconds, nanosecond)
    except ValueError as exc:
        logger.error("Reconstructed time out of range for %r: %s", value, exc)
        raise InvalidConversion(f"Cannot convert {value!r} to a time of day") from exc


def now(clock: WallClockPort | None = None) -> LightningTime:
    """Return the current local time as Lightning Time.

    Args:
        clock: Source of the current time of day.  Defaults to
            :class:`SystemWallClock`.
    """
    current = (clock or SystemWallClock()).now()
    result = LightningTime.from_time(current)
    logger.debug("Sampled %s -> %r", current, result)
    return result
