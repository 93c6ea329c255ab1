"""Wall-clock port and local-time adapter.

Provides WallClockPort (Protocol) and SystemWallClock, the source of
"the current time of day" behind :func:`lightning_time.now`.

**Why a port?** Lightning Time is defined on the local time of day,
which changes every call.  Routing the sample through a Protocol lets
tests inject a fixed instant (see
:class:`lightning_time.testing.FakeWallClock`) instead of patching
``time``.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from lightning_time._time_of_day import NANOS_PER_SECOND, TimeOfDay


@runtime_checkable
class WallClockPort(Protocol):
    """Source of the current local time of day."""

    def now(self) -> TimeOfDay:
        """Return the current local time of day.

        Returns:
            A :class:`TimeOfDay` with nanosecond resolution (actual
            precision depends on the platform clock).
        """
        ...


class SystemWallClock:
    """Production wall clock reading the system's local time.

    Satisfies :class:`WallClockPort` via structural subtyping — no
    base-class inheritance required (PEP 544).

    Samples ``time.time_ns()`` once and splits it with
    ``time.localtime()``, so the seconds and the nanoseconds always
    belong to the same instant.
    """

    def now(self) -> TimeOfDay:
        """Return the current local time of day."""
        stamp = time.time_ns()
        seconds, nanos = divmod(stamp, NANOS_PER_SECOND)
        local = time.localtime(seconds)
        # tm_sec can be 60 (or 61) on leap-second aware platforms.
        return TimeOfDay(local.tm_hour, local.tm_min, min(local.tm_sec, 59), nanos)
