"""Public test-support utilities for Lightning Time.

- :class:`FakeWallClock` — deterministic wall clock for ``now()``.
- :func:`make_settings` — ``Settings`` factory that ignores the environment.
"""

from lightning_time.testing._clock import FakeWallClock
from lightning_time.testing._settings import make_settings

__all__ = [
    "FakeWallClock",
    "make_settings",
]
