"""lightning_time.

Lightning Time: a base-16 fractal clock.  Converts between wall-clock
time of day and ``bolts~zaps~sparks|charges subcharges`` digits, and
derives display colors from them.
"""

from importlib.metadata import PackageNotFoundError, version

from lightning_time._clock import SystemWallClock, WallClockPort
from lightning_time._codec import (
    MILLIS_PER_SUBCHARGE,
    TICKS_PER_DAY,
    LightningTime,
    from_time_of_day,
    now,
    to_time_of_day,
)
from lightning_time._colors import (
    DEFAULT_COLOR_SCHEME,
    ColorScheme,
    LightningColors,
    Rgb,
    colors,
    format_colors,
)
from lightning_time._errors import InvalidConversion
from lightning_time._logging import JsonFormatter, configure_logging
from lightning_time._settings import ColorSchemeSettings, LoggingSettings, Settings
from lightning_time._text import format_stripped, format_time, parse
from lightning_time._time_of_day import TimeOfDay

try:
    __version__ = version("lightning-time")
except PackageNotFoundError:
    # Source checkout without installed metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Clock codec
    "MILLIS_PER_SUBCHARGE",
    "TICKS_PER_DAY",
    "LightningTime",
    "from_time_of_day",
    "now",
    "to_time_of_day",
    # Text codec
    "format_stripped",
    "format_time",
    "parse",
    # Colors
    "DEFAULT_COLOR_SCHEME",
    "ColorScheme",
    "LightningColors",
    "Rgb",
    "colors",
    "format_colors",
    # Time of day
    "TimeOfDay",
    # Wall clock
    "SystemWallClock",
    "WallClockPort",
    # Errors
    "InvalidConversion",
    # Logging
    "JsonFormatter",
    "configure_logging",
    # Settings
    "ColorSchemeSettings",
    "LoggingSettings",
    "Settings",
]
