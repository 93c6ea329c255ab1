"""Display colors derived from Lightning Time.

Each of the three colors has one "moving" channel built from two
adjacent digits (high nibble = the more significant digit) and two
channels fixed by a :class:`ColorScheme`::

    bolt   Rgb(bolts:zaps,      scheme.bolt[0],  scheme.bolt[1])
    zap    Rgb(scheme.zap[0],   zaps:sparks,     scheme.zap[1])
    spark  Rgb(scheme.spark[0], scheme.spark[1], sparks:charges)

``subcharges`` does not take part.

The scheme is always passed explicitly; ``ColorScheme()`` is the
documented default (bolt ``(161, 0)``, zap ``(50, 214)``, spark
``(246, 133)``).
"""

from __future__ import annotations

from dataclasses import dataclass

from lightning_time._codec import DIGIT_BASE, LightningTime
from lightning_time._validation import require_int_in_range

_BYTE_RANGE = 256

BasePair = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Rgb:
    """An sRGB color with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            require_int_in_range(name, getattr(self, name), _BYTE_RANGE)

    def to_hex(self) -> str:
        """Return ``"rrggbb"`` in lowercase, without a leading ``#``."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """Fixed channels for each derived color.

    Attributes:
        bolt: Green and blue of the bolt color.
        zap: Red and blue of the zap color.
        spark: Red and green of the spark color.

    Raises:
        ValueError: If a pair does not hold exactly two bytes.
    """

    bolt: BasePair = (161, 0)
    zap: BasePair = (50, 214)
    spark: BasePair = (246, 133)

    def __post_init__(self) -> None:
        for name in ("bolt", "zap", "spark"):
            pair = getattr(self, name)
            if len(pair) != 2:
                msg = f"'{name}' must be a pair of bytes, got {pair!r}"
                raise ValueError(msg)
            for index, channel in enumerate(pair):
                require_int_in_range(f"{name}[{index}]", channel, _BYTE_RANGE)


DEFAULT_COLOR_SCHEME = ColorScheme()


@dataclass(frozen=True, slots=True)
class LightningColors:
    """The three colors derived from one Lightning Time value."""

    bolt: Rgb
    zap: Rgb
    spark: Rgb


def colors(value: LightningTime, scheme: ColorScheme) -> LightningColors:
    """Derive the bolt, zap and spark colors of *value* under *scheme*."""
    return LightningColors(
        bolt=Rgb(_pack(value.bolts, value.zaps), scheme.bolt[0], scheme.bolt[1]),
        zap=Rgb(scheme.zap[0], _pack(value.zaps, value.sparks), scheme.zap[1]),
        spark=Rgb(scheme.spark[0], scheme.spark[1], _pack(value.sparks, value.charges)),
    )


def _pack(high: int, low: int) -> int:
    return high * DIGIT_BASE + low


def format_colors(derived: LightningColors) -> str:
    """Render as ``"#rrggbb,#rrggbb,#rrggbb"`` (bolt, zap, spark)."""
    return ",".join(f"#{color.to_hex()}" for color in (derived.bolt, derived.zap, derived.spark))
