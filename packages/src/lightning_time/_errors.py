"""Conversion error raised by the Lightning Time codecs.

There is a single error kind.  It covers text that does not match the
alternate-time grammar, ISO time-of-day text that cannot be read, and
the (unreachable for valid digits) case of a reconstructed time of day
falling outside the day.

Conversions are pure and deterministic, so a failed conversion is
never worth retrying with the same input.  Callers either get a fully
populated value or this exception, never a partial result.

Invalid constructor arguments for the value types
(:class:`~lightning_time._codec.LightningTime`,
:class:`~lightning_time._time_of_day.TimeOfDay`, ...) raise a plain
:class:`ValueError` instead; those are programming errors, not
conversion failures.
"""

from __future__ import annotations


class InvalidConversion(ValueError):
    """A value could not be converted to or from Lightning Time.

    Subclasses :class:`ValueError` so that generic ``except ValueError``
    handlers keep working.

    Args:
        message: Human-readable description of the failure.
        text: The offending input text, when the failure came from
            parsing.  ``None`` otherwise.
    """

    def __init__(self, message: str = "Invalid conversion", *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text
