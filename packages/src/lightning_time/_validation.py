"""Range checks shared by the value types."""

from __future__ import annotations


def require_int_in_range(name: str, value: object, upper: int) -> None:
    """Raise :class:`ValueError` unless ``0 <= value < upper``.

    ``bool`` is rejected even though it subclasses ``int``; ``True``
    silently becoming ``1`` would hide a caller bug.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{name}' must be an int, got {type(value).__name__}"
        raise ValueError(msg)
    if not 0 <= value < upper:
        msg = f"'{name}' must be in 0..{upper - 1}, got {value}"
        raise ValueError(msg)
