"""Text codec: Lightning Time ⇄ ``b~z~s|cs`` strings.

Canonical layout (always all five digits, lowercase)::

    8~0~0|00
    │ │ │ ││
    │ │ │ │└ subcharges
    │ │ │ └─ charges
    │ │ └─── sparks
    │ └───── zaps
    └─────── bolts

The stripped layout drops the ``|`` group: ``8~0~0``.

Parsing is more permissive: the ``|`` group is optional, as is its
second digit, and hex digits may be upper case.  Missing digits are 0.

.. note::

   The parser binds the second ``~`` group to *sparks* and the third
   to *zaps*, the reverse of the formatter.  Strings produced by
   existing Lightning Time clocks depend on that mapping, so it is
   kept: ``parse("f~3~a")`` gives ``sparks=3, zaps=0xa``, which
   formats back as ``"f~a~3|00"``.
"""

from __future__ import annotations

import logging
import re

from lightning_time._codec import LightningTime
from lightning_time._errors import InvalidConversion

logger = logging.getLogger(__name__)

_HEX = "[0-9a-fA-F]"

# Compiled once at import; match objects are per call.
_PATTERN = re.compile(
    rf"(?P<bolt>{_HEX})~(?P<spark>{_HEX})~(?P<zap>{_HEX})"
    rf"(?:\|(?P<charge>{_HEX})(?P<subcharge>{_HEX})?)?"
)


def parse(text: str) -> LightningTime:
    """Parse Lightning Time text.

    The whole string must match; leading or trailing characters are
    rejected.

    Raises:
        InvalidConversion: If *text* does not match the grammar.
    """
    match = _PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected Lightning Time text %r", text)
        msg = f"Invalid Lightning Time {text!r} (expected b~s~z[|c[s]] hex digits)"
        raise InvalidConversion(msg, text=text)

    return LightningTime(
        bolts=int(match["bolt"], 16),
        zaps=int(match["zap"], 16),
        sparks=int(match["spark"], 16),
        charges=_optional_digit(match["charge"]),
        subcharges=_optional_digit(match["subcharge"]),
    )


def _optional_digit(group: str | None) -> int:
    return int(group, 16) if group is not None else 0


def format_time(value: LightningTime) -> str:
    """Render the canonical ``b~z~s|cs`` form."""
    return (
        f"{value.bolts:x}~{value.zaps:x}~{value.sparks:x}"
        f"|{value.charges:x}{value.subcharges:x}"
    )


def format_stripped(value: LightningTime) -> str:
    """Render the compact ``b~z~s`` form used for display."""
    return f"{value.bolts:x}~{value.zaps:x}~{value.sparks:x}"
