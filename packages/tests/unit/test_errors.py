"""Unit tests for lightning_time._errors — InvalidConversion.

Test Techniques Used:
    - Specification-based Testing: Message, text attribute, hierarchy
"""

from __future__ import annotations

import pytest

from lightning_time._errors import InvalidConversion


class TestInvalidConversion:
    """InvalidConversion contract.

    Technique: Specification-based Testing.
    """

    def test_is_a_value_error(self) -> None:
        assert issubclass(InvalidConversion, ValueError)

    def test_default_message(self) -> None:
        assert str(InvalidConversion()) == "Invalid conversion"

    def test_text_defaults_to_none(self) -> None:
        assert InvalidConversion("boom").text is None

    def test_carries_text(self) -> None:
        exc = InvalidConversion("bad input", text="f~~|")
        assert exc.text == "f~~|"
        assert str(exc) == "bad input"

    def test_can_be_raised_and_caught_as_value_error(self) -> None:
        with pytest.raises(ValueError, match="bad"):
            raise InvalidConversion("bad")
