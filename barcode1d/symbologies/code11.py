"""
Code 11 (USD-8).

Digits and the dash. One check digit (C) is added; payloads longer than
nine characters get a second one (K).
"""

from typing import Any, ClassVar

from barcode1d.errors import UnencodableCharactersError
from barcode1d.models import Symbology
from barcode1d.symbologies.base import WideNarrowBarcode

CHAR_SEQUENCE = "0123456789-"

PATTERNS = {
    "0": "nnnnw",
    "1": "wnnnw",
    "2": "nwnnw",
    "3": "wwnnn",
    "4": "nnwnw",
    "5": "wnwnn",
    "6": "nwwnn",
    "7": "nnnww",
    "8": "wnnwn",
    "9": "wnnnn",
    "-": "nnwnn",
}

GUARD_PATTERN_WN = "nnwwn"


def _weighted_sum(value: str, max_weight: int) -> int:
    return sum(
        (index % max_weight + 1) * CHAR_SEQUENCE.index(char) for index, char in enumerate(reversed(value))
    )


class Code11(WideNarrowBarcode):
    """Code 11 barcode."""

    symbology: ClassVar[Symbology] = Symbology.CODE_11

    START_PATTERN: ClassVar[str] = GUARD_PATTERN_WN
    STOP_PATTERN: ClassVar[str] = GUARD_PATTERN_WN
    PATTERNS: ClassVar[dict[str, str]] = PATTERNS

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return bool(value) and all(char in PATTERNS for char in value)

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> str:
        """
        Compute C, and K for payloads over nine characters.

        C weights cycle 1-11 from the right, mod 11. K covers the payload
        plus C with weights cycling 1-10, reduced mod 9.
        """
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        value = str(value)
        check_c = CHAR_SEQUENCE[_weighted_sum(value, 11) % 11]
        if len(value) <= 9:
            return check_c
        check_k = CHAR_SEQUENCE[_weighted_sum(value + check_c, 10) % 9]
        return check_c + check_k

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, str]:
        value = str(value)
        size = 2 if len(value) > 11 else 1
        return value[:-size], value[-size:]
