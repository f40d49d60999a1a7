"""
Code 3 of 9 (Code 39).

Each character is nine elements, three of them wide, separated by a
narrow space. The asterisk start/stop character frames the symbol. The
mod 43 check character is optional and skipped by default.
"""

from typing import Any, ClassVar

from barcode1d.errors import UnencodableCharactersError
from barcode1d.models import Symbology
from barcode1d.symbologies.base import WideNarrowBarcode
from barcode1d.symbologies.full_ascii import (
    build_full_ascii_table,
    build_reverse_table,
    decode_with,
    encode_with,
)

CHAR_SEQUENCE = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"

PATTERNS = {
    "0": "nnnwwnwnn",
    "1": "wnnwnnnnw",
    "2": "nnwwnnnnw",
    "3": "wnwwnnnnn",
    "4": "nnnwwnnnw",
    "5": "wnnwwnnnn",
    "6": "nnwwwnnnn",
    "7": "nnnwnnwnw",
    "8": "wnnwnnwnn",
    "9": "nnwwnnwnn",
    "A": "wnnnnwnnw",
    "B": "nnwnnwnnw",
    "C": "wnwnnwnnn",
    "D": "nnnnwwnnw",
    "E": "wnnnwwnnn",
    "F": "nnwnwwnnn",
    "G": "nnnnnwwnw",
    "H": "wnnnnwwnn",
    "I": "nnwnnwwnn",
    "J": "nnnnwwwnn",
    "K": "wnnnnnnww",
    "L": "nnwnnnnww",
    "M": "wnwnnnnwn",
    "N": "nnnnwnnww",
    "O": "wnnnwnnwn",
    "P": "nnwnwnnwn",
    "Q": "nnnnnnwww",
    "R": "wnnnnnwwn",
    "S": "nnwnnnwwn",
    "T": "nnnnwnwwn",
    "U": "wwnnnnnnw",
    "V": "nwwnnnnnw",
    "W": "wwwnnnnnn",
    "X": "nwnnwnnnw",
    "Y": "wwnnwnnnn",
    "Z": "nwwnwnnnn",
    "-": "nwnnnnwnw",
    ".": "wwnnnnwnn",
    " ": "nwwnnnwnn",
    "$": "nwnwnwnnn",
    "/": "nwnwnnnwn",
    "+": "nwnnnwnwn",
    "%": "nnnwnwnwn",
}

SIDE_GUARD_PATTERN = "nwnnwnwnn"

FULL_ASCII_LOOKUP = build_full_ascii_table("$", "%", "/", "+")
FULL_ASCII_REVERSE_LOOKUP = build_reverse_table(FULL_ASCII_LOOKUP, "%")


class Code3of9(WideNarrowBarcode):
    """Code 3 of 9 barcode."""

    symbology: ClassVar[Symbology] = Symbology.CODE_3_OF_9
    DEFAULT_OPTIONS: ClassVar[dict[str, Any]] = {"skip_checksum": True}

    START_PATTERN: ClassVar[str] = SIDE_GUARD_PATTERN
    STOP_PATTERN: ClassVar[str] = SIDE_GUARD_PATTERN
    PATTERNS: ClassVar[dict[str, str]] = PATTERNS

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return bool(value) and all(char in PATTERNS for char in value)

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> str:
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        total = sum(CHAR_SEQUENCE.index(char) for char in str(value))
        return CHAR_SEQUENCE[total % 43]

    @staticmethod
    def encode_full_ascii(value: str) -> str:
        """Rewrite any ASCII string into the native alphabet using shift pairs."""
        return encode_with(FULL_ASCII_LOOKUP, value)

    @staticmethod
    def decode_full_ascii(value: str) -> str:
        """Collapse "$", "%", "/" and "+" shift pairs back to ASCII."""
        return decode_with(FULL_ASCII_REVERSE_LOOKUP, "$%/+", value)
