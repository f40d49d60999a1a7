"""
Code 93.

A denser relative of Code 3 of 9: each character is three bars and three
spaces over nine modules, so patterns are rle rather than wide/narrow. Two
mod 47 check characters (C and K) are always present. Four extra shift
characters give full ASCII; a value is promoted to full ASCII whenever it
holds anything outside the native alphabet.
"""

import logging
from typing import Any, ClassVar

import structlog

from barcode1d.errors import ChecksumError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import Barcode1D, lookup_chunks, orient_pattern, to_rle_pattern
from barcode1d.symbologies.full_ascii import (
    build_full_ascii_table,
    build_reverse_table,
    decode_with,
    encode_with,
)

logger = structlog.wrap_logger(logging.getLogger(__name__))

# Shift characters, shown on labels as ($) (%) (/) (+)
SHIFT_DOLLAR = "\x80"
SHIFT_PERCENT = "\x81"
SHIFT_SLASH = "\x82"
SHIFT_PLUS = "\x83"
SHIFT_CHARACTERS = SHIFT_DOLLAR + SHIFT_PERCENT + SHIFT_SLASH + SHIFT_PLUS

NATIVE_CHARACTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"
CHAR_SEQUENCE = NATIVE_CHARACTERS + SHIFT_CHARACTERS

# Indexed by position in CHAR_SEQUENCE
PATTERNS_RLE = (
    "131112", "111213", "111312", "111411", "121113",
    "121212", "121311", "111114", "131211", "141111",
    "211113", "211212", "211311", "221112", "221211",
    "231111", "112113", "112212", "112311", "122112",
    "132111", "111123", "111222", "111321", "121122",
    "131121", "212112", "212211", "211122", "211221",
    "221121", "222111", "112122", "112221", "122121",
    "123111", "121131", "311112", "311211", "321111",
    "112131", "113121", "211131", "121221", "312111",
    "311121", "122211",
)  # fmt: skip

PATTERNS = dict(zip(CHAR_SEQUENCE, PATTERNS_RLE))
DECODE_TABLE = {rle: char for char, rle in PATTERNS.items()}

LEFT_GUARD_PATTERN_RLE = "111141"
RIGHT_GUARD_PATTERN_RLE = "1111411"

FULL_ASCII_LOOKUP = build_full_ascii_table(SHIFT_DOLLAR, SHIFT_PERCENT, SHIFT_SLASH, SHIFT_PLUS)
FULL_ASCII_REVERSE_LOOKUP = build_reverse_table(FULL_ASCII_LOOKUP, SHIFT_PERCENT)


def _weighted_check(value: str, max_weight: int) -> str:
    total = sum(
        (index % max_weight + 1) * CHAR_SEQUENCE.index(char) for index, char in enumerate(reversed(value))
    )
    return CHAR_SEQUENCE[total % 47]


class Code93(Barcode1D):
    """Code 93 barcode."""

    symbology: ClassVar[Symbology] = Symbology.CODE_93

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return bool(value) and all(ord(char) < 128 for char in value)

    @classmethod
    def requires_full_ascii(cls, value: Any) -> bool:
        """True if the value holds characters outside the native alphabet."""
        return any(char not in NATIVE_CHARACTERS for char in str(value))

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> str:
        """
        Compute the two check characters C and K.

        The value must already be in full ASCII form if it needs it.
        """
        value = str(value)
        if not value or any(char not in PATTERNS for char in value):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        check_c = _weighted_check(value, 20)
        check_k = _weighted_check(value + check_c, 15)
        return check_c + check_k

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, str]:
        value = str(value)
        return value[:-2], value[-2:]

    @staticmethod
    def encode_full_ascii(value: str) -> str:
        """Rewrite any ASCII string into the native alphabet plus shift characters."""
        return encode_with(FULL_ASCII_LOOKUP, value)

    @staticmethod
    def decode_full_ascii(value: str) -> str:
        """Collapse shift pairs back to ASCII; strings without shifts pass through."""
        if not any(char in SHIFT_CHARACTERS for char in value):
            return value
        return decode_with(FULL_ASCII_REVERSE_LOOKUP, SHIFT_CHARACTERS, value)

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        value = str(value)

        if options.checksum_included:
            # Encoded form: native characters and shifts, then C and K
            if len(value) < 3 or any(char not in PATTERNS for char in value):
                raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")
            if not self.validate_check_digit_for(value):
                raise ChecksumError(f"Invalid {self.symbology.value} check characters in {value!r}")
            full_ascii_value, check_digit = self.split_payload_and_check_digit(value)
            self.full_ascii = any(char in SHIFT_CHARACTERS for char in full_ascii_value)
            self.full_ascii_value = full_ascii_value
            return self.decode_full_ascii(full_ascii_value), check_digit, value

        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")

        self.full_ascii = options.force_full_ascii or self.requires_full_ascii(value)
        self.full_ascii_value = self.encode_full_ascii(value) if self.full_ascii else value
        check_digit = self.generate_check_digit_for(self.full_ascii_value)
        return value, check_digit, self.full_ascii_value + check_digit

    def _native_rle(self) -> str:
        return (
            LEFT_GUARD_PATTERN_RLE
            + "".join(PATTERNS[char] for char in self._encoded_string)
            + RIGHT_GUARD_PATTERN_RLE
        )

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "Code93":
        """
        Decode an rle (or bars) pattern.

        Raises:
            UnencodableCharactersError: not rle/bars, or guards not found
            UndecodableCharactersError: unknown character pattern
            ChecksumError: C or K does not match
        """
        resolved = cls.resolve_options(**options)
        rle = to_rle_pattern(pattern, resolved, max_width=4)
        rle = orient_pattern(rle, LEFT_GUARD_PATTERN_RLE, RIGHT_GUARD_PATTERN_RLE, cls.symbology)
        middle = rle[len(LEFT_GUARD_PATTERN_RLE) : len(rle) - len(RIGHT_GUARD_PATTERN_RLE)]
        decoded = "".join(lookup_chunks(middle, 6, DECODE_TABLE))
        logger.debug("Decoded characters", symbology=cls.symbology.value, count=len(decoded))
        return cls(decoded, **{**options, "checksum_included": True})
