"""
Interleaved 2 of 5.

Digits are encoded in pairs: the first digit of each pair in the bars,
the second in the spaces between them. The encoded string is padded with
a leading zero to an even length. The value is kept as an integer.
"""

import logging
from typing import Any, ClassVar

import structlog

from barcode1d.errors import ChecksumError, UndecodableCharactersError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import Barcode1D, orient_pattern, to_wn_pattern
from barcode1d.symbologies.two_of_five import TWO_OF_FIVE_PATTERNS

logger = structlog.wrap_logger(logging.getLogger(__name__))

START_PATTERN = "nnnn"
STOP_PATTERN = "wnn"

DECODE_TABLE = {wn: digit for digit, wn in TWO_OF_FIVE_PATTERNS.items()}

# Some generators fill the spaces of an odd final digit with all narrows
ABSENT_DIGIT_SENTINEL = "nnnnn"


def interleave(two_digits: str) -> str:
    bars = TWO_OF_FIVE_PATTERNS[two_digits[0]]
    spaces = TWO_OF_FIVE_PATTERNS[two_digits[1]]
    return "".join(bar + space for bar, space in zip(bars, spaces))


class Interleaved2of5(Barcode1D):
    """Interleaved 2 of 5 barcode."""

    symbology: ClassVar[Symbology] = Symbology.INTERLEAVED_2_OF_5

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        if isinstance(value, int):
            return value >= 0
        value = str(value)
        return value.isascii() and value.isdigit()

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        """
        Compute the check digit.

        The payload is left-padded to an odd length, then weighted 3, 1,
        3, ... from the left.
        """
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        value = str(value)
        if len(value) % 2 == 0:
            value = "0" + value
        total = sum(int(digit) * (1 if index % 2 else 3) for index, digit in enumerate(value))
        return (10 - total % 10) % 10

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, int]:
        value = str(int(value))
        if len(value) % 2:
            value = "0" + value
        return value[:-1], int(value[-1])

    @classmethod
    def validate_check_digit_for(cls, value: Any) -> bool:
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot validate check digit for {value!r}")
        return super().validate_check_digit_for(value)

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")
        digits = str(value)

        if options.checksum_included:
            if not self.validate_check_digit_for(digits):
                raise ChecksumError(f"Invalid {self.symbology.value} check digit in {digits!r}")
            number, check_digit, encoded = int(digits) // 10, int(digits) % 10, digits
        elif options.skip_checksum:
            number, check_digit, encoded = int(digits), None, digits
        else:
            number = int(digits)
            check_digit = self.generate_check_digit_for(number)
            encoded = f"{number}{check_digit}"

        if len(encoded) % 2:
            encoded = "0" + encoded
        return number, check_digit, encoded

    def _native_wn(self) -> str:
        pairs = (self._encoded_string[index : index + 2] for index in range(0, len(self._encoded_string), 2))
        return START_PATTERN + "".join(interleave(pair) for pair in pairs) + STOP_PATTERN

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "Interleaved2of5":
        """
        Decode a wn or rle pattern.

        Raises:
            UnencodableCharactersError: not wn/rle, guards not found, or
                a body that is not a whole number of digit pairs
            UndecodableCharactersError: a bar or space group is not a digit
        """
        resolved = cls.resolve_options(**options)
        wn = to_wn_pattern(pattern, resolved)
        wn = orient_pattern(wn, START_PATTERN, STOP_PATTERN, cls.symbology)
        middle = wn[len(START_PATTERN) : len(wn) - len(STOP_PATTERN)]
        if not middle or len(middle) % 10:
            raise UnencodableCharactersError("Wrong number of bars")

        digits = []
        last_offset = len(middle) - 10
        for offset in range(0, len(middle), 10):
            chunk = middle[offset : offset + 10]
            bars, spaces = chunk[0::2], chunk[1::2]
            if bars not in DECODE_TABLE:
                raise UndecodableCharactersError(f"Invalid sequence: {bars}")
            digits.append(DECODE_TABLE[bars])
            if offset == last_offset and spaces == ABSENT_DIGIT_SENTINEL:
                logger.debug("Final digit absent", symbology=cls.symbology.value)
                continue
            if spaces not in DECODE_TABLE:
                raise UndecodableCharactersError(f"Invalid sequence: {spaces}")
            digits.append(DECODE_TABLE[spaces])

        return cls._from_decoded("".join(digits), **options)
