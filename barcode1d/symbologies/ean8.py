"""EAN-8: seven data digits and a check digit, all left digits odd parity."""

from typing import Any, ClassVar

from barcode1d.errors import UnencodableCharactersError, UndecodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.ean13 import (
    LEFT_PATTERNS_RLE,
    MIDDLE_GUARD_PATTERN_RLE,
    RIGHT_PATTERNS_RLE,
    SIDE_GUARD_PATTERN_RLE,
    FixedLengthDigitBarcode,
    read_halves,
    to_fixed_rle,
    weighted_mod10,
)


class EAN8(FixedLengthDigitBarcode):
    """EAN-8 barcode."""

    symbology: ClassVar[Symbology] = Symbology.EAN_8
    PAYLOAD_LENGTH: ClassVar[int] = 7

    BARS_LENGTH: ClassVar[int] = 67
    RLE_LENGTH: ClassVar[int] = 43

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        value = str(value)
        if not cls.can_encode(value, checksum_included=False):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        return weighted_mod10(value, 3, 1)

    @property
    def number_system(self) -> str:
        return self._value[:3]

    @property
    def product_code(self) -> str:
        return self._value[3:7]

    def _native_rle(self) -> str:
        digits = self._encoded_string
        left = "".join(LEFT_PATTERNS_RLE[digit]["o"] for digit in digits[:4])
        right = "".join(RIGHT_PATTERNS_RLE[digit] for digit in digits[4:])
        return SIDE_GUARD_PATTERN_RLE + left + MIDDLE_GUARD_PATTERN_RLE + right + SIDE_GUARD_PATTERN_RLE

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "EAN8":
        resolved: BarcodeOptions = cls.resolve_options(**options)
        rle = to_fixed_rle(pattern, cls.BARS_LENGTH, cls.RLE_LENGTH, resolved)
        if not (
            rle[0:3] == SIDE_GUARD_PATTERN_RLE
            and rle[40:43] == SIDE_GUARD_PATTERN_RLE
            and rle[19:24] == MIDDLE_GUARD_PATTERN_RLE
        ):
            raise UnencodableCharactersError("Missing or incorrect guard patterns")

        left_digits, right_digits, left_parities = read_halves(rle, 3, 24, 4)
        if left_parities != "oooo":
            raise UndecodableCharactersError(f"Weird parity: {left_parities}")
        return cls._from_decoded(left_digits + right_digits, **options)
