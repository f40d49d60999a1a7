"""
UPC five digit supplement, mostly seen as the price add-on of a
"Bookland" EAN-13.

The first digit is a currency indicator ("0" pounds, "5" US dollars,
"9" other) and the remaining four are the price. The check digit is
carried only in the parity of the five digits.
"""

from typing import Any, ClassVar

from barcode1d.errors import UndecodableCharactersError, UnencodableCharactersError
from barcode1d.models import Symbology
from barcode1d.symbologies.ean13 import (
    LEFT_PATTERNS_RLE,
    FixedLengthDigitBarcode,
    lookup_parity_digit,
    read_digits,
    read_either_direction,
    to_fixed_rle,
)

PARITY_PATTERNS = {
    "0": "eeooo",
    "1": "eoeoo",
    "2": "eooeo",
    "3": "eoooe",
    "4": "oeeoo",
    "5": "ooeeo",
    "6": "oooee",
    "7": "oeoeo",
    "8": "oeooe",
    "9": "ooeoe",
}

LEFT_GUARD_PATTERN_RLE = "112"
MIDDLE_GUARD_PATTERN_RLE = "11"
MIDDLE_GUARD_OFFSETS = (7, 13, 19, 25)


class UPCSupplemental5(FixedLengthDigitBarcode):
    """UPC Supplemental 5 barcode."""

    symbology: ClassVar[Symbology] = Symbology.UPC_SUPPLEMENTAL_5
    PAYLOAD_LENGTH: ClassVar[int] = 5

    BARS_LENGTH: ClassVar[int] = 47
    RLE_LENGTH: ClassVar[int] = 31

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        """Weights 3 and 9 alternate from the rightmost digit; no complement."""
        if not cls.can_encode(value, checksum_included=False):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        digits = f"{int(value):05d}"[::-1]
        return sum(int(digit) * (9 if index % 2 else 3) for index, digit in enumerate(digits)) % 10

    @property
    def currency_code(self) -> str:
        return self._value[0]

    @property
    def price(self) -> str:
        return self._value[1:5]

    def _native_rle(self) -> str:
        parity = PARITY_PATTERNS[str(self._check_digit)]
        digits = [LEFT_PATTERNS_RLE[digit][parity[index]] for index, digit in enumerate(self._value)]
        return LEFT_GUARD_PATTERN_RLE + MIDDLE_GUARD_PATTERN_RLE.join(digits)

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "UPCSupplemental5":
        rle = to_fixed_rle(pattern, cls.BARS_LENGTH, cls.RLE_LENGTH, cls.resolve_options(**options))
        decoded = read_either_direction(rle, cls._read_rle, cls.symbology)
        return cls._from_decoded(decoded, **options)

    @classmethod
    def _read_rle(cls, rle: str) -> str:
        if not (
            rle[0:3] == LEFT_GUARD_PATTERN_RLE
            and all(rle[offset : offset + 2] == MIDDLE_GUARD_PATTERN_RLE for offset in MIDDLE_GUARD_OFFSETS)
        ):
            raise UnencodableCharactersError("Missing or incorrect guard patterns")
        digits, parities = read_digits(rle, range(3, 31, 6))
        decoded = digits + lookup_parity_digit(PARITY_PATTERNS, parities)
        if not cls.validate_check_digit_for(decoded):
            raise UndecodableCharactersError(f"Check digit does not match: {decoded}")
        return decoded
