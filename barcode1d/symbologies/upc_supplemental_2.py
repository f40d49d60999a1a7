"""
UPC two digit supplement, printed to the right of a UPC-A or EAN-13.

The value is an integer from 0 to 99. Its check digit (value mod 4) is
carried only in the parity of the two digits.
"""

from typing import Any, ClassVar

from barcode1d.errors import ChecksumError, UndecodableCharactersError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import Barcode1D
from barcode1d.symbologies.ean13 import (
    LEFT_PATTERNS_RLE,
    lookup_parity_digit,
    read_digits,
    read_either_direction,
    to_fixed_rle,
)

PARITY_PATTERNS = {
    "0": "oo",
    "1": "oe",
    "2": "eo",
    "3": "ee",
}

LEFT_GUARD_PATTERN_RLE = "112"
MIDDLE_GUARD_PATTERN_RLE = "11"


class UPCSupplemental2(Barcode1D):
    """UPC Supplemental 2 barcode."""

    symbology: ClassVar[Symbology] = Symbology.UPC_SUPPLEMENTAL_2

    BARS_LENGTH: ClassVar[int] = 20
    RLE_LENGTH: ClassVar[int] = 13

    @classmethod
    def can_encode(cls, value: Any, checksum_included: bool | None = None) -> bool:
        value = str(value)
        if not (value.isascii() and value.isdigit()):
            return False
        if checksum_included is None:
            return 1 <= len(value) <= 3
        if checksum_included:
            return len(value) == 3
        return len(value) <= 2

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        if not cls.can_encode(value, checksum_included=False):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        return int(value) % 4

    @classmethod
    def validate_check_digit_for(cls, value: Any) -> bool:
        if not cls.can_encode(value, checksum_included=True):
            raise UnencodableCharactersError(f"Cannot validate check digit for {value!r}")
        return super().validate_check_digit_for(value)

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[int, int]:
        value = str(value)
        return int(value[:-1]), int(value[-1])

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        if not self.can_encode(value, checksum_included=options.checksum_included):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")

        if options.checksum_included:
            if not self.validate_check_digit_for(value):
                raise ChecksumError(f"Invalid {self.symbology.value} check digit in {value!r}")
            payload, check_digit = self.split_payload_and_check_digit(value)
        else:
            payload = int(value)
            check_digit = self.generate_check_digit_for(payload)
        return payload, check_digit, f"{payload:02d}{check_digit:1d}"

    def _native_rle(self) -> str:
        parity = PARITY_PATTERNS[str(self._check_digit)]
        first, second = self._encoded_string[0], self._encoded_string[1]
        return (
            LEFT_GUARD_PATTERN_RLE
            + LEFT_PATTERNS_RLE[first][parity[0]]
            + MIDDLE_GUARD_PATTERN_RLE
            + LEFT_PATTERNS_RLE[second][parity[1]]
        )

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "UPCSupplemental2":
        rle = to_fixed_rle(pattern, cls.BARS_LENGTH, cls.RLE_LENGTH, cls.resolve_options(**options))
        decoded = read_either_direction(rle, cls._read_rle, cls.symbology)
        return cls._from_decoded(decoded, **options)

    @classmethod
    def _read_rle(cls, rle: str) -> str:
        if not (rle[0:3] == LEFT_GUARD_PATTERN_RLE and rle[7:9] == MIDDLE_GUARD_PATTERN_RLE):
            raise UnencodableCharactersError("Missing or incorrect guard patterns")
        digits, parities = read_digits(rle, (3, 9))
        decoded = digits + lookup_parity_digit(PARITY_PATTERNS, parities)
        if not cls.validate_check_digit_for(decoded):
            raise UndecodableCharactersError(f"Check digit does not match: {decoded}")
        return decoded
