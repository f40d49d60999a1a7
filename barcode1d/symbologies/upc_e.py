"""
UPC-E: the zero-suppressed six digit form of a UPC-A number.

The value is kept as seven digits, the number system "0" followed by
the six encoded digits. The check digit is that of the expanded UPC-A
and is carried only in the parity of the six digits.
"""

import re
from typing import Any, ClassVar

from barcode1d.errors import UndecodableCharactersError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.ean13 import (
    LEFT_PATTERNS_RLE,
    SIDE_GUARD_PATTERN_RLE,
    FixedLengthDigitBarcode,
    lookup_parity_digit,
    read_digits,
    read_either_direction,
    to_fixed_rle,
)
from barcode1d.symbologies.upc_a import UPCA

PARITY_PATTERNS = {
    "0": "eeeooo",
    "1": "eeoeoo",
    "2": "eeooeo",
    "3": "eeoooe",
    "4": "eoeeoo",
    "5": "eooeeo",
    "6": "eoooee",
    "7": "eoeoeo",
    "8": "eoeooe",
    "9": "eooeoe",
}

RIGHT_GUARD_PATTERN_RLE = "111111"

# UPC-A (without check digit) -> UPC-E templates, tried in order
_CONTRACTIONS = (
    (re.compile(r"^0(\d{4}[1-9])0000([5-9])$"), lambda m: m.group(1) + m.group(2)),
    (re.compile(r"^0(\d{3}[1-9])00000(\d)$"), lambda m: m.group(1) + m.group(2) + "4"),
    (re.compile(r"^0(\d\d)([012])0000(\d{3})$"), lambda m: m.group(1) + m.group(3) + m.group(2)),
    (re.compile(r"^0(\d\d[3-9])00000(\d\d)$"), lambda m: m.group(1) + m.group(2) + "3"),
)


class UPCE(FixedLengthDigitBarcode):
    """UPC-E barcode."""

    symbology: ClassVar[Symbology] = Symbology.UPC_E
    PAYLOAD_LENGTH: ClassVar[int] = 7

    BARS_LENGTH: ClassVar[int] = 51
    RLE_LENGTH: ClassVar[int] = 33

    @classmethod
    def can_encode(cls, value: Any, checksum_included: bool | None = None) -> bool:
        value = str(value)
        if not (value.isascii() and value.isdigit()):
            return False
        if checksum_included is None:
            lengths = (6, 7, 8)
        elif checksum_included:
            lengths = (7, 8)
        else:
            lengths = (6, 7)
        if len(value) not in lengths:
            return False
        # A seven digit payload or eight digit stream carries the number system
        has_number_system = len(value) == 8 or (len(value) == 7 and checksum_included is False)
        return not has_number_system or value[0] == "0"

    @classmethod
    def normalize_payload(cls, value: Any) -> str:
        """Return the seven digit form with the leading number system."""
        value = str(value)
        return value if len(value) == 7 else "0" + value

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        value = str(value)
        if not cls.can_encode(value, checksum_included=False):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        return UPCA.generate_check_digit_for(cls.upce_to_upca(value))

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, int]:
        value = str(value)
        return cls.normalize_payload(value[:-1]), int(value[-1])

    @staticmethod
    def upce_to_upca(value: Any) -> str:
        """
        Expand a UPC-E payload to the eleven digit UPC-A payload.

        Args:
            value: Six digits, or seven with the leading "0"

        Returns:
            UPC-A value without its check digit

        Raises:
            UnencodableCharactersError: value is not a UPC-E payload
        """
        value = str(value)
        if len(value) == 7 and value[0] == "0":
            value = value[1:]
        if len(value) != 6 or not (value.isascii() and value.isdigit()):
            raise UnencodableCharactersError(f"Not a UPC-E payload: {value!r}")

        last = value[5]
        if last in "012":
            return "0" + value[0:2] + last + "0000" + value[2:5]
        if last == "3":
            return "0" + value[0:3] + "00000" + value[3:5]
        if last == "4":
            return "0" + value[0:4] + "00000" + value[4]
        return "0" + value[0:5] + "0000" + last

    @staticmethod
    def upca_to_upce(value: Any) -> str:
        """
        Contract an eleven digit UPC-A payload to the seven digit UPC-E form.

        Raises:
            UnencodableCharactersError: the number cannot be zero-suppressed
        """
        value = str(value)
        for pattern, contract in _CONTRACTIONS:
            match = pattern.match(value)
            if match:
                return "0" + contract(match)
        raise UnencodableCharactersError(f"Cannot contract {value!r} to UPC-E")

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        payload, check_digit, _ = super()._build(value, options)
        payload = self.normalize_payload(payload)
        self._upca_value = self.upce_to_upca(payload)
        return payload, check_digit, f"{payload}{check_digit}"

    @property
    def number_system(self) -> str:
        return self._upca_value[0]

    @property
    def manufacturers_code(self) -> str:
        return self._upca_value[1:6]

    @property
    def product_code(self) -> str:
        return self._upca_value[6:11]

    def to_upc_a(self) -> UPCA:
        """Convert to the equivalent UPC-A barcode."""
        options = {**self._options.model_dump(), "checksum_included": False}
        return UPCA(self._upca_value, **options)

    def _native_rle(self) -> str:
        parity = PARITY_PATTERNS[str(self._check_digit)]
        digits = "".join(
            LEFT_PATTERNS_RLE[digit][parity[index]] for index, digit in enumerate(self._value[1:])
        )
        return SIDE_GUARD_PATTERN_RLE + digits + RIGHT_GUARD_PATTERN_RLE

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "UPCE":
        rle = to_fixed_rle(pattern, cls.BARS_LENGTH, cls.RLE_LENGTH, cls.resolve_options(**options))
        digits = read_either_direction(rle, cls._read_rle, cls.symbology)
        return cls._from_decoded(digits, **options)

    @classmethod
    def _read_rle(cls, rle: str) -> str:
        # A leading odd "6" (1114) looks like the reversed right guard, so
        # guards are checked per direction rather than used to pick one
        if not (rle[0:3] == SIDE_GUARD_PATTERN_RLE and rle[27:33] == RIGHT_GUARD_PATTERN_RLE):
            raise UnencodableCharactersError("Missing or incorrect guard patterns")
        digits, parities = read_digits(rle, range(3, 27, 4))
        decoded = "0" + digits + lookup_parity_digit(PARITY_PATTERNS, parities)
        if not cls.validate_check_digit_for(decoded):
            raise UndecodableCharactersError(f"Check digit does not match: {decoded}")
        return decoded
