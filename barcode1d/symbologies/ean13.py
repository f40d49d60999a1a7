"""
EAN-13, and the building blocks shared by the whole EAN/UPC family.

Every digit is seven modules wide, drawn as two bars and two spaces
(four rle runs of width 1-4). Left-half digits come in an odd and an even
parity variant; the sequence of parities chosen for the six left digits
encodes the leading thirteenth digit. Right-half digits always use the
odd rle pattern (drawn starting with a bar).

None of these symbologies has a wide/narrow representation.
"""

import logging
from typing import Any, Callable, ClassVar, Iterable

import structlog

from barcode1d.errors import ChecksumError, UndecodableCharactersError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.patterns import bars_to_rle, is_rle
from barcode1d.symbologies.base import Barcode1D

logger = structlog.wrap_logger(logging.getLogger(__name__))

LEFT_PATTERNS_RLE = {
    "0": {"o": "3211", "e": "1123"},
    "1": {"o": "2221", "e": "1222"},
    "2": {"o": "2122", "e": "2212"},
    "3": {"o": "1411", "e": "1141"},
    "4": {"o": "1132", "e": "2311"},
    "5": {"o": "1231", "e": "1321"},
    "6": {"o": "1114", "e": "4111"},
    "7": {"o": "1312", "e": "2131"},
    "8": {"o": "1213", "e": "3121"},
    "9": {"o": "3112", "e": "2113"},
}

RIGHT_PATTERNS_RLE = {digit: patterns["o"] for digit, patterns in LEFT_PATTERNS_RLE.items()}

# rle -> (digit, parity)
DIGIT_LOOKUP = {
    rle: (digit, parity)
    for digit, patterns in LEFT_PATTERNS_RLE.items()
    for parity, rle in patterns.items()
}

LEFT_PARITY_PATTERNS = {
    "0": "oooooo",
    "1": "ooeoee",
    "2": "ooeeoe",
    "3": "ooeeeo",
    "4": "oeooee",
    "5": "oeeooe",
    "6": "oeeeoo",
    "7": "oeoeoe",
    "8": "oeoeeo",
    "9": "oeeoeo",
}

SIDE_GUARD_PATTERN_RLE = "111"
MIDDLE_GUARD_PATTERN_RLE = "11111"


def flip_parity(parities: str) -> str:
    return parities.translate(str.maketrans("oe", "eo"))


def lookup_parity_digit(table: dict[str, str], parities: str) -> str:
    """
    Find the digit whose parity sequence matches.

    Raises:
        UndecodableCharactersError: no digit has that sequence
    """
    for digit, sequence in table.items():
        if sequence == parities:
            return digit
    raise UndecodableCharactersError(f"Weird parity: {parities}")


def read_digits(rle: str, offsets: Iterable[int]) -> tuple[str, str]:
    """
    Read one 4-run digit at each offset.

    Returns:
        Tuple of (digits, parity sequence)

    Raises:
        UndecodableCharactersError: a chunk matches no digit
    """
    digits, parities = [], []
    for offset in offsets:
        chunk = rle[offset : offset + 4]
        if chunk not in DIGIT_LOOKUP:
            raise UndecodableCharactersError(f"Invalid sequence: {chunk}")
        digit, parity = DIGIT_LOOKUP[chunk]
        digits.append(digit)
        parities.append(parity)
    return "".join(digits), "".join(parities)


def read_either_direction(rle: str, read: Callable[[str], str], symbology: Symbology) -> str:
    """
    Apply `read` to the forward rle, then to the reversed rle.

    `read` raises UnencodableCharactersError when the guards are not where
    they belong and UndecodableCharactersError when a digit or parity
    does not resolve. The forward error is reported when both fail.
    """
    try:
        return read(rle)
    except (UnencodableCharactersError, UndecodableCharactersError) as forward_error:
        try:
            decoded = read(rle[::-1])
        except (UnencodableCharactersError, UndecodableCharactersError):
            raise forward_error from None
    logger.debug("Detected reversed scan", symbology=symbology.value)
    return decoded


def to_fixed_rle(pattern: str, bars_length: int, rle_length: int, options: BarcodeOptions) -> str:
    """
    Accept a bar string or rle string of a fixed-width symbol and return rle.

    Raises:
        UnencodableCharactersError: neither length nor alphabet fits
    """
    if len(pattern) == rle_length and is_rle(pattern):
        return pattern
    if len(pattern) == bars_length and not set(pattern) - {options.line_character, options.space_character}:
        rle = bars_to_rle(pattern)
        if len(rle) == rle_length:
            return rle
    raise UnencodableCharactersError(
        f"Pattern must be {bars_length} unit bar pattern or {rle_length} character rle"
    )


def read_halves(rle: str, left_offset: int, right_offset: int, digits_per_half: int) -> tuple[str, str, str]:
    """
    Read both halves of an EAN-13/EAN-8 style symbol.

    A left half that reads as all even parity is a reversed scan: the
    halves are swapped and reversed, and their parities flipped.

    Returns:
        Tuple of (left digits, right digits, left parity sequence)
    """
    left_digits, left_parities = read_digits(
        rle, range(left_offset, left_offset + 4 * digits_per_half, 4)
    )
    right_digits, right_parities = read_digits(
        rle, range(right_offset, right_offset + 4 * digits_per_half, 4)
    )

    if left_parities == "e" * digits_per_half:
        logger.debug("Detected reversed scan", digits=digits_per_half * 2)
        left_digits, right_digits = right_digits[::-1], left_digits[::-1]
        left_parities, right_parities = flip_parity(right_parities[::-1]), "o" * digits_per_half

    if right_parities != "o" * digits_per_half:
        raise UndecodableCharactersError(f"Weird parity on right half: {right_parities}")
    return left_digits, right_digits, left_parities


class FixedLengthDigitBarcode(Barcode1D):
    """
    Numeric symbology with a fixed payload length and a mandatory check
    digit. skip_checksum has no effect.
    """

    PAYLOAD_LENGTH: ClassVar[int] = 12

    @classmethod
    def can_encode(cls, value: Any, checksum_included: bool | None = None) -> bool:
        value = str(value)
        if not (value.isascii() and value.isdigit()):
            return False
        if checksum_included is None:
            return len(value) in (cls.PAYLOAD_LENGTH, cls.PAYLOAD_LENGTH + 1)
        return len(value) == cls.PAYLOAD_LENGTH + (1 if checksum_included else 0)

    @classmethod
    def validate_check_digit_for(cls, value: Any) -> bool:
        if not cls.can_encode(value, checksum_included=True):
            raise UnencodableCharactersError(f"Cannot validate check digit for {value!r}")
        return super().validate_check_digit_for(value)

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, int]:
        value = str(value)
        return value[:-1], int(value[-1])

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        value = self.normalize_value(value)
        if not self.can_encode(value, checksum_included=options.checksum_included):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")

        if options.checksum_included:
            if not self.validate_check_digit_for(value):
                raise ChecksumError(f"Invalid {self.symbology.value} check digit in {value!r}")
            payload, check_digit = self.split_payload_and_check_digit(value)
            return payload, check_digit, value

        check_digit = self.generate_check_digit_for(value)
        return value, check_digit, f"{value}{check_digit}"

    @classmethod
    def _from_decoded(cls, decoded: Any, **options: Any) -> Barcode1D:
        return cls(decoded, **{**options, "checksum_included": True})


def weighted_mod10(value: str, first_weight: int, second_weight: int) -> int:
    """Mod 10 check digit with weights alternating from the left."""
    total = sum(
        int(digit) * (second_weight if index % 2 else first_weight) for index, digit in enumerate(value)
    )
    return (10 - total % 10) % 10


class EAN13(FixedLengthDigitBarcode):
    """EAN-13 barcode."""

    symbology: ClassVar[Symbology] = Symbology.EAN_13
    PAYLOAD_LENGTH: ClassVar[int] = 12

    BARS_LENGTH: ClassVar[int] = 95
    RLE_LENGTH: ClassVar[int] = 59

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        value = str(value)
        if not EAN13.can_encode(value, checksum_included=False):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        return weighted_mod10(value, 1, 3)

    @property
    def number_system(self) -> str:
        return self._value[:2]

    @property
    def manufacturers_code(self) -> str:
        return self._value[2:7]

    @property
    def product_code(self) -> str:
        return self._value[7:12]

    def _thirteen_digits(self) -> str:
        return self._encoded_string

    def _native_rle(self) -> str:
        digits = self._thirteen_digits()
        parity = LEFT_PARITY_PATTERNS[digits[0]]
        left = "".join(LEFT_PATTERNS_RLE[digit][parity[index]] for index, digit in enumerate(digits[1:7]))
        right = "".join(RIGHT_PATTERNS_RLE[digit] for digit in digits[7:13])
        return SIDE_GUARD_PATTERN_RLE + left + MIDDLE_GUARD_PATTERN_RLE + right + SIDE_GUARD_PATTERN_RLE

    @classmethod
    def decode_digits(cls, pattern: str, options: BarcodeOptions) -> str:
        """
        Read all thirteen digits (check digit included) from a pattern.

        Raises:
            UnencodableCharactersError: wrong length or guard patterns
            UndecodableCharactersError: unreadable digit or parity
        """
        rle = to_fixed_rle(pattern, EAN13.BARS_LENGTH, EAN13.RLE_LENGTH, options)
        if not (
            rle[0:3] == SIDE_GUARD_PATTERN_RLE
            and rle[56:59] == SIDE_GUARD_PATTERN_RLE
            and rle[27:32] == MIDDLE_GUARD_PATTERN_RLE
        ):
            raise UnencodableCharactersError("Missing or incorrect guard patterns")

        left_digits, right_digits, left_parities = read_halves(rle, 3, 32, 6)
        parity_digit = lookup_parity_digit(LEFT_PARITY_PATTERNS, left_parities)
        return parity_digit + left_digits + right_digits

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "EAN13":
        digits = cls.decode_digits(pattern, cls.resolve_options(**options))
        return cls._from_decoded(digits, **options)
