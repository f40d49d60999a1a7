"""
MSI (Modified Plessey).

Each digit is four bits, drawn as eight wn elements with no separator.
Four check digit schemes are supported through the ``check_digit``
option: "mod 10", "mod 11", "mod 1010" and "mod 1110". The ``check_style``
option picks the mod 11 weighting: "ibm" cycles weights 2-7, "ncr" 2-9.

Mod 11 can produce a check value of 10, which is appended as two digits.
"""

from typing import Any, ClassVar

from barcode1d.errors import ChecksumError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, CheckDigitMethod, CheckStyle, Symbology
from barcode1d.symbologies.base import WideNarrowBarcode

PATTERNS = {
    "0": "nwnwnwnw",
    "1": "nwnwnwwn",
    "2": "nwnwwnnw",
    "3": "nwnwwnwn",
    "4": "nwwnnwnw",
    "5": "nwwnnwwn",
    "6": "nwwnwnnw",
    "7": "nwwnwnwn",
    "8": "wnnwnwnw",
    "9": "wnnwnwwn",
}

MOD11_MAX_WEIGHT = {"ibm": 7, "ncr": 9}


def mod10_check_digit(value: str) -> int:
    """
    Luhn-style check digit.

    The digits in odd positions counted from the right are read as one
    number and doubled; the digits of that product are added to the
    remaining digits.
    """
    odd = value[len(value) - 1 :: -2][::-1]
    even = value[len(value) - 2 :: -2] if len(value) > 1 else ""
    doubled = str(int(odd) * 2) if odd else "0"
    total = sum(int(digit) for digit in doubled) + sum(int(digit) for digit in even)
    return (10 - total % 10) % 10


def mod11_check_digit(value: str, check_style: CheckStyle = "ibm") -> int:
    max_weight = MOD11_MAX_WEIGHT[check_style]
    cycle = max_weight - 1
    total = sum(int(digit) * (index % cycle + 2) for index, digit in enumerate(reversed(value)))
    return (11 - total % 11) % 11


class MSI(WideNarrowBarcode):
    """MSI barcode."""

    symbology: ClassVar[Symbology] = Symbology.MSI

    START_PATTERN: ClassVar[str] = "wn"
    STOP_PATTERN: ClassVar[str] = "nwn"
    SEPARATOR: ClassVar[str] = ""
    PATTERNS: ClassVar[dict[str, str]] = PATTERNS

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return value.isascii() and value.isdigit()

    @classmethod
    def generate_check_digit_for(
        cls,
        value: Any,
        check_digit: CheckDigitMethod = "mod 10",
        check_style: CheckStyle = "ibm",
    ) -> str:
        """
        Compute the check digit(s) for the chosen scheme.

        Args:
            value: Digit string without check digits
            check_digit: One of "mod 10", "mod 11", "mod 1010", "mod 1110"
            check_style: "ibm" or "ncr", used by the mod 11 schemes

        Returns:
            Check digits as a string
        """
        value = str(value)
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")

        if check_digit == "mod 10":
            return str(mod10_check_digit(value))
        if check_digit == "mod 11":
            return str(mod11_check_digit(value, check_style))
        if check_digit == "mod 1010":
            first = str(mod10_check_digit(value))
            return first + str(mod10_check_digit(value + first))
        if check_digit == "mod 1110":
            first = str(mod11_check_digit(value, check_style))
            return first + str(mod10_check_digit(value + first))
        raise UnencodableCharactersError(f"Unknown check digit scheme {check_digit!r}")

    @classmethod
    def split_payload_and_check_digit(
        cls, value: Any, check_digit: CheckDigitMethod = "mod 10"
    ) -> tuple[str, str]:
        value = str(value)
        size = 2 if check_digit in ("mod 1010", "mod 1110") else 1
        return value[:-size], value[-size:]

    @classmethod
    def validate_check_digit_for(
        cls,
        value: Any,
        check_digit: CheckDigitMethod = "mod 10",
        check_style: CheckStyle = "ibm",
    ) -> bool:
        payload, check = cls.split_payload_and_check_digit(value, check_digit)
        return cls.generate_check_digit_for(payload, check_digit, check_style) == check

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        value = str(value)
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")

        if options.checksum_included:
            if not self.validate_check_digit_for(value, options.check_digit, options.check_style):
                raise ChecksumError(f"Invalid {self.symbology.value} check digit in {value!r}")
            payload, check = self.split_payload_and_check_digit(value, options.check_digit)
            return payload, check, value

        if options.skip_checksum:
            return value, None, value

        check = self.generate_check_digit_for(value, options.check_digit, options.check_style)
        return value, check, value + check
