"""
The discrete "2 of 5" family: Industrial, IATA, Matrix and COOP.

Every digit is five elements, two of them wide. Industrial and IATA put
all five in the bars with narrow spaces between them; Matrix alternates
bar/space/bar/space/bar. COOP uses its own digit table.

All four share a mod 10 check digit with weights 1, 3, 1, ... counted
from the right.
"""

from typing import Any, ClassVar

from barcode1d.errors import UnencodableCharactersError
from barcode1d.models import Symbology
from barcode1d.symbologies.base import WideNarrowBarcode

# Bar widths per digit, shared with Interleaved 2 of 5
TWO_OF_FIVE_PATTERNS = {
    "0": "nnwwn",
    "1": "wnnnw",
    "2": "nwnnw",
    "3": "wwnnn",
    "4": "nnwnw",
    "5": "wnwnn",
    "6": "nwwnn",
    "7": "nnnww",
    "8": "wnnwn",
    "9": "nwnwn",
}

# Each bar followed by a narrow space, except the last
BARS_ONLY_PATTERNS = {digit: "n".join(bars) for digit, bars in TWO_OF_FIVE_PATTERNS.items()}

COOP_PATTERNS = {
    "0": "wwnnn",
    "1": "nnnww",
    "2": "nnwnw",
    "3": "nnwwn",
    "4": "nwnnw",
    "5": "nwnwn",
    "6": "nwwnn",
    "7": "wnnnw",
    "8": "wnnwn",
    "9": "wnwnn",
}


class TwoOfFiveBarcode(WideNarrowBarcode):
    """Shared behaviour for the discrete 2 of 5 symbologies."""

    DEFAULT_OPTIONS: ClassVar[dict[str, Any]] = {"skip_checksum": True}

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return value.isascii() and value.isdigit()

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        total = sum(
            int(digit) * (3 if index % 2 else 1) for index, digit in enumerate(reversed(str(value)))
        )
        return (10 - total % 10) % 10

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, int]:
        value = str(value)
        if not cls.can_encode(value):
            raise UnencodableCharactersError(f"Cannot split check digit from {value!r}")
        return value[:-1], int(value[-1])


class Industrial2of5(TwoOfFiveBarcode):
    """Industrial 2 of 5: information in the bars only."""

    symbology: ClassVar[Symbology] = Symbology.INDUSTRIAL_2_OF_5

    START_PATTERN: ClassVar[str] = "wnwnn"
    STOP_PATTERN: ClassVar[str] = "wnnnw"
    PATTERNS: ClassVar[dict[str, str]] = BARS_ONLY_PATTERNS


class IATA2of5(TwoOfFiveBarcode):
    """IATA 2 of 5: Industrial 2 of 5 with a shorter start and stop."""

    symbology: ClassVar[Symbology] = Symbology.IATA_2_OF_5

    START_PATTERN: ClassVar[str] = "nnn"
    STOP_PATTERN: ClassVar[str] = "wnn"
    PATTERNS: ClassVar[dict[str, str]] = BARS_ONLY_PATTERNS


class Matrix2of5(TwoOfFiveBarcode):
    """Matrix 2 of 5: three bars and two spaces per digit."""

    symbology: ClassVar[Symbology] = Symbology.MATRIX_2_OF_5

    START_PATTERN: ClassVar[str] = "wnnnn"
    STOP_PATTERN: ClassVar[str] = "wnnnn"
    PATTERNS: ClassVar[dict[str, str]] = TWO_OF_FIVE_PATTERNS


class Coop2of5(TwoOfFiveBarcode):
    """COOP 2 of 5. The check digit is added unless skipped."""

    symbology: ClassVar[Symbology] = Symbology.COOP_2_OF_5
    DEFAULT_OPTIONS: ClassVar[dict[str, Any]] = {}

    START_PATTERN: ClassVar[str] = "wnw"
    STOP_PATTERN: ClassVar[str] = "nww"
    PATTERNS: ClassVar[dict[str, str]] = COOP_PATTERNS
