"""
Plessey.

Hexadecimal digits, each four bits drawn as eight wn elements with no
separating space. The symbology has no check digit here.
"""

from typing import Any, ClassVar

from barcode1d.errors import UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import WideNarrowBarcode

PATTERNS = {
    "0": "nwnwnwnw",
    "1": "wnnwnwnw",
    "2": "nwwnnwnw",
    "3": "wnwnnwnw",
    "4": "nwnwwnnw",
    "5": "wnnwwnnw",
    "6": "nwwnwnnw",
    "7": "wnwnwnnw",
    "8": "nwnwnwwn",
    "9": "wnnwnwwn",
    "A": "nwwnnwwn",
    "B": "wnwnnwwn",
    "C": "nwnwwnwn",
    "D": "wnnwwnwn",
    "E": "nwwnwnwn",
    "F": "wnwnwnwn",
}


class Plessey(WideNarrowBarcode):
    """Plessey barcode."""

    symbology: ClassVar[Symbology] = Symbology.PLESSEY

    START_PATTERN: ClassVar[str] = "wnwnnwwn"
    STOP_PATTERN: ClassVar[str] = "wnwnnwnw"
    SEPARATOR: ClassVar[str] = ""
    PATTERNS: ClassVar[dict[str, str]] = PATTERNS

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return bool(value) and all(char in PATTERNS for char in value)

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        value = str(value)
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")
        return value, None, value

    @classmethod
    def _from_decoded(cls, decoded: Any, **options: Any) -> "Plessey":
        return cls(decoded, **options)
