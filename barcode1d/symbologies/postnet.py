"""
PostNet, the USPS bar height code.

Each digit is five bars, two of them full height. Here "w" stands for a
full bar and "n" for a half bar; the spaces between bars are implied.
A full bar frames the symbol on both sides.

Whether a value already carries its check digit is guessed from its
length: 6, 10 or 12 digits means included, 5, 9 or 11 means one is
generated. A 6-digit value that is really something else cannot be told
apart; callers with ambiguous input should pass ``skip_checksum`` or
``checksum_included`` explicitly.
"""

import logging
from typing import Any, ClassVar

import structlog

from barcode1d.errors import ChecksumError, UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import WideNarrowBarcode, is_framed, lookup_chunks, to_wn_pattern

logger = structlog.wrap_logger(logging.getLogger(__name__))

PATTERNS = {
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

GUARD_PATTERN = "w"

# ZIP, ZIP+4, ZIP+4+delivery point; each with or without a check digit
PAYLOAD_LENGTHS = (5, 9, 11)
CHECKED_LENGTHS = (6, 10, 12)


class PostNet(WideNarrowBarcode):
    """PostNet barcode."""

    symbology: ClassVar[Symbology] = Symbology.POSTNET

    START_PATTERN: ClassVar[str] = GUARD_PATTERN
    STOP_PATTERN: ClassVar[str] = GUARD_PATTERN
    SEPARATOR: ClassVar[str] = ""
    PATTERNS: ClassVar[dict[str, str]] = PATTERNS

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        return value.isascii() and value.isdigit() and len(value) in PAYLOAD_LENGTHS + CHECKED_LENGTHS

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        value = str(value)
        if not (value.isascii() and value.isdigit()):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        return (10 - sum(int(digit) for digit in value) % 10) % 10

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[str, int]:
        value = str(value)
        if not (value.isascii() and value.isdigit()):
            raise UnencodableCharactersError(f"Cannot split check digit from {value!r}")
        return value[:-1], int(value[-1])

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        value = str(value)
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")

        if options.skip_checksum and not options.checksum_included:
            return value, None, value

        if options.checksum_included or len(value) in CHECKED_LENGTHS:
            if not options.checksum_included:
                logger.debug("Assuming check digit is included", length=len(value))
                self._options = options.model_copy(update={"checksum_included": True})
            if not self.validate_check_digit_for(value):
                raise ChecksumError(f"Invalid {self.symbology.value} check digit in {value!r}")
            payload, check_digit = self.split_payload_and_check_digit(value)
            return payload, check_digit, value

        check_digit = self.generate_check_digit_for(value)
        return value, check_digit, f"{value}{check_digit}"

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "PostNet":
        """Decode a wn pattern. PostNet is read in one direction only."""
        resolved = cls.resolve_options(**options)
        wn = to_wn_pattern(pattern, resolved)
        if not is_framed(wn, GUARD_PATTERN, GUARD_PATTERN):
            raise UnencodableCharactersError("Start/stop pattern is not detected")
        digits = "".join(lookup_chunks(wn[1:-1], 5, cls.DECODE_TABLE))
        return cls(digits, **options)
