"""
Codabar (NW-7).

The value carries its own start and stop characters, A-D (or their
alternate names T, N, * and E). There is no check digit. Characters are
seven elements separated by a narrow space.
"""

import logging
from typing import Any, ClassVar

import structlog

from barcode1d.errors import UnencodableCharactersError
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import Barcode1D, lookup_chunks, to_wn_pattern

logger = structlog.wrap_logger(logging.getLogger(__name__))

PATTERNS = {
    "0": "nnnnnww",
    "1": "nnnnwwn",
    "2": "nnnwnnw",
    "3": "wwnnnnn",
    "4": "nnwnnwn",
    "5": "wnnnnwn",
    "6": "nwnnnnw",
    "7": "nwnnwnn",
    "8": "nwwnnnn",
    "9": "wnnwnnn",
    "-": "nnnwwnn",
    "$": "nnwwnnn",
    ":": "wnnnwnw",
    "/": "wnwnnnw",
    ".": "wnwnwnn",
    "+": "nnwnwnw",
    "A": "nnwwnwn",
    "B": "nwnwnnw",
    "C": "nnnwnww",
    "D": "nnnwwwn",
    "T": "nnwwnwn",
    "N": "nwnwnnw",
    "*": "nnnwnww",
    "E": "nnnwwwn",
}

PAYLOAD_CHARACTERS = "0123456789-$:/.+"
START_STOP_SETS = ("ABCD", "TN*E")

# Alternate start/stop names share patterns with A-D; decoding reports A-D
DECODE_TABLE = {wn: char for char, wn in PATTERNS.items() if char not in "TN*E"}
START_STOP_PATTERNS = frozenset(PATTERNS[char] for char in "ABCD")


def _is_framed(wn: str) -> bool:
    return (
        len(wn) >= 15
        and wn[:7] in START_STOP_PATTERNS
        and wn[7] == "n"
        and wn[len(wn) - 7 :] in START_STOP_PATTERNS
    )


class Codabar(Barcode1D):
    """Codabar barcode."""

    symbology: ClassVar[Symbology] = Symbology.CODABAR
    DEFAULT_OPTIONS: ClassVar[dict[str, Any]] = {"wn_ratio": 3, "varied_wn_ratio": False}

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        value = str(value)
        if len(value) < 2:
            return False
        start, payload, stop = value[0], value[1:-1], value[-1]
        return any(start in chars and stop in chars for chars in START_STOP_SETS) and all(
            char in PAYLOAD_CHARACTERS for char in payload
        )

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        value = str(value)
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")
        return value, None, value

    @property
    def start_character(self) -> str:
        return self._value[0]

    @property
    def stop_character(self) -> str:
        return self._value[-1]

    @property
    def payload(self) -> str:
        return self._value[1:-1]

    def _native_wn(self) -> str:
        return "n".join(PATTERNS[char] for char in self._encoded_string)

    def _native_rle(self) -> str:
        if not self._options.varied_wn_ratio:
            return super()._native_rle()
        # Characters with three wide elements use 2:1, the rest 3:1
        parts = []
        for char in self._encoded_string:
            wn = PATTERNS[char]
            wide = "2" if wn.count("w") == 3 else "3"
            parts.append(wn.replace("w", wide).replace("n", "1"))
        return "1".join(parts)

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "Codabar":
        resolved = cls.resolve_options(**options)
        wn = to_wn_pattern(pattern, resolved)
        if not _is_framed(wn):
            if not _is_framed(wn[::-1]):
                raise UnencodableCharactersError("Start/stop pattern is not detected")
            logger.debug("Detected reversed scan", symbology=cls.symbology.value)
            wn = wn[::-1]
        decoded = "".join(lookup_chunks(wn + "n", 7, DECODE_TABLE, "n"))
        return cls(decoded, **options)
