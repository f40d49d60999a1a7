"""
Common contract for every 1D symbology, plus the decode helpers the
table-driven symbologies share.
"""

import logging
from functools import cached_property
from typing import Any, ClassVar

import structlog

from barcode1d.config import get_settings
from barcode1d.errors import (
    ChecksumError,
    UndecodableCharactersError,
    UnencodableCharactersError,
    UnsupportedOperationError,
)
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.patterns import bars_to_rle, is_rle, rle_to_bars, rle_to_wn, rle_width, wn_to_rle

logger = structlog.wrap_logger(logging.getLogger(__name__))


class Barcode1D:
    """
    Base class for all symbologies.

    A barcode is built once from a value and options and never changes.
    Pattern representations (bars, rle, wn) are derived on first access
    and cached.

    Subclasses provide at least one of `_native_wn` or `_native_rle`, and
    override the class-level checksum methods where the symbology has one.
    """

    symbology: ClassVar[Symbology] = Symbology.UNKNOWN

    # Per-symbology option defaults, applied over the settings defaults
    DEFAULT_OPTIONS: ClassVar[dict[str, Any]] = {}

    def __init__(self, value: Any, **options: Any):
        """
        Build a barcode.

        Args:
            value: Payload, optionally with its check digit(s)
            **options: Any BarcodeOptions field

        Raises:
            UnencodableCharactersError: value is outside the alphabet
            ChecksumError: checksum_included is set and the check fails
        """
        self._options = self.resolve_options(**options)
        self._value, self._check_digit, self._encoded_string = self._build(value, self._options)

    @classmethod
    def resolve_options(cls, **options: Any) -> BarcodeOptions:
        """Merge settings defaults, class defaults and caller options."""
        merged = {**get_settings().pattern_defaults(), **cls.DEFAULT_OPTIONS, **options}
        return BarcodeOptions(**merged)

    # Class-level contract

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        """Whether the value fits the symbology's alphabet and length."""
        return False

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> Any:
        """Compute the check digit(s) for a payload."""
        raise UnsupportedOperationError(f"{cls.symbology.value} has no check digit")

    @classmethod
    def validate_check_digit_for(cls, value: Any) -> bool:
        """Check that the trailing check digit(s) match the payload."""
        payload, check_digit = cls.split_payload_and_check_digit(value)
        return cls.generate_check_digit_for(payload) == check_digit

    @classmethod
    def split_payload_and_check_digit(cls, value: Any) -> tuple[Any, Any]:
        """Split a value into (payload, check digit)."""
        value = str(value)
        return value[:-1], value[-1:]

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "Barcode1D":
        """Build a barcode from a bars, rle or wn pattern string."""
        raise UnsupportedOperationError(f"{cls.symbology.value} cannot be decoded")

    @classmethod
    def _from_decoded(cls, decoded: Any, **options: Any) -> "Barcode1D":
        """
        Construct an instance from a decoded stream.

        The stream holds whatever check digits the pattern carried. When the
        resolved options skip the checksum and the caller did not say
        otherwise, the whole stream becomes the value.
        """
        resolved = cls.resolve_options(**options)
        if resolved.skip_checksum and "checksum_included" not in options:
            return cls(decoded, **options)
        return cls(decoded, **{**options, "checksum_included": True})

    # Construction

    @classmethod
    def normalize_value(cls, value: Any) -> Any:
        return str(value)

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        """Return (value, check_digit, encoded_string)."""
        value = self.normalize_value(value)
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as {self.symbology.value}")

        if options.checksum_included:
            if not self.validate_check_digit_for(value):
                raise ChecksumError(f"Invalid {self.symbology.value} check digit in {value!r}")
            payload, check_digit = self.split_payload_and_check_digit(value)
            return payload, check_digit, value

        if options.skip_checksum:
            return value, None, value

        check_digit = self.generate_check_digit_for(value)
        return value, check_digit, f"{value}{check_digit}"

    # Accessors

    @property
    def value(self) -> Any:
        return self._value

    @property
    def check_digit(self) -> Any:
        return self._check_digit

    @property
    def encoded_string(self) -> Any:
        return self._encoded_string

    @property
    def options(self) -> BarcodeOptions:
        return self._options

    # Patterns

    def _native_wn(self) -> str:
        """Wide/narrow pattern using the canonical "w" and "n"."""
        raise UnsupportedOperationError(f"{self.symbology.value} has no wide/narrow representation")

    def _native_rle(self) -> str:
        return wn_to_rle(self._native_wn(), wn_ratio=self._options.wn_ratio)

    @cached_property
    def wn(self) -> str:
        """Wide/narrow string in the configured w/n characters."""
        wn = self._native_wn()
        return wn.translate(
            str.maketrans({"w": self._options.w_character, "n": self._options.n_character})
        )

    @cached_property
    def rle(self) -> str:
        """Run-length-encoded pattern."""
        return self._native_rle()

    @cached_property
    def bars(self) -> str:
        """Bar string in the configured line/space characters."""
        return rle_to_bars(self.rle, self._options.line_character, self._options.space_character)

    @cached_property
    def width(self) -> int:
        """Total unit width of the symbol."""
        return rle_width(self.rle)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, "
            f"check_digit={self._check_digit!r}, encoded_string={self._encoded_string!r})"
        )


class WideNarrowBarcode(Barcode1D):
    """
    Two-width symbology built from a table of per-character wn patterns.

    The symbol is START, each character's pattern and STOP, joined by
    SEPARATOR (a narrow space for discrete symbologies, empty otherwise).
    """

    START_PATTERN: ClassVar[str] = ""
    STOP_PATTERN: ClassVar[str] = ""
    SEPARATOR: ClassVar[str] = "n"
    PATTERNS: ClassVar[dict[str, str]] = {}
    DECODE_TABLE: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if "PATTERNS" in cls.__dict__ and "DECODE_TABLE" not in cls.__dict__:
            cls.DECODE_TABLE = {wn: char for char, wn in cls.PATTERNS.items()}

    @classmethod
    def character_width(cls) -> int:
        return len(next(iter(cls.PATTERNS.values())))

    def _native_wn(self) -> str:
        return self.SEPARATOR.join(
            [self.START_PATTERN, *(self.PATTERNS[char] for char in self._encoded_string), self.STOP_PATTERN]
        )

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> Barcode1D:
        resolved = cls.resolve_options(**options)
        wn = to_wn_pattern(pattern, resolved)
        start = cls.START_PATTERN + cls.SEPARATOR
        wn = orient_pattern(wn, start, cls.STOP_PATTERN, cls.symbology)
        middle = wn[len(start) : len(wn) - len(cls.STOP_PATTERN)]
        chars = lookup_chunks(middle, cls.character_width(), cls.DECODE_TABLE, cls.SEPARATOR)
        return cls._from_decoded("".join(chars), **options)


# Decode helpers


def to_wn_pattern(pattern: str, options: BarcodeOptions) -> str:
    """
    Normalize an rle or wn pattern to canonical "w"/"n".

    Raises:
        UnencodableCharactersError: pattern is neither rle nor wn
    """
    if is_rle(pattern):
        return rle_to_wn(pattern)
    wn = pattern.translate(str.maketrans({options.w_character: "w", options.n_character: "n"}))
    if not wn or set(wn) - {"w", "n"}:
        raise UnencodableCharactersError("Pattern must be rle or wn")
    return wn


def to_rle_pattern(pattern: str, options: BarcodeOptions, max_width: int = 9) -> str:
    """
    Normalize an rle or bars pattern to rle.

    Raises:
        UnencodableCharactersError: pattern is neither rle nor bars
    """
    if pattern and all("1" <= char <= str(max_width) for char in pattern):
        return pattern
    allowed = {options.line_character, options.space_character}
    if not pattern or set(pattern) - allowed or pattern[0] != options.line_character:
        raise UnencodableCharactersError("Pattern must be rle or bars")
    return bars_to_rle(pattern)


def orient_pattern(pattern: str, start: str, stop: str, symbology: Symbology) -> str:
    """
    Return the pattern read in its forward direction.

    The forward reading is tried first, then the reversed one.

    Raises:
        UnencodableCharactersError: neither reading is framed by start/stop
    """
    if is_framed(pattern, start, stop):
        return pattern
    reversed_pattern = pattern[::-1]
    if is_framed(reversed_pattern, start, stop):
        logger.debug("Detected reversed scan", symbology=symbology.value)
        return reversed_pattern
    logger.debug("Start/stop pattern not found", symbology=symbology.value, length=len(pattern))
    raise UnencodableCharactersError("Start/stop pattern is not detected")


def is_framed(pattern: str, start: str, stop: str) -> bool:
    """Whether pattern begins with start and ends with stop without overlap."""
    return (
        len(pattern) >= len(start) + len(stop)
        and pattern[: len(start)] == start
        and pattern[len(pattern) - len(stop) :] == stop
    )


def lookup_chunks(middle: str, width: int, table: dict[str, str], separator: str = "") -> list[str]:
    """
    Split a pattern body into fixed-width chunks and look each one up.

    Each chunk is `width` characters followed by the separator.

    Raises:
        UnencodableCharactersError: body length is not a whole number of chunks
        UndecodableCharactersError: a chunk is not in the table
    """
    step = width + len(separator)
    if len(middle) % step:
        raise UnencodableCharactersError("Wrong number of bars")

    decoded = []
    for offset in range(0, len(middle), step):
        chunk = middle[offset : offset + width]
        if middle[offset + width : offset + step] != separator or chunk not in table:
            raise UndecodableCharactersError(f"Invalid sequence: {chunk}")
        decoded.append(table[chunk])
    return decoded
