"""
Code 128: three codesets over 107 six-unit patterns.

Codeset A holds ASCII 32-95 followed by the control characters 0-31,
codeset B holds ASCII 32-127, and codeset C packs digit pairs 00-99.
Each codeset ends with its control codes (function codes, shifts and
codeset changes) followed by the three start codes and the stop code.
Latin-1 characters 128-255 are reached through FNC4: once before a
character shifts it up by 128, twice in a row toggles the shift for
everything that follows.

The encoded form is a byte string of code values: start, payload,
check value and stop.
"""

import logging
import re
from enum import Enum
from typing import Any, ClassVar

import structlog

from barcode1d.errors import (
    ChecksumError,
    UndecodableCharactersError,
    UnencodableCharactersError,
    ValueTooShortError,
)
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies.base import Barcode1D, to_rle_pattern

logger = structlog.wrap_logger(logging.getLogger(__name__))


class Code128Symbol(Enum):
    """Control codes that may appear between the characters of a value."""

    FNC_1 = "fnc_1"
    FNC_2 = "fnc_2"
    FNC_3 = "fnc_3"
    FNC_4 = "fnc_4"
    SHIFT_A = "shift_a"
    SHIFT_B = "shift_b"
    CODE_A = "code_a"
    CODE_B = "code_b"
    CODE_C = "code_c"
    START_A = "start_a"
    START_B = "start_b"
    START_C = "start_c"
    STOP = "stop"


FUNCTION_SYMBOLS = frozenset(
    {Code128Symbol.FNC_1, Code128Symbol.FNC_2, Code128Symbol.FNC_3, Code128Symbol.FNC_4}
)

# Code values
FNC_3 = 96
FNC_2 = 97
SHIFT = 98
CODE_C = 99
CODE_B = 100
CODE_A = 101
FNC_1 = 102
START_A = 103
START_B = 104
START_C = 105
STOP = 106

_STARTS_AND_STOP = [Code128Symbol.START_A, Code128Symbol.START_B, Code128Symbol.START_C, Code128Symbol.STOP]

CODE_A_TABLE: tuple[Any, ...] = (
    *(chr(code) for code in range(32, 96)),
    *(chr(code) for code in range(32)),
    Code128Symbol.FNC_3,
    Code128Symbol.FNC_2,
    Code128Symbol.SHIFT_B,
    Code128Symbol.CODE_C,
    Code128Symbol.CODE_B,
    Code128Symbol.FNC_4,
    Code128Symbol.FNC_1,
    *_STARTS_AND_STOP,
)

CODE_B_TABLE: tuple[Any, ...] = (
    *(chr(code) for code in range(32, 128)),
    Code128Symbol.FNC_3,
    Code128Symbol.FNC_2,
    Code128Symbol.SHIFT_A,
    Code128Symbol.CODE_C,
    Code128Symbol.FNC_4,
    Code128Symbol.CODE_A,
    Code128Symbol.FNC_1,
    *_STARTS_AND_STOP,
)

CODE_C_TABLE: tuple[Any, ...] = (
    *(f"{code:02d}" for code in range(100)),
    Code128Symbol.CODE_B,
    Code128Symbol.CODE_A,
    Code128Symbol.FNC_1,
    *_STARTS_AND_STOP,
)

CODE_A_LOOKUP = {item: code for code, item in enumerate(CODE_A_TABLE)}
CODE_B_LOOKUP = {item: code for code, item in enumerate(CODE_B_TABLE)}

# Latin-1 128-255 -> code value to send after FNC4
HIGH_CODE_A_LOOKUP = {
    chr(ord(item) + 128): code for code, item in enumerate(CODE_A_TABLE) if isinstance(item, str)
}
HIGH_CODE_B_LOOKUP = {
    chr(ord(item) + 128): code for code, item in enumerate(CODE_B_TABLE) if isinstance(item, str)
}

PATTERNS = (
    "212222", "222122", "222221", "121223", "121322", "131222", "122213", "122312", "132212", "221213",
    "221312", "231212", "112232", "122132", "122231", "113222", "123122", "123221", "223211", "221132",
    "221231", "213212", "223112", "312131", "311222", "321122", "321221", "312212", "322112", "322211",
    "212123", "212321", "232121", "111323", "131123", "131321", "112313", "132113", "132311", "211313",
    "231113", "231311", "112133", "112331", "132131", "113123", "113321", "133121", "313121", "211331",
    "231131", "213113", "213311", "213131", "311123", "311321", "331121", "312113", "312311", "332111",
    "314111", "221411", "431111", "111224", "111422", "121124", "121421", "141122", "141221", "112214",
    "112412", "122114", "122411", "142112", "142211", "241211", "221114", "413111", "241112", "134111",
    "111242", "121142", "121241", "114212", "124112", "124211", "411212", "421112", "421211", "212141",
    "214121", "412121", "111143", "111341", "131141", "114113", "114311", "411113", "411311", "113141",
    "114131", "311141", "411131", "211412", "211214", "211232", "2331112",
)  # fmt: skip

STOP_PATTERN_RLE = PATTERNS[STOP]
START_PATTERNS_RLE = frozenset(PATTERNS[START_A : START_C + 1])
PATTERN_LOOKUP = {pattern: code for code, pattern in enumerate(PATTERNS[:STOP])}

_START_BY_CODESET = {"a": START_A, "b": START_B, "c": START_C}
_CHANGE_BY_CODESET = {"a": CODE_A, "b": CODE_B, "c": CODE_C}
_TABLE_BY_START = {START_A: CODE_A_TABLE, START_B: CODE_B_TABLE, START_C: CODE_C_TABLE}


def _to_codes(value: Any) -> bytes:
    """Code values from a bytes-like object or a sequence of ints."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)) and all(isinstance(code, int) and 0 <= code < 256 for code in value):
        return bytes(value)
    raise UnencodableCharactersError(f"Code 128 code values must be bytes, got {type(value).__name__}")


def _flatten(value: Any) -> list[Any]:
    """Split a value into single characters and function tokens."""
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, (list, tuple)):
        raise UnencodableCharactersError(f"Code 128 value must be a str or list, got {type(value).__name__}")

    items: list[Any] = []
    for item in value:
        if isinstance(item, Code128Symbol) and item in FUNCTION_SYMBOLS:
            items.append(item)
        elif isinstance(item, str):
            items.extend(item)
        else:
            raise UnencodableCharactersError(f"Cannot encode {item!r} in Code 128")
    return items


def _codeset_map(items: list[Any], low: dict[Any, int], high: dict[str, int], mark: str) -> str:
    """One mark per item: lower case if the codeset holds it, upper case via FNC4, "-" if neither."""
    marks = "".join(mark if item in low else mark.upper() if item in high else "-" for item in items)
    return marks + "-"


def _digit_pair_map(items: list[Any]) -> str:
    """
    Mark positions codeset C can carry.

    A digit pair is "cC", an FNC1 is "c". A digit without a partner
    is "-".
    """
    marks: list[str] = []
    pending_digit = False
    for item in items:
        if item is Code128Symbol.FNC_1:
            marks.extend("--" if pending_digit else "c")
            pending_digit = False
        elif isinstance(item, str) and "0" <= item <= "9":
            if pending_digit:
                marks.extend("cC")
            pending_digit = not pending_digit
        elif pending_digit:
            marks.extend("--")
            pending_digit = False
        else:
            marks.append("-")
    if pending_digit:
        marks.append("-")
    return "".join(marks)


def _choose_codesets(items: list[Any]) -> list[str]:
    """Assign a codeset mark to every item."""
    map_a = _codeset_map(items, CODE_A_LOOKUP, HIGH_CODE_A_LOOKUP, "a")
    map_b = _codeset_map(items, CODE_B_LOOKUP, HIGH_CODE_B_LOOKUP, "b")

    marks: list[str] = []
    position = 0
    while position < len(items):
        a_run = map_a.index("-", position) - position
        b_run = map_b.index("-", position) - position
        if not a_run and not b_run:
            raise UnencodableCharactersError(f"Cannot encode {items[position]!r} in Code 128")
        if a_run >= b_run:
            marks.extend(map_a[position : position + a_run])
            position += a_run
        else:
            marks.extend(map_b[position : position + b_run])
            position += b_run

    # Digit runs only pay for the codeset change when long enough
    map_c = _digit_pair_map(items)
    for run in re.finditer(r"c[cC]+Cc*", map_c):
        at_end = run.start() == 0 or run.end() == len(map_c)
        if re.search(r"c[cC]+C" if at_end else r"c[cC]{3,}C", run.group()):
            marks[run.start() : run.end()] = run.group()
    return marks


def latin1_to_code128(value: Any) -> bytes:
    """
    Encode a Latin-1 string (or list of strings and FNC tokens).

    Returns:
        Code values: start, payload, check value and stop

    Raises:
        ValueTooShortError: nothing to encode
        UnencodableCharactersError: a character is outside Latin-1
    """
    items = _flatten(value)
    if not items:
        raise ValueTooShortError("Code 128 value is empty")

    marks = _choose_codesets(items)
    current = marks[0].lower()
    codes = [_START_BY_CODESET[current]]
    for index, mark in enumerate(marks):
        if mark.lower() != current:
            current = mark.lower()
            codes.append(_CHANGE_BY_CODESET[current])

        item = items[index]
        if mark == "c":
            codes.append(FNC_1 if item is Code128Symbol.FNC_1 else int(item + items[index + 1]))
        elif mark == "a":
            codes.append(CODE_A_LOOKUP[item])
        elif mark == "b":
            codes.append(CODE_B_LOOKUP[item])
        elif mark == "A":
            codes.extend((CODE_A_LOOKUP[Code128Symbol.FNC_4], HIGH_CODE_A_LOOKUP[item]))
        elif mark == "B":
            codes.extend((CODE_B_LOOKUP[Code128Symbol.FNC_4], HIGH_CODE_B_LOOKUP[item]))

    codes.append(Code128.generate_check_digit_for(bytes(codes)))
    codes.append(STOP)
    logger.debug("Encoded Code 128", items=len(items), codes=len(codes), start=codes[0])
    return bytes(codes)


def parse_code128(encoded: bytes) -> tuple[int, bytes, int | None]:
    """
    Split encoded code values into their parts.

    Returns:
        Tuple of (start code, payload codes, check value or None when the
        stream carries no check value and stop)

    Raises:
        UndecodableCharactersError: not a start code followed by data codes
        UnencodableCharactersError: the value is not bytes-like
    """
    encoded = _to_codes(encoded)
    if not encoded or encoded[0] not in _TABLE_BY_START:
        raise UndecodableCharactersError("Code 128 stream must begin with a start code")

    payload, check_value = encoded[1:], None
    if len(encoded) >= 3 and encoded[-1] == STOP:
        payload, check_value = encoded[1:-2], encoded[-2]
    if any(code > FNC_1 for code in payload):
        raise UndecodableCharactersError("Code 128 payload holds a start or stop code")
    if check_value is not None and check_value > FNC_1:
        raise UndecodableCharactersError(f"Invalid Code 128 check value: {check_value}")
    return encoded[0], payload, check_value


def code128_to_latin1(encoded: bytes, no_latin1: bool = False, raw_array: bool = False) -> Any:
    """
    Run the codeset state machine over encoded code values.

    Args:
        encoded: Code values as produced by latin1_to_code128
        no_latin1: Report FNC4 as a token instead of shifting characters
        raw_array: Report every item, including start, codeset changes,
            shifts, check value and stop, without merging characters

    Returns:
        A str when the value has no tokens, otherwise a list of str and
        Code128Symbol items
    """
    start, payload, check_value = parse_code128(encoded)
    table = _TABLE_BY_START[start]
    shifted_table = None
    high_mode = False
    high_shift = False

    decoded: list[Any] = []
    if raw_array:
        decoded.append(CODE_A_TABLE[start])

    for code in payload:
        if shifted_table is not None:
            item, shifted_table = shifted_table[code], None
        else:
            item = table[code]

        if isinstance(item, Code128Symbol):
            if item is Code128Symbol.CODE_A:
                table = CODE_A_TABLE
            elif item is Code128Symbol.CODE_B:
                table = CODE_B_TABLE
            elif item is Code128Symbol.CODE_C:
                table = CODE_C_TABLE
            elif item is Code128Symbol.SHIFT_A:
                shifted_table = CODE_A_TABLE
            elif item is Code128Symbol.SHIFT_B:
                shifted_table = CODE_B_TABLE
            elif item is Code128Symbol.FNC_4 and not no_latin1:
                if high_shift:
                    high_mode = not high_mode
                    high_shift = False
                else:
                    high_shift = True
            elif not raw_array:
                decoded.append(item)
            if raw_array:
                decoded.append(item)
        elif high_mode and len(item) == 1:
            if high_shift:
                decoded.append(item)
                high_shift = False
            else:
                decoded.append(chr(ord(item) + 128))
        elif high_shift and len(item) == 1:
            decoded.append(chr(ord(item) + 128))
            high_shift = False
        else:
            decoded.append(item)

    if raw_array:
        if check_value is not None:
            decoded.extend((check_value, Code128Symbol.STOP))
        return decoded

    merged: list[Any] = []
    for item in decoded:
        if merged and isinstance(item, str) and isinstance(merged[-1], str):
            merged[-1] += item
        else:
            merged.append(item)

    if all(isinstance(item, str) for item in merged):
        return "".join(merged)
    return merged


class Code128(Barcode1D):
    """Code 128 barcode."""

    symbology: ClassVar[Symbology] = Symbology.CODE_128

    latin1_to_code128 = staticmethod(latin1_to_code128)
    code128_to_latin1 = staticmethod(code128_to_latin1)
    parse_code128 = staticmethod(parse_code128)

    @classmethod
    def can_encode(cls, value: Any) -> bool:
        try:
            items = _flatten(value)
        except UnencodableCharactersError:
            return False
        return bool(items) and all(item in FUNCTION_SYMBOLS or ord(item) < 256 for item in items)

    @classmethod
    def generate_check_digit_for(cls, value: bytes) -> int:
        """Check value for a start code followed by payload codes."""
        value = _to_codes(value)
        if not value:
            raise UnencodableCharactersError("Cannot compute a check value without a start code")
        return (value[0] + sum(position * code for position, code in enumerate(value[1:], start=1))) % 103

    @classmethod
    def split_payload_and_check_digit(cls, value: bytes) -> tuple[bytes, int]:
        value = _to_codes(value)
        if value and value[-1] == STOP:
            value = value[:-1]
        if len(value) < 2:
            raise UnencodableCharactersError(f"Cannot split check value from {value!r}")
        return value[:-1], value[-1]

    def _build(self, value: Any, options: BarcodeOptions) -> tuple[Any, Any, Any]:
        if options.raw_value:
            encoded = _to_codes(value)
            _, _, check_value = parse_code128(encoded)
            if check_value is None:
                encoded += bytes((self.generate_check_digit_for(encoded), STOP))
            elif not self.validate_check_digit_for(encoded):
                raise ChecksumError(f"Invalid Code 128 check value in {encoded!r}")
            decoded = code128_to_latin1(encoded, no_latin1=options.no_latin1, raw_array=options.raw_array)
            return decoded, encoded[-2], encoded

        if isinstance(value, (str, list, tuple)) and not value:
            raise ValueTooShortError("Code 128 value is empty")
        if not self.can_encode(value):
            raise UnencodableCharactersError(f"Cannot encode {value!r} as Code 128")
        encoded = latin1_to_code128(value)
        if not isinstance(value, str):
            value = list(value)
        return value, encoded[-2], encoded

    def _native_rle(self) -> str:
        return "".join(PATTERNS[code] for code in self._encoded_string)

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "Code128":
        resolved = cls.resolve_options(**options)
        rle = to_rle_pattern(pattern, resolved, max_width=4)

        if not is_code128_framed(rle):
            if not is_code128_framed(rle[::-1]):
                raise UnencodableCharactersError("Start/stop pattern is not detected")
            logger.debug("Detected reversed scan", symbology=cls.symbology.value)
            rle = rle[::-1]

        body = rle[: -len(STOP_PATTERN_RLE)]
        # start, check value and stop at the least
        if len(body) % 6 or len(body) < 12:
            raise UnencodableCharactersError("Wrong number of bars")

        codes = []
        for offset in range(0, len(body), 6):
            chunk = body[offset : offset + 6]
            if chunk not in PATTERN_LOOKUP:
                raise UndecodableCharactersError(f"Invalid sequence: {chunk}")
            codes.append(PATTERN_LOOKUP[chunk])
        encoded = bytes(codes + [STOP])

        if not cls.validate_check_digit_for(encoded):
            raise UndecodableCharactersError("Code 128 check value does not match")
        return cls(encoded, **{**options, "raw_value": True})


def is_code128_framed(rle: str) -> bool:
    return rle[:6] in START_PATTERNS_RLE and rle.endswith(STOP_PATTERN_RLE)
