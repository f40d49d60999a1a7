"""
Full ASCII shift tables shared by Code 3 of 9 and Code 93.

Both symbologies reach characters outside their native alphabet by pairing
one of four shift characters with a native letter. Code 3 of 9 borrows
"$", "%", "/" and "+" for the shifts; Code 93 has four dedicated shift
characters of its own.
"""

from string import ascii_uppercase

from barcode1d.errors import UndecodableCharactersError, UnencodableCharactersError


def build_full_ascii_table(dollar: str, percent: str, slash: str, plus: str) -> tuple[str, ...]:
    """
    Build the 128-entry table mapping each ASCII code to its encoding.

    Args:
        dollar: Shift character standing in for "$"
        percent: Shift character standing in for "%"
        slash: Shift character standing in for "/"
        plus: Shift character standing in for "+"
    """
    table = [""] * 128
    table[0] = percent + "U"
    for code in range(1, 27):
        table[code] = dollar + ascii_uppercase[code - 1]
    for code in range(27, 32):
        table[code] = percent + "ABCDE"[code - 27]
    table[32] = " "
    for code in range(33, 45):
        table[code] = slash + "ABCDEFGHIJKL"[code - 33]
    table[45] = "-"
    table[46] = "."
    table[47] = slash + "O"
    for code in range(48, 58):
        table[code] = chr(code)
    table[58] = slash + "Z"
    for code in range(59, 64):
        table[code] = percent + "FGHIJ"[code - 59]
    table[64] = percent + "V"
    for code in range(65, 91):
        table[code] = chr(code)
    for code in range(91, 96):
        table[code] = percent + "KLMNO"[code - 91]
    table[96] = percent + "W"
    for code in range(97, 123):
        table[code] = plus + ascii_uppercase[code - 97]
    for code in range(123, 128):
        table[code] = percent + "PQRST"[code - 123]
    return tuple(table)


def build_reverse_table(table: tuple[str, ...], percent: str) -> dict[str, str]:
    """Invert a full ASCII table; %X, %Y and %Z also decode to DEL."""
    reverse = {encoded: chr(code) for code, encoded in enumerate(table)}
    for letter in "XYZ":
        reverse[percent + letter] = chr(127)
    return reverse


def encode_with(table: tuple[str, ...], value: str) -> str:
    if any(ord(char) > 127 for char in value):
        raise UnencodableCharactersError("Full ASCII covers character codes 0-127 only")
    return "".join(table[ord(char)] for char in value)


def decode_with(reverse: dict[str, str], shifts: str, value: str) -> str:
    """
    Collapse shift pairs back to single characters.

    Raises:
        UndecodableCharactersError: a shift character is dangling or pairs
            with a letter that has no meaning after it
    """
    decoded = []
    index = 0
    while index < len(value):
        char = value[index]
        if char in shifts:
            pair = value[index : index + 2]
            if pair not in reverse:
                raise UndecodableCharactersError(f"Invalid full ASCII sequence: {pair!r}")
            decoded.append(reverse[pair])
            index += 2
        else:
            decoded.append(char)
            index += 1
    return "".join(decoded)
