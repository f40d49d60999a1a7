"""
Conversions between the three pattern representations.

A pattern is a run of alternating bars and spaces, always starting with a
bar. It can be written as:

- bars: one character per unit of width, e.g. "111001"
- rle: one digit per run giving its width, e.g. "321"
- wn: one character per run, wide or narrow, e.g. "wwn"

Going from rle to wn is lossy: any run wider than one unit is "wide".
"""

from itertools import groupby

RLE_DIGITS = frozenset("123456789")


def rle_to_bars(rle: str, line_character: str = "1", space_character: str = "0") -> str:
    """
    Expand a run-length string into a bar string.

    Args:
        rle: Digits 1-9, first run is a bar
        line_character: Character used for one unit of bar
        space_character: Character used for one unit of space

    Returns:
        Bar string whose length is the sum of the rle digits
    """
    parts = []
    for index, width in enumerate(rle):
        char = line_character if index % 2 == 0 else space_character
        parts.append(char * int(width))
    return "".join(parts)


def bars_to_rle(bars: str) -> str:
    """Collapse each maximal run of identical characters into its length."""
    return "".join(str(len(list(run))) for _, run in groupby(bars))


def wn_to_rle(
    wn: str,
    w_character: str = "w",
    n_character: str = "n",
    wn_ratio: int = 2,
) -> str:
    """Map wide runs to the ratio digit and narrow runs to 1."""
    return wn.translate(str.maketrans({w_character: str(wn_ratio), n_character: "1"}))


def rle_to_wn(rle: str, w_character: str = "w", n_character: str = "n") -> str:
    """Classify each run: width 1 is narrow, anything wider is wide."""
    return "".join(n_character if width == "1" else w_character for width in rle)


def rle_width(rle: str) -> int:
    """Total unit width of a run-length string."""
    return sum(int(width) for width in rle)


def is_rle(pattern: str) -> bool:
    """True when the pattern is a non-empty string of digits 1-9."""
    return bool(pattern) and all(char in RLE_DIGITS for char in pattern)
