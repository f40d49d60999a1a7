"""
Resolved encoding options shared by every symbology.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CheckDigitMethod = Literal["mod 10", "mod 11", "mod 1010", "mod 1110"]
CheckStyle = Literal["ibm", "ncr"]


class BarcodeOptions(BaseModel):
    """
    Options attached to a barcode instance.

    Instances are frozen; a barcode never changes its options after
    construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Output alphabets
    line_character: str = Field("1", min_length=1, max_length=1)
    space_character: str = Field("0", min_length=1, max_length=1)
    w_character: str = Field("w", min_length=1, max_length=1)
    n_character: str = Field("n", min_length=1, max_length=1)
    wn_ratio: int = Field(2, ge=2, le=9, description="Width of a wide run in units")

    # Checksum handling
    checksum_included: bool = Field(False, description="Value already ends with its check digit(s)")
    skip_checksum: bool = Field(False, description="Encode without a check digit where optional")

    # MSI
    check_digit: CheckDigitMethod = "mod 10"
    check_style: CheckStyle = "ibm"

    # Code 93
    force_full_ascii: bool = False

    # Codabar
    varied_wn_ratio: bool = False

    # Code 128
    no_latin1: bool = Field(False, description="Report FNC4 as a token instead of shifting to Latin-1")
    raw_array: bool = Field(False, description="Report every code including start, shifts and stop")
    raw_value: bool = Field(False, description="Value is an already encoded Code 128 byte string")
