"""
Barcode validation utilities for EAN/UPC digit strings.
"""

import logging

import structlog

from barcode1d.errors import Barcode1DError
from barcode1d.models import Symbology
from barcode1d.symbologies.registry import get_symbology_class
from barcode1d.symbologies.upc_e import UPCE

logger = structlog.wrap_logger(logging.getLogger(__name__))


def detect_symbology(code: str) -> Symbology:
    """
    Detect barcode symbology from a digit string.

    Args:
        code: Barcode string, check digit included

    Returns:
        Detected symbology
    """
    if not (code.isascii() and code.isdigit()):
        return Symbology.UNKNOWN

    length = len(code)

    if length == 13:
        return Symbology.EAN_13
    elif length == 8:
        return Symbology.EAN_8
    elif length == 12:
        return Symbology.UPC_A
    elif length == 6 or length == 7:
        return Symbology.UPC_E
    else:
        return Symbology.UNKNOWN


def is_valid_barcode(code: str) -> tuple[bool, Symbology, str]:
    """
    Validate a barcode completely.

    A six digit UPC-E carries no check digit and is accepted as is; a
    seven digit one is taken as six digits and a check digit.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, symbology, error_message)
    """
    if not (code.isascii() and code.isdigit()):
        return False, Symbology.UNKNOWN, "Code contains non-numeric characters"

    symbology = detect_symbology(code)

    if symbology == Symbology.UNKNOWN:
        return False, symbology, f"Unsupported code length: {len(code)}"

    if symbology == Symbology.UPC_E and len(code) == 6:
        return True, symbology, ""

    barcode_class = get_symbology_class(symbology)
    try:
        valid = barcode_class.validate_check_digit_for(code)
    except Barcode1DError as e:
        logger.debug("Checksum validation failed", code=code, symbology=symbology.value, error=str(e))
        return False, symbology, f"Invalid {symbology.value} code: {e}"

    if valid:
        return True, symbology, ""
    return False, symbology, f"Invalid {symbology.value} checksum"


def normalize_barcode(code: str, symbology: Symbology) -> str:
    """
    Normalize barcode to standard format.

    - UPC-A: Convert to EAN-13 by adding leading 0
    - UPC-E: Expand to UPC-A, then to EAN-13
    - Others: Return as-is

    Args:
        code: Barcode string
        symbology: Detected symbology

    Returns:
        Normalized barcode

    Raises:
        ChecksumError: a seven digit UPC-E has the wrong check digit
    """
    if symbology == Symbology.UPC_A and len(code) == 12:
        return "0" + code
    if symbology == Symbology.UPC_E and len(code) in (6, 7):
        upc_e = UPCE(code, checksum_included=len(code) == 7)
        return "0" + upc_e.to_upc_a().encoded_string
    return code
