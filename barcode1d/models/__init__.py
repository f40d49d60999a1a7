"""
Pydantic models and enums shared across symbologies.
"""

from barcode1d.models.options import BarcodeOptions, CheckDigitMethod, CheckStyle
from barcode1d.models.symbology import Symbology

__all__ = [
    "BarcodeOptions",
    "CheckDigitMethod",
    "CheckStyle",
    "Symbology",
]
