"""
barcode1d: encoders, check digits and pattern decoders for 1D barcodes.
"""

from barcode1d.config import Settings, configure_logging, get_settings
from barcode1d.errors import (
    Barcode1DError,
    ChecksumError,
    UndecodableCharactersError,
    UnencodableCharactersError,
    UnencodableError,
    UnsupportedOperationError,
    ValueTooLongError,
    ValueTooShortError,
)
from barcode1d.models import BarcodeOptions, Symbology
from barcode1d.symbologies import (
    EAN8,
    EAN13,
    MSI,
    UPCA,
    UPCE,
    Barcode1D,
    Codabar,
    Code3of9,
    Code11,
    Code93,
    Code128,
    Code128Symbol,
    Coop2of5,
    IATA2of5,
    Industrial2of5,
    Interleaved2of5,
    Matrix2of5,
    Plessey,
    PostNet,
    UPCSupplemental2,
    UPCSupplemental5,
    detect_symbology,
    get_symbology_class,
    is_valid_barcode,
    normalize_barcode,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "Settings",
    "configure_logging",
    "get_settings",
    # Errors
    "Barcode1DError",
    "UnencodableError",
    "ValueTooLongError",
    "ValueTooShortError",
    "UnencodableCharactersError",
    "ChecksumError",
    "UndecodableCharactersError",
    "UnsupportedOperationError",
    # Models
    "BarcodeOptions",
    "Symbology",
    # Symbologies
    "Barcode1D",
    "Code3of9",
    "Code93",
    "Code11",
    "Codabar",
    "Interleaved2of5",
    "Industrial2of5",
    "IATA2of5",
    "Coop2of5",
    "Matrix2of5",
    "Plessey",
    "MSI",
    "PostNet",
    "EAN13",
    "EAN8",
    "UPCA",
    "UPCE",
    "UPCSupplemental2",
    "UPCSupplemental5",
    "Code128",
    "Code128Symbol",
    # Helpers
    "get_symbology_class",
    "detect_symbology",
    "is_valid_barcode",
    "normalize_barcode",
]
