"""
Barcode symbologies: encoding, check digits and pattern decoding.
"""

from barcode1d.symbologies.base import Barcode1D, WideNarrowBarcode
from barcode1d.symbologies.codabar import Codabar
from barcode1d.symbologies.code3of9 import Code3of9
from barcode1d.symbologies.code11 import Code11
from barcode1d.symbologies.code93 import Code93
from barcode1d.symbologies.code128 import Code128, Code128Symbol
from barcode1d.symbologies.ean8 import EAN8
from barcode1d.symbologies.ean13 import EAN13
from barcode1d.symbologies.interleaved2of5 import Interleaved2of5
from barcode1d.symbologies.msi import MSI
from barcode1d.symbologies.plessey import Plessey
from barcode1d.symbologies.postnet import PostNet
from barcode1d.symbologies.registry import get_symbology_class
from barcode1d.symbologies.two_of_five import Coop2of5, IATA2of5, Industrial2of5, Matrix2of5
from barcode1d.symbologies.upc_a import UPCA
from barcode1d.symbologies.upc_e import UPCE
from barcode1d.symbologies.upc_supplemental_2 import UPCSupplemental2
from barcode1d.symbologies.upc_supplemental_5 import UPCSupplemental5
from barcode1d.symbologies.validator import detect_symbology, is_valid_barcode, normalize_barcode

__all__ = [
    # Base
    "Barcode1D",
    "WideNarrowBarcode",
    # Two-width
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
    # EAN/UPC
    "EAN13",
    "EAN8",
    "UPCA",
    "UPCE",
    "UPCSupplemental2",
    "UPCSupplemental5",
    # Code 128
    "Code128",
    "Code128Symbol",
    # Helpers
    "get_symbology_class",
    "detect_symbology",
    "is_valid_barcode",
    "normalize_barcode",
]
