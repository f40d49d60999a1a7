"""
Symbology identifiers.
"""

from enum import Enum


class Symbology(str, Enum):
    """Supported barcode symbologies."""

    CODE_3_OF_9 = "Code 3 of 9"
    CODE_93 = "Code 93"
    CODE_11 = "Code 11"
    CODABAR = "Codabar"
    INTERLEAVED_2_OF_5 = "Interleaved 2 of 5"
    INDUSTRIAL_2_OF_5 = "Industrial 2 of 5"
    IATA_2_OF_5 = "IATA 2 of 5"
    COOP_2_OF_5 = "COOP 2 of 5"
    MATRIX_2_OF_5 = "Matrix 2 of 5"
    PLESSEY = "Plessey"
    MSI = "MSI"
    POSTNET = "PostNet"
    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    UPC_E = "UPC-E"
    UPC_SUPPLEMENTAL_2 = "UPC Supplemental 2"
    UPC_SUPPLEMENTAL_5 = "UPC Supplemental 5"
    CODE_128 = "Code 128"
    UNKNOWN = "UNKNOWN"
