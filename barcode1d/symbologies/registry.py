"""
Lookup from symbology name to implementing class.
"""

from barcode1d.models import Symbology
from barcode1d.symbologies.base import Barcode1D
from barcode1d.symbologies.codabar import Codabar
from barcode1d.symbologies.code3of9 import Code3of9
from barcode1d.symbologies.code11 import Code11
from barcode1d.symbologies.code93 import Code93
from barcode1d.symbologies.code128 import Code128
from barcode1d.symbologies.ean8 import EAN8
from barcode1d.symbologies.ean13 import EAN13
from barcode1d.symbologies.interleaved2of5 import Interleaved2of5
from barcode1d.symbologies.msi import MSI
from barcode1d.symbologies.plessey import Plessey
from barcode1d.symbologies.postnet import PostNet
from barcode1d.symbologies.two_of_five import Coop2of5, IATA2of5, Industrial2of5, Matrix2of5
from barcode1d.symbologies.upc_a import UPCA
from barcode1d.symbologies.upc_e import UPCE
from barcode1d.symbologies.upc_supplemental_2 import UPCSupplemental2
from barcode1d.symbologies.upc_supplemental_5 import UPCSupplemental5

SYMBOLOGY_CLASSES: dict[Symbology, type[Barcode1D]] = {
    cls.symbology: cls
    for cls in (
        Code3of9,
        Code93,
        Code11,
        Codabar,
        Interleaved2of5,
        Industrial2of5,
        IATA2of5,
        Coop2of5,
        Matrix2of5,
        Plessey,
        MSI,
        PostNet,
        EAN13,
        EAN8,
        UPCA,
        UPCE,
        UPCSupplemental2,
        UPCSupplemental5,
        Code128,
    )
}


def get_symbology_class(symbology: Symbology | str) -> type[Barcode1D]:
    """
    Get the class implementing a symbology.

    Args:
        symbology: Symbology member or its name, e.g. "EAN-13"

    Returns:
        Barcode class

    Raises:
        ValueError: unknown symbology name
        KeyError: symbology has no implementation (UNKNOWN)
    """
    return SYMBOLOGY_CLASSES[Symbology(symbology)]
