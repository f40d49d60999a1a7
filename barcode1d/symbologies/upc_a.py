"""UPC-A: an EAN-13 whose leading digit is 0, carried as eleven data digits."""

from typing import Any, ClassVar

from barcode1d.errors import UnencodableCharactersError, UndecodableCharactersError
from barcode1d.models import Symbology
from barcode1d.symbologies.ean13 import EAN13


class UPCA(EAN13):
    """UPC-A barcode."""

    symbology: ClassVar[Symbology] = Symbology.UPC_A
    PAYLOAD_LENGTH: ClassVar[int] = 11

    @classmethod
    def generate_check_digit_for(cls, value: Any) -> int:
        value = str(value)
        if not cls.can_encode(value, checksum_included=False):
            raise UnencodableCharactersError(f"Cannot compute check digit for {value!r}")
        return EAN13.generate_check_digit_for("0" + value)

    @property
    def number_system(self) -> str:
        return self._value[0]

    @property
    def manufacturers_code(self) -> str:
        return self._value[1:6]

    @property
    def product_code(self) -> str:
        return self._value[6:11]

    def _thirteen_digits(self) -> str:
        return "0" + self._encoded_string

    def upc_e_encodable(self) -> bool:
        """Whether this code has a zero-suppressed UPC-E form."""
        from barcode1d.symbologies.upc_e import UPCE

        try:
            UPCE.upca_to_upce(self._value)
        except UnencodableCharactersError:
            return False
        return True

    def to_upc_e(self):
        """
        Convert to the equivalent UPC-E barcode.

        Raises:
            UnencodableCharactersError: the code cannot be zero-suppressed
        """
        from barcode1d.symbologies.upc_e import UPCE

        options = {**self._options.model_dump(), "checksum_included": False}
        return UPCE(UPCE.upca_to_upce(self._value), **options)

    @classmethod
    def decode(cls, pattern: str, **options: Any) -> "UPCA":
        digits = EAN13.decode_digits(pattern, cls.resolve_options(**options))
        if digits[0] != "0":
            raise UndecodableCharactersError(f"UPC-A must start with 0, got {digits[0]}")
        return cls._from_decoded(digits[1:], **options)
