"""
Tests for UPC-A.
"""

import pytest

from barcode1d.errors import UndecodableCharactersError, UnencodableCharactersError
from barcode1d.symbologies import EAN13, UPCA, UPCE


class TestUPCA:
    """Tests for building and decoding UPC-A barcodes."""

    def test_check_digit(self):
        """Test check digits for known UPC-A codes."""
        assert UPCA.generate_check_digit_for("03600029145") == 2
        assert UPCA.generate_check_digit_for("01234567890") == 5
        assert UPCA.generate_check_digit_for("07820601001") == 7
        assert UPCA.validate_check_digit_for("036000291452")

    def test_parts(self):
        """Test number system, manufacturer and product accessors."""
        barcode = UPCA("03600029145")
        assert barcode.encoded_string == "036000291452"
        assert barcode.number_system == "0"
        assert barcode.manufacturers_code == "36000"
        assert barcode.product_code == "29145"

    def test_same_pattern_as_ean13(self):
        """Test UPC-A draws as an EAN-13 with a leading 0."""
        assert UPCA("03600029145").rle == EAN13("003600029145").rle

    def test_wrong_length(self):
        """Test rejection of a twelve digit payload."""
        with pytest.raises(UnencodableCharactersError):
            UPCA("003600029145")

    def test_decode(self):
        """Test decoding forward and reversed patterns."""
        barcode = UPCA("03600029145")
        assert UPCA.decode(barcode.bars).value == "03600029145"
        assert UPCA.decode(barcode.rle[::-1]).check_digit == 2

    def test_decode_non_upc(self):
        """Test that an EAN-13 not starting with 0 is rejected."""
        with pytest.raises(UndecodableCharactersError):
            UPCA.decode(EAN13("400638133393").rle)


class TestUPCAToUPCE:
    """Tests for zero suppression."""

    def test_encodable(self):
        """Test detection of codes with a UPC-E form."""
        assert UPCA("03330000033").upc_e_encodable()
        assert not UPCA("03600029145").upc_e_encodable()

    def test_to_upc_e(self):
        """Test conversion keeps the check digit."""
        upc_a = UPCA("03330000033")
        upc_e = upc_a.to_upc_e()
        assert isinstance(upc_e, UPCE)
        assert upc_e.value == "0333333"
        assert upc_e.check_digit == upc_a.check_digit == 3

    def test_to_upc_e_from_included_checksum(self):
        """Test conversion of a barcode built with checksum_included."""
        upc_e = UPCA("033300000333", checksum_included=True).to_upc_e()
        assert upc_e.encoded_string == "03333333"

    def test_not_suppressible(self):
        """Test that a code without enough zeros cannot be converted."""
        with pytest.raises(UnencodableCharactersError):
            UPCA("03600029145").to_upc_e()
