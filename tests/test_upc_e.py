"""
Tests for UPC-E.
"""

import pytest

from barcode1d.errors import ChecksumError, UndecodableCharactersError, UnencodableCharactersError
from barcode1d.symbologies import UPCA, UPCE

UPCE_BARS = "101011001100100110011101011100101110110011001010101"
UPCE_RLE = "111122221222311132113122221111111"


class TestUPCEExpansion:
    """Tests for the UPC-E and UPC-A conversions."""

    def test_upce_to_upca(self):
        """Test expansion for each last digit template."""
        assert UPCE.upce_to_upca("123450") == "01200000345"
        assert UPCE.upce_to_upca("123452") == "01220000345"
        assert UPCE.upce_to_upca("123453") == "01230000045"
        assert UPCE.upce_to_upca("123454") == "01234000005"
        assert UPCE.upce_to_upca("123457") == "01234500007"
        assert UPCE.upce_to_upca("0123457") == "01234500007"

    def test_upca_to_upce(self):
        """Test contraction back to UPC-E."""
        for upce in ("123450", "123452", "123453", "123454", "123457"):
            assert UPCE.upca_to_upce(UPCE.upce_to_upca(upce)) == "0" + upce

    def test_upca_to_upce_rejects(self):
        """Test that codes without the zero runs cannot be contracted."""
        with pytest.raises(UnencodableCharactersError):
            UPCE.upca_to_upce("03600029145")

    def test_bad_payload(self):
        """Test rejection of a payload of the wrong size."""
        with pytest.raises(UnencodableCharactersError):
            UPCE.upce_to_upca("12345")


class TestUPCEEncoding:
    """Tests for building UPC-E barcodes."""

    def test_check_digit(self):
        """Test that the check digit is that of the UPC-A expansion."""
        assert UPCE.generate_check_digit_for("124571") == 4
        assert UPCE.generate_check_digit_for("333333") == 3

    def test_six_and_seven_digits(self):
        """Test payloads with and without the number system."""
        assert UPCE("124571").value == "0124571"
        assert UPCE("0124571").value == "0124571"
        assert UPCE("124571").encoded_string == "01245714"

    def test_seven_digit_payload_needs_zero(self):
        """Test that only number system 0 is supported."""
        with pytest.raises(UnencodableCharactersError):
            UPCE("1124571")

    def test_checksum_included(self):
        """Test values carrying their check digit."""
        assert UPCE("01245714", checksum_included=True).value == "0124571"
        assert UPCE("1245714", checksum_included=True).value == "0124571"
        with pytest.raises(ChecksumError):
            UPCE("01245715", checksum_included=True)

    def test_parts(self):
        """Test accessors read the expanded number."""
        barcode = UPCE("124571")
        assert barcode.number_system == "0"
        assert barcode.manufacturers_code == "12100"
        assert barcode.product_code == "00457"

    def test_patterns(self):
        """Test bar and rle patterns."""
        barcode = UPCE("124571")
        assert barcode.bars == UPCE_BARS
        assert barcode.rle == UPCE_RLE

    def test_to_upc_a(self):
        """Test conversion to UPC-A."""
        upc_a = UPCE("124571").to_upc_a()
        assert isinstance(upc_a, UPCA)
        assert upc_a.encoded_string == "012100004574"


class TestUPCEDecoding:
    """Tests for decoding UPC-E patterns."""

    def test_decode(self):
        """Test decoding bars, rle and reversed patterns."""
        for pattern in (UPCE_BARS, UPCE_RLE, UPCE_BARS[::-1], UPCE_RLE[::-1]):
            barcode = UPCE.decode(pattern)
            assert barcode.value == "0124571"
            assert barcode.check_digit == 4

    def test_decode_leading_six(self):
        """Test decoding a code whose first encoded digit is 6."""
        barcode = UPCE("612345")
        assert UPCE.decode(barcode.rle).value == "0612345"

    def test_bad_guard(self):
        """Test rejection of a broken guard."""
        with pytest.raises(UnencodableCharactersError):
            UPCE.decode("211" + UPCE_RLE[3:])

    def test_parity_mismatch(self):
        """Test that parities giving the wrong check digit are rejected."""
        # first digit "1" switched from even to odd parity
        pattern = UPCE_RLE[:3] + "2221" + UPCE_RLE[7:]
        with pytest.raises(UndecodableCharactersError):
            UPCE.decode(pattern)
