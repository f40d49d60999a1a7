"""
Tests for the UPC five digit supplement.
"""

import pytest

from barcode1d.errors import ChecksumError, UndecodableCharactersError, UnencodableCharactersError
from barcode1d.symbologies import UPCSupplemental5

SUPP5_BARS = "10110110001010100001010001011010010111010001011"
SUPP5_RLE = "1121231111141113112112113113112"


class TestUPCSupplemental5:
    """Tests for building and decoding five digit supplements."""

    def test_check_digit(self):
        """Test the weighted check digit."""
        assert UPCSupplemental5.generate_check_digit_for("53999") == 7
        assert UPCSupplemental5.generate_check_digit_for("00000") == 0

    def test_encoding(self):
        """Test check digit and patterns."""
        barcode = UPCSupplemental5("53999")
        assert barcode.check_digit == 7
        assert barcode.encoded_string == "539997"
        assert barcode.bars == SUPP5_BARS
        assert barcode.rle == SUPP5_RLE

    def test_parts(self):
        """Test currency and price accessors."""
        barcode = UPCSupplemental5("53999")
        assert barcode.currency_code == "5"
        assert barcode.price == "3999"

    def test_checksum_included(self):
        """Test values carrying their check digit."""
        assert UPCSupplemental5("539997", checksum_included=True).value == "53999"
        with pytest.raises(ChecksumError):
            UPCSupplemental5("539998", checksum_included=True)

    def test_wrong_length(self):
        """Test rejection of values that are not five digits."""
        with pytest.raises(UnencodableCharactersError):
            UPCSupplemental5("5399")

    def test_decode(self):
        """Test decoding bars, rle and reversed patterns."""
        for pattern in (SUPP5_BARS, SUPP5_RLE, SUPP5_RLE[::-1], SUPP5_BARS[::-1]):
            barcode = UPCSupplemental5.decode(pattern)
            assert barcode.value == "53999"
            assert barcode.check_digit == 7

    def test_round_trip(self):
        """Test decoding a range of prices."""
        for value in ("00001", "12345", "90000", "09999", "51234"):
            barcode = UPCSupplemental5(value)
            assert UPCSupplemental5.decode(barcode.rle).value == value

    def test_bad_middle_guard(self):
        """Test rejection of a broken middle guard."""
        pattern = SUPP5_RLE[:7] + "21" + SUPP5_RLE[9:]
        with pytest.raises(UnencodableCharactersError):
            UPCSupplemental5.decode(pattern)

    def test_parity_mismatch(self):
        """Test that parities giving the wrong check digit are rejected."""
        # first digit "5" switched from odd to even parity
        pattern = SUPP5_RLE[:3] + "1321" + SUPP5_RLE[7:]
        with pytest.raises(UndecodableCharactersError):
            UPCSupplemental5.decode(pattern)
