"""
Tests for EAN-8.
"""

import pytest

from barcode1d.errors import UndecodableCharactersError, UnencodableCharactersError
from barcode1d.symbologies import EAN8

EAN8_BARS = "1010001011010111101111010110111010101001110111001010001001011100101"
EAN8_RLE = "1113112111414111213111111231321113121132111"


class TestEAN8:
    """Tests for building and decoding EAN-8 barcodes."""

    def test_check_digit(self):
        """Test check digits for known EAN-8 codes."""
        assert EAN8.generate_check_digit_for("9638507") == 4
        assert EAN8.generate_check_digit_for("5512345") == 7
        assert EAN8.validate_check_digit_for("50123452")
        assert not EAN8.validate_check_digit_for("96385075")

    def test_patterns(self):
        """Test bar and rle patterns."""
        barcode = EAN8("9638507")
        assert barcode.encoded_string == "96385074"
        assert barcode.bars == EAN8_BARS
        assert barcode.rle == EAN8_RLE

    def test_parts(self):
        """Test number system and product accessors."""
        barcode = EAN8("9638507")
        assert barcode.number_system == "963"
        assert barcode.product_code == "8507"

    def test_wrong_length(self):
        """Test rejection of values that are not seven digits."""
        with pytest.raises(UnencodableCharactersError):
            EAN8("963850")
        with pytest.raises(UnencodableCharactersError):
            EAN8("963850A")

    def test_decode(self):
        """Test decoding bars, rle and reversed patterns."""
        for pattern in (EAN8_BARS, EAN8_RLE, EAN8_BARS[::-1], EAN8_RLE[::-1]):
            barcode = EAN8.decode(pattern)
            assert barcode.value == "9638507"
            assert barcode.check_digit == 4

    def test_decode_even_left_digit(self):
        """Test that an even parity digit on the left half is rejected."""
        # first digit "9" drawn with even parity
        pattern = EAN8_RLE[:3] + "2113" + EAN8_RLE[7:]
        with pytest.raises(UndecodableCharactersError):
            EAN8.decode(pattern)
