"""
Tests for Code 3 of 9.
"""

import random

import pytest

from barcode1d.errors import ChecksumError, UndecodableCharactersError, UnencodableCharactersError
from barcode1d.symbologies import Code3of9
from barcode1d.symbologies.code3of9 import CHAR_SEQUENCE, SIDE_GUARD_PATTERN


class TestCode3of9Checksum:
    """Tests for the mod 43 check character."""

    def test_known_check_character(self):
        """Test the check character of a known value."""
        assert Code3of9.generate_check_digit_for("THIS IS A TEST") == "I"

    def test_validate(self):
        """Test validation of a value with its check character."""
        assert Code3of9.validate_check_digit_for("THIS IS A TESTI")
        assert not Code3of9.validate_check_digit_for("THIS IS A TESTJ")

    def test_generate_rejects_lowercase(self):
        """Test that the check character needs native characters."""
        with pytest.raises(UnencodableCharactersError):
            Code3of9.generate_check_digit_for("abc")


class TestCode3of9Encoding:
    """Tests for building Code 3 of 9 barcodes."""

    def test_skips_checksum_by_default(self):
        """Test that no check character is added unless asked."""
        barcode = Code3of9("THIS IS A TEST")
        assert barcode.check_digit is None
        assert barcode.encoded_string == "THIS IS A TEST"

    def test_adds_checksum(self):
        """Test adding the check character."""
        barcode = Code3of9("THIS IS A TEST", skip_checksum=False)
        assert barcode.check_digit == "I"
        assert barcode.encoded_string == "THIS IS A TESTI"

    def test_checksum_included(self):
        """Test splitting an included check character."""
        barcode = Code3of9("THIS IS A TESTI", checksum_included=True)
        assert barcode.value == "THIS IS A TEST"
        assert barcode.check_digit == "I"

    def test_bad_checksum(self):
        """Test rejection of a wrong check character."""
        with pytest.raises(ChecksumError):
            Code3of9("THIS IS A TESTJ", checksum_included=True)

    def test_lowercase_unencodable(self):
        """Test that lowercase letters need full ASCII first."""
        with pytest.raises(UnencodableCharactersError):
            Code3of9("abc")

    def test_wn_layout(self):
        """Test the guard patterns and separators."""
        barcode = Code3of9("A")
        assert barcode.wn == SIDE_GUARD_PATTERN + "n" + "wnnnnwnnw" + "n" + SIDE_GUARD_PATTERN
        assert barcode.width == len(barcode.bars)

    def test_custom_wn_characters(self):
        """Test wn output in custom characters."""
        barcode = Code3of9("A", w_character="W", n_character="N")
        assert set(barcode.wn) == {"W", "N"}


class TestCode3of9FullAscii:
    """Tests for the full ASCII shift table."""

    def test_lowercase(self):
        """Test that lowercase letters use the + shift."""
        assert Code3of9.encode_full_ascii("abc") == "+A+B+C"

    def test_round_trip_all_ascii(self):
        """Test every ASCII character survives encoding and decoding."""
        value = "".join(chr(code) for code in range(128))
        encoded = Code3of9.encode_full_ascii(value)
        assert Code3of9.can_encode(encoded)
        assert Code3of9.decode_full_ascii(encoded) == value

    def test_non_ascii(self):
        """Test that characters above 127 are rejected."""
        with pytest.raises(UnencodableCharactersError):
            Code3of9.encode_full_ascii("é")

    def test_dangling_shift(self):
        """Test that a shift without a partner is undecodable."""
        with pytest.raises(UndecodableCharactersError):
            Code3of9.decode_full_ascii("AB+")


class TestCode3of9Decoding:
    """Tests for decoding Code 3 of 9 patterns."""

    def test_round_trip(self):
        """Test decoding random values from wn and rle, in both directions."""
        rng = random.Random(39)
        for _ in range(30):
            value = "".join(rng.choice(CHAR_SEQUENCE) for _ in range(rng.randint(1, 20)))
            barcode = Code3of9(value)
            assert Code3of9.decode(barcode.wn).value == value
            assert Code3of9.decode(barcode.wn[::-1]).value == value
            assert Code3of9.decode(barcode.rle).value == value

    def test_custom_characters(self):
        """Test decoding wn written in custom characters."""
        barcode = Code3of9("CODE39", w_character="W", n_character="N")
        decoded = Code3of9.decode(barcode.wn, w_character="W", n_character="N")
        assert decoded.value == "CODE39"

    def test_missing_guards(self):
        """Test that a pattern without guards is rejected."""
        with pytest.raises(UnencodableCharactersError):
            Code3of9.decode("nnnnwwnnn")

    def test_unknown_character(self):
        """Test that an unknown character pattern is undecodable."""
        wn = SIDE_GUARD_PATTERN + "n" + "wwwwwwwww" + "n" + SIDE_GUARD_PATTERN
        with pytest.raises(UndecodableCharactersError):
            Code3of9.decode(wn)
