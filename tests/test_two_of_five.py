"""
Tests for the discrete 2 of 5 symbologies.
"""

import random

import pytest

from barcode1d.errors import ChecksumError, UnencodableCharactersError
from barcode1d.symbologies import Coop2of5, IATA2of5, Industrial2of5, Matrix2of5
from barcode1d.symbologies.two_of_five import TWO_OF_FIVE_PATTERNS

TWO_OF_FIVE_CLASSES = (Industrial2of5, IATA2of5, Matrix2of5, Coop2of5)


class TestTwoOfFiveChecksum:
    """Tests for the shared mod 10 check digit."""

    def test_known_check_digit(self):
        """Test the check digit is the same for the whole family."""
        for cls in TWO_OF_FIVE_CLASSES:
            assert cls.generate_check_digit_for("1234") == 2

    def test_checksum_included(self):
        """Test splitting an included check digit."""
        barcode = Industrial2of5("12342", checksum_included=True)
        assert barcode.value == "1234"
        assert barcode.check_digit == 2

    def test_bad_checksum(self):
        """Test rejection of a wrong check digit."""
        with pytest.raises(ChecksumError):
            Matrix2of5("12343", checksum_included=True)

    def test_non_digits(self):
        """Test that check digits need a non-empty digit string."""
        with pytest.raises(UnencodableCharactersError):
            Industrial2of5.generate_check_digit_for("12a")
        with pytest.raises(UnencodableCharactersError):
            Coop2of5.generate_check_digit_for("x")
        for value in ("", "12a"):
            with pytest.raises(UnencodableCharactersError):
                Industrial2of5.validate_check_digit_for(value)


class TestIndustrial2of5:
    """Tests for Industrial 2 of 5."""

    def test_wn(self):
        """Test the wn pattern of a known value."""
        barcode = Industrial2of5("1234")
        assert barcode.check_digit is None
        assert barcode.wn == "wnwnnnwnnnnnnnwnnnwnnnnnwnwnwnnnnnnnnnnnwnnnwnwnnnw"

    def test_add_check_digit(self):
        """Test adding the optional check digit."""
        assert Industrial2of5("1234", skip_checksum=False).encoded_string == "12342"


class TestIATA2of5:
    """Tests for IATA 2 of 5."""

    def test_wn(self):
        """Test the wn pattern of a known value."""
        assert IATA2of5("1234").wn == "nnnnwnnnnnnnwnnnwnnnnnwnwnwnnnnnnnnnnnwnnnwnwnn"


class TestMatrix2of5:
    """Tests for Matrix 2 of 5."""

    def test_wn(self):
        """Test the start, digit and stop layout."""
        wn = Matrix2of5("12").wn
        assert wn == "wnnnn" + "n" + TWO_OF_FIVE_PATTERNS["1"] + "n" + TWO_OF_FIVE_PATTERNS["2"] + "n" + "wnnnn"


class TestCoop2of5:
    """Tests for COOP 2 of 5."""

    def test_adds_check_digit_by_default(self):
        """Test that COOP generates its check digit."""
        barcode = Coop2of5("1234")
        assert barcode.check_digit == 2
        assert barcode.encoded_string == "12342"

    def test_wn(self):
        """Test the wn pattern of a known value."""
        assert Coop2of5("1234", skip_checksum=True).wn == "wnwnnnnwwnnnwnwnnnwwnnnwnnwnnww"


class TestTwoOfFiveDecoding:
    """Tests for decoding the whole family."""

    def test_round_trip(self):
        """Test decoding random values in both directions."""
        rng = random.Random(205)
        for cls in TWO_OF_FIVE_CLASSES:
            for _ in range(20):
                value = "".join(rng.choice("0123456789") for _ in range(rng.randint(1, 15)))
                barcode = cls(value)
                assert cls.decode(barcode.wn).value == value
                assert cls.decode(barcode.wn[::-1]).value == value
                assert cls.decode(barcode.rle).value == value

    def test_unencodable(self):
        """Test rejection of letters."""
        for cls in TWO_OF_FIVE_CLASSES:
            with pytest.raises(UnencodableCharactersError):
                cls("12A4")

    def test_wrong_symbology(self):
        """Test that a COOP pattern does not read as Industrial."""
        with pytest.raises(UnencodableCharactersError):
            Industrial2of5.decode(Coop2of5("1234").wn)
