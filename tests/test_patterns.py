"""
Tests for pattern conversion utilities.
"""

import random

from barcode1d.patterns import bars_to_rle, is_rle, rle_to_bars, rle_to_wn, rle_width, wn_to_rle


class TestRleToBars:
    """Tests for expanding rle into bar strings."""

    def test_default_characters(self):
        """Test expansion with the default line and space characters."""
        assert rle_to_bars("321") == "111001"

    def test_custom_characters(self):
        """Test expansion with custom characters."""
        assert rle_to_bars("321", line_character="X", space_character="_") == "XXX__X"

    def test_length_is_sum_of_runs(self):
        """Test that the bar string is as long as the rle width."""
        rle = "1213141516171819"
        assert len(rle_to_bars(rle)) == rle_width(rle)


class TestBarsToRle:
    """Tests for collapsing bar strings into rle."""

    def test_collapse(self):
        """Test collapsing a simple bar string."""
        assert bars_to_rle("111001") == "321"

    def test_inverse_of_rle_to_bars(self):
        """Test that collapsing reverses expansion for random patterns."""
        rng = random.Random(1128)
        for _ in range(50):
            rle = "".join(rng.choice("123456789") for _ in range(rng.randint(1, 30)))
            assert bars_to_rle(rle_to_bars(rle)) == rle


class TestWideNarrow:
    """Tests for wn conversions."""

    def test_wn_to_rle_default_ratio(self):
        """Test that wide runs become 2 by default."""
        assert wn_to_rle("wwn") == "221"

    def test_wn_to_rle_custom_ratio(self):
        """Test a 3:1 ratio."""
        assert wn_to_rle("wnw", wn_ratio=3) == "313"

    def test_wn_to_rle_custom_characters(self):
        """Test custom wide and narrow characters."""
        assert wn_to_rle("WNN", w_character="W", n_character="N") == "211"

    def test_rle_to_wn(self):
        """Test that any run wider than one unit is wide."""
        assert rle_to_wn("3219") == "wwnw"

    def test_rle_to_wn_same_length(self):
        """Test that rle and wn have the same length."""
        rle = "1121314"
        assert len(rle_to_wn(rle)) == len(rle)


class TestHelpers:
    """Tests for width and rle detection."""

    def test_rle_width(self):
        """Test total width."""
        assert rle_width("321") == 6
        assert rle_width("") == 0

    def test_is_rle(self):
        """Test rle detection."""
        assert is_rle("123")
        assert not is_rle("1230")
        assert not is_rle("wnw")
        assert not is_rle("")
