"""Tests for normalization utilities."""

from __future__ import annotations

import pytest

from tokenmeta.core.normalization import normalize_label, parse_int_value

# ============================================================================
# normalize_label Tests
# ============================================================================


class TestNormalizeLabel:
    """Tests for the normalize_label function."""

    @pytest.mark.parametrize("label", [None, ""])
    def test_empty(self, label):
        """Empty input should return an empty string."""
        assert normalize_label(label) == ""

    @pytest.mark.parametrize(
        "label",
        ["Pixel Count", "pixel_count", "PIXELCOUNT", "Pixel\tCount", " pixel _ count "],
    )
    def test_variants_match(self, label: str):
        """Case, whitespace and underscores should be ignored."""
        assert normalize_label(label) == "pixelcount"

    def test_other_punctuation_kept(self):
        """Only whitespace and underscores are removed."""
        assert normalize_label("Pixel-Count") == "pixel-count"


# ============================================================================
# parse_int_value Tests
# ============================================================================


class TestParseIntValue:
    """Tests for the parse_int_value function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, 0),
            (42, 42),
            ("42", 42),
            ("-3", -3),
            ("+8", 8),
            ("007", 7),
            ("12 pixels", 12),
            (3.99, 3),
        ],
    )
    def test_parses(self, value, expected: int):
        """Integers and leading-integer strings should parse."""
        assert parse_int_value(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "abc", "px12", False, True, float("nan"), float("inf"), [1], {"v": 1}, "9" * 5000],
    )
    def test_unparseable(self, value):
        """Anything without a leading integer should yield None."""
        assert parse_int_value(value) is None
