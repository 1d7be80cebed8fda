"""
Tests for placement.py - parsing and validating furigana placement data.
"""

import pytest

from furiawase.models import Placement
from furiawase.placement import PlacementError, format_furi, parse_furi, validate_placements


class TestParseFuriString:
    """Tests for the JMdict placement string format."""

    def test_single_index(self):
        assert parse_furi("0:きょう") == [Placement(0, 1, "きょう")]

    def test_inclusive_end_index(self):
        # JMdict lists the index of the final character
        assert parse_furi("0-1:きょう") == [Placement(0, 2, "きょう")]

    def test_end_equal_to_start(self):
        assert parse_furi("1-1:び") == [Placement(1, 2, "び")]

    def test_multiple_entries(self):
        assert parse_furi("0:た;2:もの") == [Placement(0, 1, "た"), Placement(2, 3, "もの")]

    def test_entries_are_sorted(self):
        assert parse_furi("2:もの;0:た") == [Placement(0, 1, "た"), Placement(2, 3, "もの")]

    def test_trailing_separator(self):
        assert parse_furi("0:た;") == [Placement(0, 1, "た")]

    @pytest.mark.parametrize("data", [None, "", {}])
    def test_no_data(self, data):
        assert parse_furi(data) == []


class TestParseFuriMapping:
    """Tests for the start index mapping format."""

    def test_int_and_str_keys(self):
        assert parse_furi({0: "た", "2": "もの"}) == [Placement(0, 1, "た"), Placement(2, 3, "もの")]

    def test_sorted_by_start(self):
        assert parse_furi({"3": "び", "0": "きょう"})[0].start == 0


class TestMalformedPlacement:
    """Malformed data fails with an error naming the entry."""

    @pytest.mark.parametrize("data, message", [
        ("x:た", "'x:た'"),
        ("0た", "Missing ':'"),
        ("0:", "Empty furigana"),
        ("2-1:た", "End index before start"),
        ("0-y:た", "Invalid index 'y'"),
        ({"a": "た"}, "Invalid index 'a'"),
        ({-1: "た"}, "Invalid index -1"),
        ({0: ""}, "Empty furigana"),
    ])
    def test_malformed(self, data, message):
        with pytest.raises(PlacementError, match=message):
            parse_furi(data)

    def test_unsupported_type(self):
        with pytest.raises(PlacementError):
            parse_furi(12)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_furi("x:た")


class TestValidatePlacements:
    """Tests for checking placements against a word."""

    def test_valid(self):
        validate_placements("食べ物", [Placement(0, 1, "た"), Placement(2, 3, "もの")])

    def test_outside_word(self):
        with pytest.raises(PlacementError, match="outside"):
            validate_placements("食", [Placement(0, 2, "た")])

    def test_overlap(self):
        with pytest.raises(PlacementError, match="overlaps"):
            validate_placements("今日は", [Placement(0, 2, "きょう"), Placement(1, 2, "ひ")])

    def test_out_of_order(self):
        with pytest.raises(PlacementError):
            validate_placements("食べ物", [Placement(2, 3, "もの"), Placement(0, 1, "た")])

    def test_empty_range(self):
        with pytest.raises(PlacementError, match="Empty or negative"):
            validate_placements("食べ物", [Placement(1, 1, "た")])


class TestFormatFuri:
    """Tests for formatting placements back to a string."""

    def test_format(self):
        assert format_furi([Placement(0, 2, "きょう"), Placement(3, 4, "び")]) == "0-1:きょう;3:び"

    def test_empty(self):
        assert format_furi([]) is None

    def test_parse_formatted(self):
        placements = [Placement(0, 1, "た"), Placement(2, 4, "もの")]
        assert parse_furi(format_furi(placements)) == placements
