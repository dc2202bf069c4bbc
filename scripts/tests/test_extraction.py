"""Category A: Row Extraction Tests

Tests for turning raw CSV rows into kill events.
Core question: are names required, coordinates optional, distances exact?
"""

import pytest
from helpers import make_row

from killstats.errors import ParseError
from killstats.extraction import parse_coordinate, kill_distance, extract_event


# ─── A1: Coordinate parsing degrades to unknown ──────────────────

class TestA1_ParseCoordinate:

    def test_plain_number(self):
        assert parse_coordinate("123.5") == 123.5

    def test_negative_number_is_valid(self):
        assert parse_coordinate("-1") == -1.0

    def test_whitespace_tolerated(self):
        assert parse_coordinate(" 4.25 ") == 4.25

    @pytest.mark.parametrize("cell", ["", "abc", "1,5", "12m", None])
    def test_unparsable_is_unknown(self, cell):
        assert parse_coordinate(cell) is None

    @pytest.mark.parametrize("cell", ["nan", "inf", "-inf"])
    def test_non_finite_is_unknown(self, cell):
        assert parse_coordinate(cell) is None


# ─── A2: Distance rule ───────────────────────────────────────────

class TestA2_KillDistance:

    def test_three_four_five(self):
        assert kill_distance((0, 0), (3, 4)) == 5.00

    def test_rounded_to_two_decimals(self):
        # sqrt(2) = 1.41421...
        assert kill_distance((0, 0), (1, 1)) == 1.41

    def test_unknown_killer_contributes_zero(self):
        assert kill_distance(None, (3, 4)) == 0.0

    def test_unknown_victim_contributes_zero(self):
        assert kill_distance((3, 4), None) == 0.0

    def test_same_position(self):
        assert kill_distance((7.5, 7.5), (7.5, 7.5)) == 0.0

    def test_huge_distance_contributes_zero(self):
        # Finite, but too large to count in hundredths
        assert kill_distance((1e307, 0), (-1e307, 0)) == 0.0

    def test_overflowing_difference_contributes_zero(self):
        assert kill_distance((1e308, 0), (-1e308, 0)) == 0.0


# ─── A3: Event extraction ────────────────────────────────────────

class TestA3_ExtractEvent:

    def test_full_row(self):
        event = extract_event(make_row("Gun", "Alice", (0, 0), (3, 4)))
        assert event["weapon"] == "Gun"
        assert event["killer"] == "Alice"
        assert event["killer_position"] == (0.0, 0.0)
        assert event["victim_position"] == (3.0, 4.0)
        assert event["distance"] == 5.00

    def test_missing_coordinates_not_an_error(self):
        event = extract_event(make_row("Knife", "Alice"))
        assert event["killer_position"] is None
        assert event["victim_position"] is None
        assert event["distance"] == 0.0

    def test_one_coordinate_missing(self):
        row = make_row("Gun", "Alice", (0, 0), (3, 4))
        row[11] = ""
        event = extract_event(row)
        assert event["victim_position"] is None
        assert event["distance"] == 0.0

    def test_short_row_without_coordinates(self):
        event = extract_event(["Knife", "Alice"])
        assert event["weapon"] == "Knife"
        assert event["distance"] == 0.0

    def test_missing_killer_raises(self):
        with pytest.raises(ParseError):
            extract_event(["Knife"])

    def test_empty_row_raises(self):
        with pytest.raises(ParseError):
            extract_event([])

    def test_names_kept_exactly(self):
        event = extract_event(["  Punch ", "alice"])
        assert event["weapon"] == "  Punch "
        assert event["killer"] == "alice"
