"""
Test suite for the logbook parser.

Tests cover:
- Line splitting (CRLF, blank lines, padding)
- Primary name/distance pattern
- Token pairing fallback
- Mutual exclusion of the two strategies
- Totality on junk input
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from autosplit.services.parser import (
    Record,
    RecordParser,
    split_lines,
    match_primary,
    pair_tokens,
    extract_pairs,
    parse_lines_to_pairs,
)
import pytest


HANDWRITTEN_LOGBOOK = """\
Jan 150
Pieter: 100 km

  Anna - 75
"""


class TestSplitLines:
    """Test line tokenization."""

    def test_handles_crlf_and_blank_lines(self):
        assert split_lines("Jan 150\r\n\r\n  Pieter 100  \n") == ["Jan 150", "Pieter 100"]

    def test_empty_text(self):
        assert split_lines("") == []
        assert split_lines("  \n \r\n") == []


class TestPrimaryPattern:
    """Test the structured name/separator/digits/unit match."""

    @pytest.mark.parametrize("line,expected", [
        ("Jan 150", Record("Jan", 150)),
        ("Pieter: 100 km", Record("Pieter", 100)),
        ("Anna - 75", Record("Anna", 75)),
        ("Anna-75", Record("Anna", 75)),
        ("Jan150", Record("Jan", 150)),
        ("MARIEKE 42 KM", Record("MARIEKE", 42)),
        ("José 12km", Record("José", 12)),
        ("Jan-Willem 80", Record("Jan-Willem", 80)),
        ("Oma de Vries: 999999", Record("Oma de Vries", 999999)),
    ])
    def test_matches(self, line, expected):
        assert match_primary(line) == expected

    def test_rejects_two_entries_on_one_line(self):
        """A number inside the name means the line holds several pairs."""
        assert match_primary("Jan 150 Pieter 100") is None

    def test_rejects_more_than_six_digits(self):
        assert match_primary("Jan 1234567") is None

    def test_rejects_trailing_text(self):
        assert match_primary("Jan 150 km gereden") is None

    def test_rejects_name_without_distance(self):
        assert match_primary("Totaal") is None


class TestTokenPairing:
    """Test the whitespace fallback."""

    def test_pairs_in_order(self):
        assert pair_tokens("Jan 150 Pieter 100") == [Record("Jan", 150), Record("Pieter", 100)]

    def test_strips_non_digits_from_distance(self):
        assert pair_tokens("Jan 150km, Pieter ~100") == [Record("Jan", 150), Record("Pieter", 100)]

    def test_skips_pairs_without_digits(self):
        assert pair_tokens("km boekje Anna 75") == [Record("Anna", 75)]

    def test_drops_trailing_token(self):
        assert pair_tokens("Jan 150 Pieter") == [Record("Jan", 150)]

    def test_no_digit_ceiling(self):
        assert pair_tokens("Jan 1234567") == [Record("Jan", 1234567)]

    @pytest.mark.skipif(
        getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
        reason="interpreter has no int-from-string digit limit"
    )
    def test_oversized_distance_is_skipped_not_raised(self):
        """Thousands of digits exceed int() limits; the pair is dropped."""
        line = "Jan " + "9" * 5000 + " Pieter 100"
        assert pair_tokens(line) == [Record("Pieter", 100)]
        assert parse_lines_to_pairs("Jan " + "9" * 5000) == []


class TestExtractPairs:
    """Test that exactly one strategy handles each line."""

    def test_primary_line_does_not_fall_through(self):
        assert extract_pairs("Pieter: 100 km") == [Record("Pieter", 100)]

    def test_fallback_used_when_primary_fails(self):
        assert extract_pairs("Jan 150 Pieter 100") == [Record("Jan", 150), Record("Pieter", 100)]

    def test_long_distance_goes_to_fallback(self):
        assert extract_pairs("Jan 1234567") == [Record("Jan", 1234567)]

    def test_one_letter_name_with_colon_falls_back(self):
        """Names need two characters, so "A:" is read as a token pair."""
        assert extract_pairs("A: 150 km") == [Record("A:", 150)]

    def test_unparsable_line_contributes_nothing(self):
        assert extract_pairs("Totaal") == []
        assert extract_pairs("km boekje") == []


class TestRecordParser:
    """Test parsing whole text blobs."""

    def test_parses_logbook(self):
        records = RecordParser().parse(HANDWRITTEN_LOGBOOK)
        assert records == [Record("Jan", 150), Record("Pieter", 100), Record("Anna", 75)]

    def test_preserves_line_then_pair_order(self):
        text = "Kees 10\nJan 150 Pieter 100\nAnna: 5"
        assert [r.name for r in parse_lines_to_pairs(text)] == ["Kees", "Jan", "Pieter", "Anna"]

    def test_is_idempotent(self):
        parser = RecordParser()
        assert parser.parse(HANDWRITTEN_LOGBOOK) == parser.parse(HANDWRITTEN_LOGBOOK)

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", "Totaal\nkm boekje", "???"])
    def test_junk_gives_empty_list(self, text):
        assert parse_lines_to_pairs(text) == []
