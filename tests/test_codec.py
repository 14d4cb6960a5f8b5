"""Tests for the PostgreSQL range literal codec and the verbose form."""

from datetime import datetime, timedelta, timezone

import pytest

from bookk import Bounds, InvalidOrderingError, RangeParseError, TimeRange
from bookk.codec import format_range, parse, verbose

T0 = datetime(2024, 10, 13, 10, 0, 0)
T1 = datetime(2024, 10, 13, 15, 0, 0)


class TestParse:
    @pytest.mark.parametrize(
        "text",
        [
            '["2024-10-13 10:00:00","2024-10-13 15:00:00")',
            '("2024-10-13 10:00:00","2025-10-13 15:00:00")',
            '["2024-10-13 10:00:00","2026-10-13 15:00:00"]',
            '("2024-10-13 10:00:00","2027-10-13 15:00:00"]',
        ],
    )
    def test_round_trip(self, text):
        """Canonical literals format back to the same text."""
        assert format_range(parse(text)) == text

    def test_lower_inclusive_literal(self):
        """A [..) literal parses to a half-open range."""
        r = parse('["2024-10-13 10:00:00","2024-10-13 15:00:00")')
        assert r == TimeRange(lower=T0, upper=T1, bounds=Bounds.LOWER_INCLUSIVE)

    @pytest.mark.parametrize(
        "opening, closing, bounds",
        [
            ("(", ")", Bounds.EXCLUSIVE),
            ("(", "]", Bounds.UPPER_INCLUSIVE),
            ("[", ")", Bounds.LOWER_INCLUSIVE),
            ("[", "]", Bounds.INCLUSIVE),
        ],
    )
    def test_brackets_set_bounds(self, opening, closing, bounds):
        """Each bracket pair maps to its bounds tag."""
        text = f"{opening}2024-10-13 10:00:00,2024-10-13 15:00:00{closing}"
        assert parse(text).bounds is bounds

    def test_unquoted_endpoints(self):
        """Quotes around endpoints are optional."""
        r = parse("[2024-10-13 10:00:00,2024-10-13 15:00:00)")
        assert r.lower == T0
        assert r.upper == T1

    def test_stray_quotes_are_stripped(self):
        """Every double quote is removed before splitting."""
        r = parse('["2024-10-13 10:00:00"",""2024-10-13 15:00:00")')
        assert r == TimeRange(lower=T0, upper=T1, bounds=Bounds.LOWER_INCLUSIVE)

    def test_unknown_delimiters_are_exclusive(self):
        """Delimiters other than [ and ] leave both ends exclusive."""
        r = parse("{2024-10-13 10:00:00,2024-10-13 15:00:00}")
        assert r.bounds is Bounds.EXCLUSIVE

    def test_extra_tokens_ignored(self):
        """Only the first two comma-separated values are read."""
        r = parse('["2024-10-13 10:00:00","2024-10-13 15:00:00","garbage")')
        assert r.upper == T1

    def test_equal_endpoints(self):
        """A single-point literal parses."""
        r = parse('["2024-10-13 10:00:00","2024-10-13 10:00:00"]')
        assert r.lower == r.upper

    @pytest.mark.parametrize(
        "text",
        [
            '["2024-10-13","2024-10-13 15:00:00")',
            '["2024-10-13 10:00:00","tomorrow")',
            '["2024-10-13T10:00:00","2024-10-13 15:00:00")',
            '["2024-10-13 10:00:00.5","2024-10-13 15:00:00")',
            '[" 2024-10-13 10:00:00","2024-10-13 15:00:00")',
            '["2024-1-3 1:2:3","2024-10-13 15:00:00")',
            '["2024-10-13   10:00:00","2024-10-13 15:00:00")',
        ],
    )
    def test_bad_endpoint(self, text):
        """Endpoints not exactly YYYY-MM-DD HH:MM:SS are rejected."""
        with pytest.raises(RangeParseError):
            parse(text)

    def test_impossible_date_rejected(self):
        """A well-shaped endpoint that is not a real date is rejected."""
        with pytest.raises(RangeParseError):
            parse('["2024-02-30 10:00:00","2024-10-13 15:00:00")')

    @pytest.mark.parametrize("text", ["", "[", '["2024-10-13 10:00:00")'])
    def test_malformed_literal(self, text):
        """Too-short literals and a missing endpoint are rejected."""
        with pytest.raises(RangeParseError):
            parse(text)

    def test_inverted_endpoints_propagate(self):
        """Ordering errors from construction pass through unchanged."""
        with pytest.raises(InvalidOrderingError):
            parse('["2024-10-13 15:00:00","2024-10-13 10:00:00")')

    def test_classmethod_delegates(self):
        """TimeRange.from_postgres gives the same result as parse."""
        text = '("2024-10-13 10:00:00","2024-10-13 15:00:00"]'
        assert TimeRange.from_postgres(text) == parse(text)


class TestFormat:
    @pytest.mark.parametrize(
        "bounds, expected",
        [
            (Bounds.EXCLUSIVE, '("2024-10-13 10:00:00","2024-10-13 15:00:00")'),
            (Bounds.INCLUSIVE, '["2024-10-13 10:00:00","2024-10-13 15:00:00"]'),
            (Bounds.UPPER_INCLUSIVE, '("2024-10-13 10:00:00","2024-10-13 15:00:00"]'),
            (Bounds.LOWER_INCLUSIVE, '["2024-10-13 10:00:00","2024-10-13 15:00:00")'),
        ],
    )
    def test_templates(self, bounds, expected):
        """Each bounds tag renders with its bracket pair."""
        assert format_range(TimeRange(lower=T0, upper=T1, bounds=bounds)) == expected

    def test_shape(self):
        """Output is bracketed with both endpoints quoted."""
        text = format_range(TimeRange(lower=T0, upper=T1))
        assert text[0] in "[("
        assert text[-1] in "])"
        assert text.count('"') == 4

    def test_drops_fractional_seconds(self):
        """Sub-second precision is truncated on output."""
        r = TimeRange(lower=T0.replace(microsecond=250), upper=T1)
        assert format_range(r) == '["2024-10-13 10:00:00","2024-10-13 15:00:00")'

    def test_aware_endpoints_lose_their_zone(self):
        """Aware endpoints render wall-clock time and parse back naive."""
        plus_two = timezone(timedelta(hours=2))
        r = TimeRange(lower=T0.replace(tzinfo=plus_two), upper=T1.replace(tzinfo=plus_two))

        text = format_range(r)
        assert text == '["2024-10-13 10:00:00","2024-10-13 15:00:00")'

        parsed = parse(text)
        assert parsed.lower.tzinfo is None
        assert parsed.upper.tzinfo is None
        assert parsed == TimeRange(lower=T0, upper=T1)
        assert parsed != r


class TestVerbose:
    @pytest.mark.parametrize(
        "bounds, expected",
        [
            (Bounds.EXCLUSIVE, "Past 2024-10-13 10:00:00 and before 2024-10-13 15:00:00"),
            (Bounds.INCLUSIVE, "From 2024-10-13 10:00:00 to 2024-10-13 15:00:00"),
            (Bounds.UPPER_INCLUSIVE, "Past 2024-10-13 10:00:00 to 2024-10-13 15:00:00"),
            (
                Bounds.LOWER_INCLUSIVE,
                "From 2024-10-13 10:00:00 and before 2024-10-13 15:00:00",
            ),
        ],
    )
    def test_templates(self, bounds, expected):
        """Each bounds tag has its own wording."""
        assert verbose(TimeRange(lower=T0, upper=T1, bounds=bounds)) == expected
