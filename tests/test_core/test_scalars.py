"""Tests for scalar, date and regex equality rules."""

import re
from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

from destructure.core.scalars import match_date, match_regex, strict_equal


class TestStrictEqual:
    """Tests for strict equality."""

    def test_same_scalars(self):
        """Test equal scalars of the same type."""
        assert strict_equal(1, 1)
        assert strict_equal("a", "a")
        assert strict_equal(None, None)
        assert strict_equal(b"x", b"x")
        assert strict_equal(Decimal("1.5"), Decimal("1.5"))

    def test_no_type_coercion(self):
        """Test values of different types never compare equal."""
        assert not strict_equal(1, 1.0)
        assert not strict_equal(0, False)
        assert not strict_equal("1", 1)
        assert not strict_equal(None, 0)

    def test_nan(self):
        """Test NaN is not equal to itself."""
        nan = float("nan")
        assert not strict_equal(nan, nan)

    def test_compound_identity(self):
        """Test compound values compare by identity."""
        value = {"a": 1}
        assert strict_equal(value, value)
        assert not strict_equal({"a": 1}, {"a": 1})
        assert not strict_equal((1, 2), (1, 2))


class TestMatchDate:
    """Tests for date patterns."""

    def test_equal_instants(self):
        """Test distinct objects at the same instant match."""
        assert match_date(datetime(2020, 5, 1, 12, tzinfo=UTC), datetime(2020, 5, 1, 12, tzinfo=UTC))

    def test_equal_instants_across_zones(self):
        """Test the same instant in different zones matches."""
        plus_two = timezone(timedelta(hours=2))
        assert match_date(datetime(2020, 5, 1, 12, tzinfo=UTC), datetime(2020, 5, 1, 14, tzinfo=plus_two))

    def test_different_instants(self):
        """Test different instants fail."""
        assert not match_date(date(2020, 5, 1), date(2020, 5, 2))

    def test_date_and_datetime(self):
        """Test a date never matches a datetime."""
        assert not match_date(date(2020, 5, 1), datetime(2020, 5, 1))
        assert not match_date(datetime(2020, 5, 1), date(2020, 5, 1))

    def test_naive_and_aware(self):
        """Test naive and aware datetimes never match."""
        assert not match_date(datetime(2020, 5, 1), datetime(2020, 5, 1, tzinfo=UTC))

    def test_non_date_subject(self):
        """Test a non-date subject fails."""
        assert not match_date(date(2020, 5, 1), "2020-05-01")


class TestMatchRegex:
    """Tests for regex patterns."""

    def test_same_source(self):
        """Test a regex with the same source matches."""
        assert match_regex(re.compile("a+b"), re.compile("a+b"))

    def test_text_search(self):
        """Test the regex is searched within text."""
        assert match_regex(re.compile("a+b"), "xxaab")
        assert not match_regex(re.compile("^a+b$"), "xxaab")

    def test_coerces_to_text(self):
        """Test non-string subjects are converted to text."""
        assert match_regex(re.compile(r"^\d+$"), 123)
        assert match_regex(re.compile("None"), None)

    def test_bytes_pattern(self):
        """Test bytes regexes search bytes subjects."""
        assert match_regex(re.compile(rb"\x00\x01"), b"\xff\x00\x01")
        assert match_regex(re.compile(rb"^12$"), 12)
