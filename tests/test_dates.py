"""Tests for date token decomposition."""

from datetime import UTC, datetime

from cms_formatter.templates import DATE_TOKENS, decompose_date


class TestDecomposeDate:
    """Tests for decompose_date."""

    def test_zero_padded_fields(self):
        """Test all tokens are zero padded."""
        tokens = decompose_date(datetime(2020, 1, 2, 3, 4, 5))
        assert tokens == {
            "year": "2020",
            "month": "01",
            "day": "02",
            "hour": "03",
            "minute": "04",
            "second": "05",
        }

    def test_two_digit_values_unchanged(self):
        """Test values that already have two digits."""
        tokens = decompose_date(datetime(1999, 12, 31, 23, 59, 58))
        assert tokens["month"] == "12"
        assert tokens["day"] == "31"
        assert tokens["second"] == "58"

    def test_four_digit_year(self):
        """Test years below 1000 are padded to four digits."""
        assert decompose_date(datetime(987, 6, 5))["year"] == "0987"

    def test_aware_datetime_uses_local_time(self):
        """Test aware datetimes are converted to local calendar fields."""
        instant = datetime(2020, 1, 1, 12, 0, tzinfo=UTC)
        local = instant.astimezone()
        tokens = decompose_date(instant)
        assert tokens["hour"] == f"{local.hour:02d}"
        assert tokens["day"] == f"{local.day:02d}"

    def test_token_names(self):
        """Test the mapping exposes exactly the date tokens."""
        assert tuple(decompose_date(datetime(2020, 1, 1))) == DATE_TOKENS
