"""Tests for ISO-8601 duration parsing."""

from datetime import timedelta

import pytest

from fieldcheck import Duration, parse_duration


class TestParseDuration:
    """Test parse_duration."""

    def test_full_duration(self):
        """Test a duration with every date and time component."""
        result = parse_duration("P3Y6M4DT12H30M5S")
        assert result.valid
        assert result.value == Duration(
            years=3, months=6, days=4, hours=12, minutes=30, seconds=5
        )

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("P1W", Duration(weeks=1)),
            ("PT36H", Duration(hours=36)),
            ("PT0.5S", Duration(seconds=0.5)),
            ("PT0,5S", Duration(seconds=0.5)),
            ("P1M", Duration(months=1)),
            ("PT1M", Duration(minutes=1)),
            ("+P1D", Duration(days=1)),
            ("-P1DT1H", Duration(negative=True, days=1, hours=1)),
        ],
    )
    def test_valid_durations(self, text, expected):
        """Test individual valid forms."""
        result = parse_duration(text)
        assert result.valid, result.errors
        assert result.value == expected

    @pytest.mark.parametrize(
        "text",
        [
            "", "P", "PT", "P1DT", "1D", "P1W1D", "P1H", "PT1D", "P-1D", "P1.D", "p1d",
            "P1D ", "P1D\n",
            # non-ASCII digits
            "P\u0661D", "PT\uff15S", "P1\u0660.5Y",
        ],
    )
    def test_invalid_durations(self, text):
        """Test that malformed strings fail without raising."""
        result = parse_duration(text)
        assert not result.valid
        assert result.errors
        assert result.value == text

    def test_non_string(self):
        """Test that non-strings fail."""
        result = parse_duration(5)
        assert not result.valid
        assert "string" in result.errors[0]

    def test_to_timedelta(self):
        """Test conversion of fixed-length durations."""
        assert Duration(days=2, hours=3).to_timedelta() == timedelta(days=2, hours=3)
        assert Duration(negative=True, weeks=1).to_timedelta() == timedelta(weeks=-1)

    def test_to_timedelta_calendar_parts(self):
        """Test that years and months cannot be converted."""
        with pytest.raises(ValueError):
            Duration(months=1).to_timedelta()
