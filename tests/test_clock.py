"""
Tests for HH:MM clock arithmetic
"""
import pytest

from error_handling import InvalidTimeFormat, ValidationError
from services.clock import add_minutes, format_clock, is_valid_clock, minutes_of_day, parse_clock


class TestAddMinutes:
    """Tests for add_minutes wraparound arithmetic"""

    def test_wraps_past_midnight(self):
        """Test crossing midnight wraps the hour back to 00"""
        assert add_minutes("23:50", 20) == "00:10"

    def test_zero_minutes(self):
        """Test adding nothing at midnight"""
        assert add_minutes("00:00", 0) == "00:00"

    def test_full_day_returns_same_time(self):
        """Test a full day wraps back to itself"""
        assert add_minutes("12:00", 1440) == "12:00"

    def test_multiple_days_discard_day_count(self):
        """Test several days collapse to the time of day"""
        assert add_minutes("06:15", 3 * 1440 + 45) == "07:00"

    def test_within_hour(self):
        """Test simple addition inside one hour"""
        assert add_minutes("07:30", 2) == "07:32"

    def test_carries_into_next_hour(self):
        """Test minutes carry into the hour"""
        assert add_minutes("08:45", 60) == "09:45"
        assert add_minutes("09:15", 45) == "10:00"

    def test_ends_exactly_at_midnight(self):
        """Test a program ending at 24:00 wraps to 00:00"""
        assert add_minutes("23:00", 60) == "00:00"

    def test_negative_minutes_move_backwards(self):
        """Test negative minutes wrap backwards over midnight"""
        assert add_minutes("00:10", -20) == "23:50"
        assert add_minutes("10:00", -30) == "09:30"

    def test_fractional_minutes_round_to_nearest(self):
        """Test fractional minutes are rounded before being applied"""
        assert add_minutes("10:00", 1.4) == "10:01"
        assert add_minutes("10:00", 1.6) == "10:02"
        assert add_minutes("10:00", 2.5) == "10:02"  # half to even

    def test_output_is_zero_padded(self):
        """Test hours and minutes are always two digits"""
        assert add_minutes("00:00", 65) == "01:05"

    @pytest.mark.parametrize("bad_time", ["24:00", "7:30", "07:60", "0730", "", "ab:cd", "07:30:00", "07:30\n", "0\u0663:00", None, 730])
    def test_malformed_time_rejected(self, bad_time):
        """Test malformed times raise InvalidTimeFormat"""
        with pytest.raises(InvalidTimeFormat):
            add_minutes(bad_time, 10)

    def test_invalid_time_is_a_validation_error(self):
        """Test InvalidTimeFormat can be handled as a validation error"""
        with pytest.raises(ValidationError) as exc:
            add_minutes("25:00", 0)
        assert "25:00" in str(exc.value)

    @pytest.mark.parametrize("bad_minutes", [float("nan"), float("inf"), "10", None, True])
    def test_non_finite_minutes_rejected(self, bad_minutes):
        """Test minutes must be a finite number"""
        with pytest.raises(ValidationError):
            add_minutes("10:00", bad_minutes)


class TestClockHelpers:
    """Tests for parsing and formatting helpers"""

    def test_parse_clock(self):
        """Test splitting HH:MM into integers"""
        assert parse_clock("07:05") == (7, 5)
        assert parse_clock("23:59") == (23, 59)

    def test_format_clock(self):
        """Test zero-padded formatting"""
        assert format_clock(7, 5) == "07:05"

    def test_minutes_of_day(self):
        """Test minutes since midnight"""
        assert minutes_of_day("00:00") == 0
        assert minutes_of_day("01:30") == 90
        assert minutes_of_day("23:59") == 1439

    def test_is_valid_clock(self):
        """Test the boolean validator used by the schemas"""
        assert is_valid_clock("00:00")
        assert is_valid_clock("19:45")
        assert not is_valid_clock("19:5")
        assert not is_valid_clock("24:00")
        assert not is_valid_clock(None)
