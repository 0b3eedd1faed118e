"""Tests for range strings, durations and relative times."""

from datetime import date, datetime

import pytest

from teamplanner.engine.ranges import (
    duration,
    format_event_range,
    format_range,
    format_range_compact,
    relative_time,
    round_half_up,
)

JAN_1 = date(2024, 1, 1)
JAN_3 = date(2024, 1, 3)


class TestFormatRange:
    """Test format_range() precedence."""

    def test_same_day_with_time_range(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_1, start_time="09:00", end_time="17:00")
        assert format_range(item) == "Jan 1, 2024, 9:00 AM - 5:00 PM"

    def test_multi_day_without_times(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_3)
        assert format_range(item) == "Jan 1, 2024 - Jan 3, 2024"

    def test_multi_day_with_times(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_3, start_time="09:00", end_time="17:00")
        assert format_range(item) == "Jan 1, 2024 - Jan 3, 2024 (9:00 AM - 5:00 PM)"

    def test_multi_day_with_only_start_time_skips_times(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_3, start_time="09:00")
        assert format_range(item) == "Jan 1, 2024 - Jan 3, 2024"

    def test_same_day_with_start_time_only(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_1, start_time="09:00")
        assert format_range(item) == "Jan 1, 2024 at 9:00 AM"

    def test_same_day_without_times(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_1)
        assert format_range(item) == "Jan 1, 2024"

    def test_start_only_with_time(self, make_item):
        item = make_item(start_date=JAN_1, start_time="09:00")
        assert format_range(item) == "Jan 1, 2024 at 9:00 AM"

    def test_start_only_without_time(self, make_item):
        assert format_range(make_item(start_date=JAN_1)) == "From Jan 1, 2024"

    def test_due_date_fallback(self, make_item):
        assert format_range(make_item(due_date=date(2024, 1, 5))) == "Due Jan 5, 2024"

    def test_no_dates(self, sample_task):
        assert format_range(sample_task) == ""


class TestFormatRangeCompact:
    """Test format_range_compact() precedence and separators."""

    TODAY = date(2024, 6, 1)

    def test_same_day_with_time_range(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_1, start_time="09:00", end_time="17:00")
        assert format_range_compact(item, self.TODAY) == "Jan 1 • 9:00am-5:00pm"

    def test_multi_day_with_times(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_3, start_time="09:00", end_time="17:30")
        assert format_range_compact(item, self.TODAY) == "Jan 1 9:00am - Jan 3 5:30pm"

    def test_multi_day_without_times(self, make_item):
        item = make_item(start_date=JAN_1, end_date=JAN_3)
        assert format_range_compact(item, self.TODAY) == "Jan 1 - Jan 3"

    def test_start_with_time(self, make_item):
        item = make_item(start_date=JAN_1, start_time="14:30")
        assert format_range_compact(item, self.TODAY) == "Jan 1 • 2:30pm"

    def test_start_without_time(self, make_item):
        assert format_range_compact(make_item(start_date=JAN_1), self.TODAY) == "Jan 1"

    def test_due_date_has_no_prefix(self, make_item):
        assert format_range_compact(make_item(due_date=date(2024, 1, 5)), self.TODAY) == "Jan 5"

    def test_other_year_keeps_year(self, make_item):
        item = make_item(start_date=date(2023, 12, 30), end_date=JAN_1)
        assert format_range_compact(item, self.TODAY) == "Dec 30, 2023 - Jan 1"

    def test_no_dates(self, sample_task):
        assert format_range_compact(sample_task, self.TODAY) == ""


class TestFormatEventRange:
    """Test format_event_range()."""

    def test_single_day_with_end_time(self, make_event):
        event = make_event(start_date=JAN_1, start_time="18:00", end_time="21:00")
        assert format_event_range(event) == "Jan 1, 2024, 6:00 PM - 9:00 PM"

    def test_single_day_start_time_only(self, make_event):
        event = make_event(start_date=JAN_1, start_time="18:00")
        assert format_event_range(event) == "Jan 1, 2024 at 6:00 PM"

    def test_multi_day_with_times(self, make_event):
        event = make_event(start_date=JAN_1, end_date=JAN_3, start_time="09:00", end_time="17:00")
        assert format_event_range(event) == "Jan 1, 2024 9:00 AM - Jan 3, 2024 5:00 PM"

    def test_multi_day_without_times(self, make_event):
        event = make_event(start_date=JAN_1, end_date=JAN_3)
        assert format_event_range(event) == "Jan 1, 2024 - Jan 3, 2024"

    def test_undated_event(self, make_event):
        assert format_event_range(make_event()) == ""


class TestDuration:
    """Test duration() unit selection and rounding."""

    def test_whole_days(self):
        assert duration("2025-01-01", "2025-01-03") == "2 days"

    def test_minutes_under_two_hours(self):
        assert duration("2025-01-01", "2025-01-01", "09:00", "10:30") == "90 minutes"

    def test_hours(self):
        assert duration("2025-01-01", "2025-01-01", "09:00", "12:00") == "3 hours"

    def test_partial_hours_round_up(self):
        assert duration("2025-01-01", "2025-01-01", "09:00", "11:15") == "3 hours"

    def test_exactly_one_day_falls_through_to_hours(self):
        assert duration("2025-01-01", "2025-01-02") == "24 hours"

    def test_exactly_one_hour_falls_through_to_minutes(self):
        assert duration("2025-01-01", "2025-01-01", "09:00", "10:00") == "60 minutes"

    def test_day_and_a_half_renders_hours(self):
        assert duration("2025-01-01", "2025-01-02", "00:00", "12:00") == "36 hours"

    def test_partial_days_round_up(self):
        assert duration("2025-01-01", "2025-01-03", "00:00", "12:00") == "3 days"

    def test_accepts_date_objects(self):
        assert duration(date(2025, 1, 1), date(2025, 1, 8)) == "7 days"

    def test_missing_end_date(self):
        assert duration("2025-01-01") == ""
        assert duration("2025-01-01", None, "09:00", "10:00") == ""

    def test_end_before_start_is_negative(self):
        """Inverted periods are not rejected."""
        assert duration("2025-01-03", "2025-01-01") == "-2880 minutes"


class TestRelativeTime:
    """Test relative_time() wording."""

    NOW = datetime(2025, 6, 15, 10, 0)

    @pytest.mark.parametrize(
        "target_date,target_time,expected",
        [
            ("2025-06-15", "10:05", "in 5 min"),
            ("2025-06-15", "09:30", "30 min ago"),
            ("2025-06-15", "13:00", "in 3h"),
            ("2025-06-15", "04:00", "6h ago"),
            ("2025-06-17", None, "in 2 days"),
            ("2025-06-12", None, "3 days ago"),
        ],
    )
    def test_relative_wording(self, target_date, target_time, expected):
        assert relative_time(target_date, target_time, now=self.NOW) == expected

    def test_missing_date(self):
        assert relative_time("", now=self.NOW) == ""


class TestRoundHalfUp:
    """Test round_half_up(), shared by percentages and relative times."""

    def test_halves_go_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2

    def test_other_values(self):
        assert round_half_up(66.6666) == 67
        assert round_half_up(-1.6) == -2
