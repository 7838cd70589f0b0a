import pytest
from datetime import date, time

from shiftbuilder.services.scheduling.errors import InvalidTimeRange, ScheduleInputError
from shiftbuilder.services.scheduling.hours import (
    duration_hours,
    format_slot,
    parse_time,
    sunday_based_weekday,
    times_overlap,
)


class TestParseTime:
    def test_hh_mm(self):
        assert parse_time("09:30") == time(9, 30)

    def test_drops_seconds(self):
        assert parse_time("17:00:00") == time(17, 0)

    def test_passes_time_through(self):
        assert parse_time(time(8, 15)) == time(8, 15)

    @pytest.mark.parametrize("value", ["9:00", "25:00", "12:60", "noon", "", None])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidTimeRange):
            parse_time(value)

    def test_is_an_input_error(self):
        with pytest.raises(ScheduleInputError):
            parse_time("ab:cd")


class TestDurationHours:
    def test_whole_hours(self):
        assert duration_hours(time(9, 0), time(17, 0)) == 8.0

    def test_fractional(self):
        assert duration_hours(time(9, 0), time(16, 30)) == 7.5

    def test_rejects_equal_times(self):
        with pytest.raises(InvalidTimeRange):
            duration_hours(time(9, 0), time(9, 0))

    def test_rejects_overnight(self):
        # no wrapping past midnight
        with pytest.raises(InvalidTimeRange):
            duration_hours(time(22, 0), time(2, 0))


class TestTimesOverlap:
    def test_no_overlap(self):
        assert times_overlap(time(8, 0), time(10, 0), time(12, 0), time(14, 0)) is False

    def test_adjacent_no_overlap(self):
        assert times_overlap(time(8, 0), time(12, 0), time(12, 0), time(16, 0)) is False

    def test_overlap(self):
        assert times_overlap(time(9, 0), time(13, 0), time(12, 0), time(16, 0)) is True

    def test_contained(self):
        assert times_overlap(time(9, 0), time(17, 0), time(10, 0), time(11, 0)) is True


def test_format_slot():
    assert format_slot(time(9, 0), time(17, 30)) == "09:00 - 17:30"


@pytest.mark.parametrize("d,expected", [
    (date(2025, 1, 19), 0),  # Sunday
    (date(2025, 1, 20), 1),  # Monday
    (date(2025, 1, 25), 6),  # Saturday
])
def test_sunday_based_weekday(d, expected):
    assert sunday_based_weekday(d) == expected
