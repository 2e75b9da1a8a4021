from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from nautical_helper.core.results import ErrorKind, Invalid
from nautical_helper.watch import (
    CustomMaxWatch,
    Halfway,
    Operator,
    WatchPeriod,
    duration_text,
    format_period,
    generate_schedule,
    time_underway,
)

START = datetime(2024, 1, 1, 0, 0)

OP1 = Operator.OPERATOR_1
OP2 = Operator.OPERATOR_2


def _hours(periods) -> list[float]:
    return [p.duration / timedelta(hours=1) for p in periods]


def _assert_covers(schedule, start: datetime, end: datetime) -> None:
    periods = schedule.periods
    assert periods[0].start_time == start
    assert periods[-1].end_time == end
    for prev, nxt in zip(periods, periods[1:]):
        assert prev.end_time == nxt.start_time
    assert sum((p.duration for p in periods), timedelta(0)) == end - start


def test_halfway_split() -> None:
    end = START + timedelta(hours=10)
    schedule = generate_schedule(START, end, Halfway())
    assert _hours(schedule) == [5.0, 5.0]
    assert [p.operator for p in schedule] == [OP1, OP2]
    assert [p.duration_text for p in schedule] == ["5h", "5h"]
    _assert_covers(schedule, START, end)


def test_custom_three_six_six_three() -> None:
    end = START + timedelta(hours=18)
    schedule = generate_schedule(START, end, CustomMaxWatch(6))
    assert _hours(schedule) == [3.0, 6.0, 6.0, 3.0]
    assert [p.operator for p in schedule] == [OP1, OP2, OP1, OP2]
    assert len(schedule) % 2 == 0
    assert schedule.total_time_text == "18h"
    _assert_covers(schedule, START, end)


def test_custom_exact_even_multiple_has_no_edges() -> None:
    end = START + timedelta(hours=12)
    schedule = generate_schedule(START, end, CustomMaxWatch("6"))
    assert _hours(schedule) == [6.0, 6.0]
    assert [p.operator for p in schedule] == [OP1, OP2]


def test_custom_shorter_than_one_watch_splits_in_two() -> None:
    end = START + timedelta(hours=4)
    schedule = generate_schedule(START, end, CustomMaxWatch(6))
    assert _hours(schedule) == [2.0, 2.0]
    assert [p.operator for p in schedule] == [OP1, OP2]
    _assert_covers(schedule, START, end)


def test_custom_odd_count_is_reduced() -> None:
    end = START + timedelta(hours=20)
    schedule = generate_schedule(START, end, CustomMaxWatch(6))
    assert _hours(schedule) == [4.0, 6.0, 6.0, 4.0]


def test_custom_half_hour_edges() -> None:
    end = START + timedelta(hours=25)
    schedule = generate_schedule(START, end, CustomMaxWatch(4))
    assert _hours(schedule) == [0.5, 4, 4, 4, 4, 4, 4, 0.5]
    assert [p.operator for p in schedule] == [OP1, OP2] * 4
    assert schedule.periods[0].duration_text == "30m"
    assert schedule.total_time_text == "25h"


@pytest.mark.parametrize(
    "total, policy",
    [
        (timedelta(hours=18, minutes=17), CustomMaxWatch(6)),
        (timedelta(hours=7, seconds=13), CustomMaxWatch(2.5)),
        (timedelta(hours=12, microseconds=1), CustomMaxWatch(6)),
        (timedelta(minutes=1), CustomMaxWatch(6)),
        (timedelta(hours=9, microseconds=3), Halfway()),
    ],
)
def test_schedules_cover_interval(total: timedelta, policy) -> None:
    end = START + total
    _assert_covers(generate_schedule(START, end, policy), START, end)


@pytest.mark.parametrize("end", [START, START - timedelta(hours=1)])
def test_end_not_after_start_is_invalid(end: datetime) -> None:
    result = generate_schedule(START, end, Halfway())
    assert isinstance(result, Invalid)
    assert result.kind is ErrorKind.INVALID_INTERVAL


@pytest.mark.parametrize("max_hours", [0, -1, "0", "abc", ""])
def test_bad_max_watch_is_invalid_config(max_hours) -> None:
    result = generate_schedule(START, START + timedelta(hours=10), CustomMaxWatch(max_hours))
    assert isinstance(result, Invalid)
    assert result.kind is ErrorKind.INVALID_CONFIG


def test_mixed_timezones_are_invalid() -> None:
    aware_end = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    assert generate_schedule(START, aware_end, Halfway()).kind is ErrorKind.INVALID_INTERVAL


def test_total_time_text() -> None:
    assert generate_schedule(START, START + timedelta(hours=18, minutes=30), Halfway()).total_time_text == "18h 30m"
    assert generate_schedule(START, START + timedelta(minutes=45), Halfway()).total_time_text == "45m"


def test_duration_text() -> None:
    assert duration_text(timedelta(hours=2, minutes=30)) == "2h 30m"
    assert duration_text(timedelta(minutes=45, seconds=59)) == "45m"
    assert duration_text(timedelta(hours=3)) == "3h"
    assert duration_text(timedelta(0)) == "0m"


def test_format_period() -> None:
    period = WatchPeriod(START, START + timedelta(hours=3), OP1)
    assert format_period(period) == "1/1 0000 - 0300 Pilot 1 (3h)"
    assert format_period(period, ["Alice", "Bob"]) == "1/1 0000 - 0300 Alice (3h)"


def test_time_underway() -> None:
    assert time_underway(START, START + timedelta(hours=10)) == "10h"
    assert time_underway(datetime(2024, 1, 1, 0, 15), datetime(2024, 1, 1, 10, 45)) == "10h 30m"
    assert time_underway(datetime(2024, 1, 1, 0, 10), datetime(2024, 1, 1, 0, 50)) == "40m"


def test_time_underway_rounds_up_on_matching_minutes() -> None:
    start = datetime(2024, 1, 1, 0, 15, 30)
    end = datetime(2024, 1, 1, 10, 15, 0)
    assert time_underway(start, end) == "10h"


def test_time_underway_rejects_reversed_interval() -> None:
    result = time_underway(START, START)
    assert isinstance(result, Invalid)
    assert result.kind is ErrorKind.INVALID_INTERVAL


def test_max_watch_below_microsecond_is_invalid_config() -> None:
    result = generate_schedule(START, START + timedelta(hours=10), CustomMaxWatch(1e-12))
    assert result.kind is ErrorKind.INVALID_CONFIG
    assert "microsecond" in result.message


LONDON = ZoneInfo("Europe/London")


def test_halfway_across_spring_forward_uses_real_time() -> None:
    # Clocks go from 01:00 GMT to 02:00 BST on 2024-03-31.
    start = datetime(2024, 3, 31, 0, 0, tzinfo=LONDON)
    end = datetime(2024, 3, 31, 4, 0, tzinfo=LONDON)
    schedule = generate_schedule(start, end, Halfway())
    assert _hours(schedule) == [1.5, 1.5]
    assert [p.duration_text for p in schedule] == ["1h 30m", "1h 30m"]
    assert schedule.total_time_text == "3h"
    mid = schedule.periods[0].end_time
    assert (mid.hour, mid.minute) == (2, 30)
    assert mid.tzinfo is LONDON
    assert schedule.periods[1].start_time == mid
    assert schedule.periods[-1].end_time == end


def test_custom_across_spring_forward_uses_real_time() -> None:
    start = datetime(2024, 3, 30, 20, 0, tzinfo=LONDON)
    end = datetime(2024, 3, 31, 14, 0, tzinfo=LONDON)
    schedule = generate_schedule(start, end, CustomMaxWatch(6))
    assert _hours(schedule) == [2.5, 6.0, 6.0, 2.5]
    assert schedule.total_time_text == "17h"
    assert [f"{p.start_time:%H%M}" for p in schedule] == ["2000", "2230", "0530", "1130"]
    assert schedule.periods[-1].end_time == end


def test_time_underway_across_spring_forward() -> None:
    start = datetime(2024, 3, 31, 0, 0, tzinfo=LONDON)
    end = datetime(2024, 3, 31, 4, 0, tzinfo=LONDON)
    assert time_underway(start, end) == "3h"
