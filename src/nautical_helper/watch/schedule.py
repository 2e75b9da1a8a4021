"""Split a passage into alternating watch periods for two operators.

Two policies are supported:

* :class:`Halfway` splits the interval at its midpoint.
* :class:`CustomMaxWatch` lays down an even number of full-length watches in
  the middle of the passage and shares the remainder equally between a
  leading and a trailing edge watch. 18 h with a 6 h maximum becomes
  3/6/6/3.

All arithmetic is done on :class:`datetime.timedelta` so the periods are
contiguous and the final period ends exactly at the end instant. Aware
instants are split in UTC, so a clock change inside the passage does not
alter the watch lengths.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Sequence, Union

from nautical_helper.core.parsing import require_number
from nautical_helper.core.results import (
    Invalid,
    InvalidConfigError,
    InvalidInputError,
    InvalidIntervalError,
    calculation,
)

logger = logging.getLogger(__name__)

DEFAULT_OPERATOR_NAMES = ("Pilot 1", "Pilot 2")


class Operator(Enum):
    OPERATOR_1 = 1
    OPERATOR_2 = 2

    @classmethod
    def for_period(cls, number: int) -> "Operator":
        """Odd period numbers (counting from 1) go to operator 1."""
        return cls.OPERATOR_1 if number % 2 == 1 else cls.OPERATOR_2

    def display_name(self, names: Sequence[str] = DEFAULT_OPERATOR_NAMES) -> str:
        return names[self.value - 1]


@dataclass(frozen=True, slots=True)
class Halfway:
    pass


@dataclass(frozen=True, slots=True)
class CustomMaxWatch:
    max_hours: float


SchedulePolicy = Union[Halfway, CustomMaxWatch]


@dataclass(frozen=True, slots=True)
class WatchPeriod:
    start_time: datetime
    end_time: datetime
    operator: Operator

    @property
    def duration(self) -> timedelta:
        return elapsed(self.start_time, self.end_time)

    @property
    def duration_text(self) -> str:
        return duration_text(self.duration)


@dataclass(frozen=True, slots=True)
class Schedule:
    start_time: datetime
    end_time: datetime
    policy: SchedulePolicy
    periods: List[WatchPeriod] = field(default_factory=list)

    @property
    def total(self) -> timedelta:
        return elapsed(self.start_time, self.end_time)

    @property
    def total_time_text(self) -> str:
        """Whole hours and leftover minutes of the passage, e.g. ``18h 30m``."""
        seconds = int(self.total.total_seconds())
        hours, minutes = seconds // 3600, seconds % 3600 // 60
        if hours >= 1 and minutes > 0:
            return f"{hours}h {minutes}m"
        if hours >= 1:
            return f"{hours}h"
        return f"{minutes}m"

    def __iter__(self):
        return iter(self.periods)

    def __len__(self) -> int:
        return len(self.periods)


def elapsed(start: datetime, end: datetime) -> timedelta:
    """Real time between two instants, measured in UTC when they carry a timezone."""
    if start.tzinfo is not None and end.tzinfo is not None:
        return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return end - start


def duration_text(delta: timedelta) -> str:
    """Render a duration truncated to whole minutes: ``3h``, ``2h 30m`` or ``45m``."""
    total_minutes = int(delta.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"


def format_period(period: WatchPeriod, names: Sequence[str] = DEFAULT_OPERATOR_NAMES) -> str:
    """One display line, e.g. ``1/1 0000 - 0300 Pilot 1 (3h)``."""
    start = f"{period.start_time.month}/{period.start_time.day} {period.start_time:%H%M}"
    return f"{start} - {period.end_time:%H%M} {period.operator.display_name(names)} ({period.duration_text})"


def _check_interval(start: datetime, end: datetime) -> timedelta:
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise InvalidIntervalError("start and end must both carry a timezone or neither")
    total = elapsed(start, end)
    if total <= timedelta(0):
        raise InvalidIntervalError("End time must be after start time")
    return total


def _halfway(start: datetime, end: datetime) -> List[WatchPeriod]:
    mid = start + (end - start) / 2
    return [
        WatchPeriod(start, mid, Operator.OPERATOR_1),
        WatchPeriod(mid, end, Operator.OPERATOR_2),
    ]


def _full_watch_count(total: timedelta, max_watch: timedelta) -> int:
    """Number of full-length watches, forced even so the edge watches pair up."""
    count = total // max_watch
    if count % 2 == 1:
        count -= 1
    return count


def _custom(start: datetime, end: datetime, max_hours: float) -> List[WatchPeriod]:
    try:
        max_watch = timedelta(hours=max_hours)
    except OverflowError:
        max_watch = timedelta.max
    if max_watch <= timedelta(0):
        # Periods are built on whole microseconds.
        raise InvalidConfigError(
            f"max watch of {max_hours:g} h is shorter than the one microsecond resolution"
        )

    total = end - start
    full_periods = _full_watch_count(total, max_watch)
    remainder = total - max_watch * full_periods
    edge = remainder / 2
    logger.debug(
        "custom schedule: total=%s full=%d x %s edge=%s", total, full_periods, max_watch, edge
    )

    periods: List[WatchPeriod] = []
    current = start
    number = 1

    if edge > timedelta(0):
        periods.append(WatchPeriod(current, current + edge, Operator.OPERATOR_1))
        current += edge
        number += 1

    for _ in range(full_periods):
        periods.append(WatchPeriod(current, current + max_watch, Operator.for_period(number)))
        current += max_watch
        number += 1

    if edge > timedelta(0) and current < end:
        periods.append(WatchPeriod(current, end, Operator.for_period(number)))
    elif periods and periods[-1].end_time != end:
        # Rounding to whole microseconds can leave the last full watch short of the end.
        last = periods.pop()
        periods.append(WatchPeriod(last.start_time, end, last.operator))
    elif not periods:
        # A passage of a single microsecond has no room for two edges.
        periods.append(WatchPeriod(start, end, Operator.OPERATOR_1))

    return periods


def _coerce_policy(policy: SchedulePolicy) -> SchedulePolicy:
    if isinstance(policy, CustomMaxWatch):
        try:
            hours = require_number(policy.max_hours, "max_hours")
        except InvalidInputError as exc:
            raise InvalidConfigError(str(exc)) from None
        if hours <= 0 or not math.isfinite(hours):
            raise InvalidConfigError("Please enter a valid number for max watch hours")
        return CustomMaxWatch(hours)
    if isinstance(policy, Halfway):
        return policy
    raise InvalidConfigError(f"unknown schedule policy {policy!r}")


def _build_periods(start: datetime, end: datetime, policy: SchedulePolicy) -> List[WatchPeriod]:
    if isinstance(policy, Halfway):
        return _halfway(start, end)
    return _custom(start, end, policy.max_hours)


@calculation
def generate_schedule(start: datetime, end: datetime, policy: SchedulePolicy) -> Schedule | Invalid:
    """Build the watch schedule for ``[start, end)`` under ``policy``.

    Returns ``Invalid(INVALID_INTERVAL)`` when ``end <= start`` and
    ``Invalid(INVALID_CONFIG)`` for a non-positive max watch.

    Timezone-aware instants are scheduled on elapsed real time and the
    period boundaries are reported in the timezone of ``start``.
    """
    _check_interval(start, end)
    policy = _coerce_policy(policy)
    if start.tzinfo is None:
        return Schedule(start, end, policy, _build_periods(start, end, policy))

    # Aware instants are split in UTC so a DST change cannot bend the arithmetic.
    utc_periods = _build_periods(
        start.astimezone(timezone.utc), end.astimezone(timezone.utc), policy
    )
    periods = [
        WatchPeriod(
            p.start_time.astimezone(start.tzinfo), p.end_time.astimezone(start.tzinfo), p.operator
        )
        for p in utc_periods
    ]
    return Schedule(start, end, policy, periods)


@calculation
def time_underway(start: datetime, end: datetime) -> str | Invalid:
    """Total time underway as text.

    When start and end share the same minute of the hour the result is
    rounded up to the next full hour.
    """
    total = _check_interval(start, end)
    total_minutes = int(total.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)

    if start.minute == end.minute:
        return f"{hours + (1 if minutes > 0 else 0)}h"
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"

