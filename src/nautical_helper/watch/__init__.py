"""Two-operator watch scheduling."""

from nautical_helper.watch.schedule import (
    CustomMaxWatch,
    Halfway,
    Operator,
    Schedule,
    SchedulePolicy,
    WatchPeriod,
    duration_text,
    format_period,
    generate_schedule,
    time_underway,
)

__all__ = [
    "CustomMaxWatch",
    "Halfway",
    "Operator",
    "Schedule",
    "SchedulePolicy",
    "WatchPeriod",
    "duration_text",
    "format_period",
    "generate_schedule",
    "time_underway",
]
