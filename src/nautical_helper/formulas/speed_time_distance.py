"""Speed, time and distance: solve for one given the other two."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import DomainError, Invalid, InvalidInputError, calculation, ensure_finite


class StdMode(str, Enum):
    SPEED = "Speed"
    TIME = "Time"
    DISTANCE = "Distance"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if value.lower() in (member.value.lower(), member.name.lower()):
                    return member
        return None


# (format, unit) per solved quantity
_FORMATS = {
    StdMode.SPEED: ("{:.1f}", "knots"),
    StdMode.TIME: ("{:.2f}", "hours"),
    StdMode.DISTANCE: ("{:.1f}", "nm"),
}


@dataclass(frozen=True, slots=True)
class StdResult:
    mode: StdMode
    value: float

    @property
    def unit(self) -> str:
        return _FORMATS[self.mode][1]

    @property
    def text(self) -> str:
        fmt, unit = _FORMATS[self.mode]
        return f"{fmt.format(self.value)} {unit}"


def _speed(time, distance, speed) -> float:
    t = require_number(time, "time")
    d = require_number(distance, "distance")
    if t <= 0:
        raise DomainError("time must be positive")
    return d / t


def _time(time, distance, speed) -> float:
    s = require_number(speed, "speed")
    d = require_number(distance, "distance")
    if s <= 0:
        raise DomainError("speed must be positive")
    return d / s


def _distance(time, distance, speed) -> float:
    s = require_number(speed, "speed")
    t = require_number(time, "time")
    return s * t


_SOLVERS: dict[StdMode, Callable[..., float]] = {
    StdMode.SPEED: _speed,
    StdMode.TIME: _time,
    StdMode.DISTANCE: _distance,
}


@calculation
def calculate_std(
    mode: StdMode | str,
    time: Optional[NumberLike] = None,
    distance: Optional[NumberLike] = None,
    speed: Optional[NumberLike] = None,
) -> StdResult | Invalid:
    try:
        mode = StdMode(mode)
    except ValueError:
        raise InvalidInputError(f"unknown calculation mode {mode!r}") from None
    value = _SOLVERS[mode](time, distance, speed)
    ensure_finite(**{mode.name.lower(): value})
    return StdResult(mode, value)
