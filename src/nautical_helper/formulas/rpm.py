"""Shaft RPM for a new speed, assuming speed proportional to revolutions."""
from __future__ import annotations

from dataclasses import dataclass

from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import DomainError, Invalid, calculation, ensure_finite


@dataclass(frozen=True, slots=True)
class RpmResult:
    rpm: float

    @property
    def text(self) -> str:
        return f"{self.rpm:.0f}"


@calculation
def new_rpm(current_rpm: NumberLike, current_speed: NumberLike, desired_speed: NumberLike) -> RpmResult | Invalid:
    rpm = require_number(current_rpm, "current_rpm")
    speed = require_number(current_speed, "current_speed")
    desired = require_number(desired_speed, "desired_speed")
    if speed == 0:
        raise DomainError("current speed must be non-zero")
    value = (rpm / speed) * desired
    ensure_finite(rpm=value)
    return RpmResult(value)
