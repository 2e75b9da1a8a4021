"""Rate of turn: ROT (deg/min) = 0.955 * speed (kn) / radius (nm)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import DomainError, Invalid, InvalidInputError, calculation, ensure_finite

ROT_CONSTANT = 0.955


class RotMode(str, Enum):
    ROT = "ROT"
    RADIUS = "Radius"
    SPEED = "Speed"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if value.lower() in (member.value.lower(), member.name.lower()):
                    return member
        return None


_UNITS = {
    RotMode.ROT: "deg/min",
    RotMode.RADIUS: "nm",
    RotMode.SPEED: "knots",
}


@dataclass(frozen=True, slots=True)
class RotResult:
    mode: RotMode
    value: float

    @property
    def unit(self) -> str:
        return _UNITS[self.mode]

    @property
    def text(self) -> str:
        return f"{self.value:.2f} {self.unit}"


def _rot(speed: Optional[NumberLike], radius: Optional[NumberLike], rot: Optional[NumberLike]) -> float:
    s = require_number(speed, "speed")
    r = require_number(radius, "radius")
    if r == 0:
        raise DomainError("radius must be non-zero")
    return ROT_CONSTANT * s / r


def _radius(speed: Optional[NumberLike], radius: Optional[NumberLike], rot: Optional[NumberLike]) -> float:
    s = require_number(speed, "speed")
    r = require_number(rot, "rot")
    if r == 0:
        raise DomainError("rate of turn must be non-zero")
    return ROT_CONSTANT * s / r


def _speed(speed: Optional[NumberLike], radius: Optional[NumberLike], rot: Optional[NumberLike]) -> float:
    r = require_number(rot, "rot")
    rad = require_number(radius, "radius")
    return r * rad / ROT_CONSTANT


_SOLVERS: dict[RotMode, Callable[..., float]] = {
    RotMode.ROT: _rot,
    RotMode.RADIUS: _radius,
    RotMode.SPEED: _speed,
}


@calculation
def calculate_rot(
    mode: RotMode | str,
    speed: Optional[NumberLike] = None,
    radius: Optional[NumberLike] = None,
    rot: Optional[NumberLike] = None,
) -> RotResult | Invalid:
    """Solve for the quantity named by ``mode`` from the other two."""
    try:
        mode = RotMode(mode)
    except ValueError:
        raise InvalidInputError(f"unknown calculation mode {mode!r}") from None
    value = _SOLVERS[mode](speed, radius, rot)
    ensure_finite(**{mode.name.lower(): value})
    return RotResult(mode, value)
