"""Table-driven length and speed conversions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from nautical_helper.core.nautical import METERS_PER_NM, SECONDS_PER_HOUR
from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import DomainError, Invalid, InvalidInputError, calculation, ensure_finite

logger = logging.getLogger(__name__)


class ConversionUnit(str, Enum):
    FEET = "Feet"
    METERS = "Meters"
    FATHOMS = "Fathoms"
    SHACKLES = "Shackles"
    CABLES = "Cables"
    STATUTE_MILES = "Statute Miles"
    NAUTICAL_MILES = "Nautical Miles"
    METERS_PER_SECOND = "Meters per second"
    NAUTICAL_MILES_PER_HOUR = "Nautical Miles per hour"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | ConversionUnit") -> "ConversionUnit":
        """Look a unit up by enum name ("STATUTE_MILES") or label ("Statute Miles")."""
        if isinstance(name, cls):
            return name
        key = name.strip()
        for unit in cls:
            if key.lower() in (unit.value.lower(), unit.name.lower()):
                return unit
        raise InvalidInputError(f"unknown unit {name!r}")


# Metres per unit. Rate units are deliberately absent.
LENGTH_TO_METERS: dict[ConversionUnit, float] = {
    ConversionUnit.FEET: 0.3048,
    ConversionUnit.METERS: 1.0,
    ConversionUnit.FATHOMS: 1.8288,
    ConversionUnit.SHACKLES: 27.432,
    ConversionUnit.CABLES: 185.2,
    ConversionUnit.STATUTE_MILES: 1609.34,
    ConversionUnit.NAUTICAL_MILES: METERS_PER_NM,
}


@dataclass(frozen=True, slots=True)
class Conversion:
    value: float
    unit: ConversionUnit
    decimals: int = 4

    @property
    def text(self) -> str:
        return f"{self.value:.{self.decimals}f}"


def _convert(value: float, from_unit: ConversionUnit, to_unit: ConversionUnit) -> float:
    if from_unit is to_unit:
        return value
    if from_unit is ConversionUnit.METERS_PER_SECOND and to_unit is ConversionUnit.NAUTICAL_MILES_PER_HOUR:
        result = value * SECONDS_PER_HOUR / METERS_PER_NM
    elif from_unit is ConversionUnit.NAUTICAL_MILES_PER_HOUR and to_unit is ConversionUnit.METERS_PER_SECOND:
        result = value * METERS_PER_NM / SECONDS_PER_HOUR
    else:
        from_factor = LENGTH_TO_METERS.get(from_unit)
        to_factor = LENGTH_TO_METERS.get(to_unit)
        if from_factor is None or to_factor is None:
            raise DomainError(f"cannot convert {from_unit.label} to {to_unit.label}")
        result = value * from_factor / to_factor
    ensure_finite(result=result)
    return result


@calculation
def convert_unit(
    value: NumberLike,
    from_unit: str | ConversionUnit,
    to_unit: str | ConversionUnit,
) -> float | Invalid:
    """Convert ``value`` between two units.

    Length units convert through metres. The only rate conversion is the
    m/s <-> kn pair; mixing a rate unit with a length unit is invalid.
    """
    number = require_number(value, "value")
    src = ConversionUnit.parse(from_unit)
    dst = ConversionUnit.parse(to_unit)
    result = _convert(number, src, dst)
    logger.debug("convert %s %s -> %s %s", number, src.label, result, dst.label)
    return result


@calculation
def convert(
    value: NumberLike,
    from_unit: str | ConversionUnit,
    to_unit: str | ConversionUnit,
    decimals: int = 4,
) -> Conversion | Invalid:
    """Like :func:`convert_unit` but keeps the target unit and display precision."""
    number = require_number(value, "value")
    dst = ConversionUnit.parse(to_unit)
    return Conversion(_convert(number, ConversionUnit.parse(from_unit), dst), dst, decimals)


def format_conversion(value: float | Invalid, decimals: int = 4) -> str:
    if isinstance(value, Invalid):
        return value.text
    return f"{value:.{decimals}f}"
