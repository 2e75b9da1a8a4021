"""Parallel-index lead distance for a turn between two legs."""
from __future__ import annotations

import math
from dataclasses import dataclass

from nautical_helper.core.nautical import fold_course_difference, to_rad
from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import DomainError, Invalid, calculation, ensure_finite


@dataclass(frozen=True, slots=True)
class TurnIndexResult:
    alteration_deg: float
    lead_distance_nm: float

    @property
    def alteration_text(self) -> str:
        return f"{self.alteration_deg:.0f}"

    @property
    def lead_distance_text(self) -> str:
        return f"{self.lead_distance_nm:.2f}"


@calculation
def turn_index(leg1: NumberLike, leg2: NumberLike, radius: NumberLike) -> TurnIndexResult | Invalid:
    """Wheel-over lead distance L = R * tan(delta / 2)."""
    c1 = require_number(leg1, "leg1")
    c2 = require_number(leg2, "leg2")
    r = require_number(radius, "radius")

    delta = fold_course_difference(c1, c2)
    ensure_finite(alteration=delta)
    if delta >= 180:
        # tan(90) has no finite value; a reversal has no wheel-over point.
        raise DomainError("course alteration must be less than 180 degrees")
    lead = r * math.tan(to_rad(delta / 2))
    ensure_finite(lead_distance=lead)
    return TurnIndexResult(delta, lead)
