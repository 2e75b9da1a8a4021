"""Squat and under-keel clearance at high water."""
from __future__ import annotations

from dataclasses import dataclass

from nautical_helper.core.nautical import REGULATORY_UKC_M
from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import Invalid, calculation, ensure_finite


@dataclass(frozen=True, slots=True)
class SquatResult:
    water_depth_at_hw_m: float
    squat_m: float
    max_static_draft_m: float
    ukc_m: float
    ukc_warning: bool

    def as_text(self) -> dict[str, str]:
        return {
            "water_depth_at_hw": f"{self.water_depth_at_hw_m:.2f}",
            "squat": f"{self.squat_m:.2f}",
            "max_static_draft": f"{self.max_static_draft_m:.2f}",
            "ukc": f"{self.ukc_m:.2f}",
        }


@calculation
def squat_ukc(
    least_charted_depth: NumberLike,
    height_of_tide: NumberLike,
    block_coefficient: NumberLike,
    transit_speed: NumberLike,
    deep_draft: NumberLike,
    regulatory_ukc_m: float = REGULATORY_UKC_M,
) -> SquatResult | Invalid:
    """Open-water squat estimate: squat = 2 * Cb * V^2 / 100 (metres, V in knots).

    The warning flag is raised when the clearance falls below the regulatory UKC.
    """
    charted = require_number(least_charted_depth, "least_charted_depth")
    tide = require_number(height_of_tide, "height_of_tide")
    cb = require_number(block_coefficient, "block_coefficient")
    speed = require_number(transit_speed, "transit_speed")
    draft = require_number(deep_draft, "deep_draft")

    depth_at_hw = charted + tide
    squat = (cb * 2.0 * speed * speed) / 100.0
    max_static_draft = depth_at_hw - squat - regulatory_ukc_m
    ukc = depth_at_hw - draft - squat
    ensure_finite(depth_at_hw=depth_at_hw, squat=squat, max_static_draft=max_static_draft, ukc=ukc)
    return SquatResult(
        water_depth_at_hw_m=depth_at_hw,
        squat_m=squat,
        max_static_draft_m=max_static_draft,
        ukc_m=ukc,
        ukc_warning=ukc < regulatory_ukc_m,
    )
