"""Anchoring: recommended shots of cable and swing circle radius."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from nautical_helper.core.nautical import METERS_PER_NM, METERS_PER_SHACKLE
from nautical_helper.core.parsing import NumberLike, parse_optional, require_number
from nautical_helper.core.results import DomainError, Invalid, calculation, ensure_finite

logger = logging.getLogger(__name__)

# Rule-of-thumb divisor for shot counts, kept distinct from the exact shackle length.
SHOT_DIVISOR_M = 27.43
WALK_OUT_CLEARANCE_M = 5.0


@dataclass(frozen=True, slots=True)
class AnchorResult:
    normal_wx_shots: float
    rough_wx_shots: float
    walk_out_shots: float
    swing_circle_nm: float

    @property
    def normal_wx_text(self) -> str:
        return f"{self.normal_wx_shots:.1f}"

    @property
    def rough_wx_text(self) -> str:
        return f"{self.rough_wx_shots:.1f}"

    @property
    def walk_out_text(self) -> str:
        return f"{self.walk_out_shots:.1f}"

    @property
    def swing_circle_text(self) -> str:
        return f"{self.swing_circle_nm:.2f}"


@calculation
def anchor_swing(
    loa: NumberLike,
    bottom_depth: NumberLike,
    shackles_on_deck: NumberLike,
    hawsepipe_freeboard: Optional[NumberLike] = None,
) -> AnchorResult | Invalid:
    """Shot counts for normal/rough weather and the swing circle in nautical miles.

    The swing radius is the horizontal run of the chain (chain length against
    depth plus hawsepipe freeboard) plus the vessel's length overall.
    """
    loa_m = require_number(loa, "loa")
    depth = require_number(bottom_depth, "bottom_depth")
    shackles = require_number(shackles_on_deck, "shackles_on_deck")
    freeboard = parse_optional(hawsepipe_freeboard, 0.0)

    normal_shots = ((depth * 3) + 90) / SHOT_DIVISOR_M
    rough_shots = ((depth * 4) + 150) / SHOT_DIVISOR_M
    walk_out = (depth - WALK_OUT_CLEARANCE_M) / METERS_PER_SHACKLE

    vertical = depth + freeboard
    chain_length = shackles * METERS_PER_SHACKLE
    under_radius_sq = chain_length * chain_length - vertical * vertical
    if under_radius_sq < 0:
        raise DomainError(
            f"{shackles:g} shackles cannot reach {vertical:.2f} m from hawsepipe to bottom"
        )

    swing = (math.sqrt(under_radius_sq) + loa_m) / METERS_PER_NM
    ensure_finite(normal_shots=normal_shots, rough_shots=rough_shots, swing=swing)
    logger.debug("anchor swing: chain %.1f m, radius %.3f nm", chain_length, swing)
    return AnchorResult(normal_shots, rough_shots, walk_out, swing)
