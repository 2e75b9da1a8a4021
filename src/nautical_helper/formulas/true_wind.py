"""True wind from apparent wind, boat speed and heading."""
from __future__ import annotations

import math
from dataclasses import dataclass

from nautical_helper.core.nautical import normalize_bearing, relative_to_signed, to_deg, to_rad
from nautical_helper.core.parsing import NumberLike, require_number
from nautical_helper.core.results import Invalid, calculation, ensure_finite


@dataclass(frozen=True, slots=True)
class TrueWindResult:
    speed_kn: float
    angle_deg: float        # relative to the bow, -180..180
    direction_deg: float    # from north, [0, 360)

    @property
    def speed_text(self) -> str:
        return f"{self.speed_kn:.2f}"

    @property
    def direction_text(self) -> str:
        # 359.6 rounds to 360, report it as 000 instead
        return f"{round(self.direction_deg) % 360:.0f}"


@calculation
def true_wind(
    apparent_speed: NumberLike,
    apparent_angle: NumberLike,
    boat_speed: NumberLike,
    heading: NumberLike,
) -> TrueWindResult | Invalid:
    """Resolve the apparent wind vector against the boat's motion.

    Args:
        apparent_speed: Apparent wind speed in knots.
        apparent_angle: Apparent wind angle relative to the bow, 0-359.
        boat_speed: Speed through the water in knots.
        heading: True heading, 0-359.
    """
    aws = require_number(apparent_speed, "apparent_speed")
    awa = relative_to_signed(require_number(apparent_angle, "apparent_angle"))
    bs = require_number(boat_speed, "boat_speed")
    hdg = require_number(heading, "heading")

    awa_rad = to_rad(awa)
    ensure_finite(apparent_angle=awa_rad)
    tws = math.sqrt(aws * aws + bs * bs - 2 * aws * bs * math.cos(awa_rad))
    twa = to_deg(math.atan2(aws * math.sin(awa_rad), aws * math.cos(awa_rad) - bs))
    twd = normalize_bearing(hdg + twa)
    ensure_finite(tws=tws, twd=twd)
    return TrueWindResult(tws, twa, twd)
