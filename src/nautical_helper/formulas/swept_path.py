"""Swept path of a vessel moving with a drift angle.

The hull is treated as a rectangle L x B. With drift angle d the width of the
water swept is the rectangle's diagonal projected across the track:

    path = sqrt(L^2 + B^2) * sin(atan(B / L) + d)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from nautical_helper.core.parsing import NumberLike, parse_optional, require_number
from nautical_helper.core.results import InvalidInputError, Invalid, calculation, ensure_finite

logger = logging.getLogger(__name__)

PRESET_DRIFT_ANGLES_DEG = (2.0, 4.0, 6.0, 8.0, 10.0)
DUPLICATE_TOLERANCE_DEG = 0.001


@dataclass(frozen=True, slots=True)
class SweptPathLine:
    drift_deg: float
    path_m: float

    @property
    def label(self) -> str:
        return f"Drift Angle {int(self.drift_deg)}°: Swept Path = {self.path_m:.2f} m"


@dataclass(frozen=True, slots=True)
class SweptPathResult:
    length_m: float
    beam_m: float
    lines: List[SweptPathLine] = field(default_factory=list)

    @property
    def labels(self) -> List[str]:
        return [line.label for line in self.lines]


def drift_angle_table(
    additional: Optional[float],
    presets: Sequence[float] = PRESET_DRIFT_ANGLES_DEG,
    tolerance: float = DUPLICATE_TOLERANCE_DEG,
) -> List[float]:
    """Preset drift angles plus ``additional`` (if positive and not a near-duplicate), ascending."""
    angles = [float(a) for a in presets]
    if additional is not None and additional > 0:
        if not any(abs(a - additional) < tolerance for a in angles):
            angles.append(additional)
    return sorted(angles)


@calculation
def swept_path(
    length: NumberLike,
    beam: NumberLike,
    additional_drift_angle: Optional[NumberLike] = None,
    presets: Sequence[float] = PRESET_DRIFT_ANGLES_DEG,
    tolerance: float = DUPLICATE_TOLERANCE_DEG,
) -> SweptPathResult | Invalid:
    L = require_number(length, "length")
    B = require_number(beam, "beam")
    if L <= 0 or B <= 0:
        raise InvalidInputError("vessel length and beam must be positive")

    drifts = drift_angle_table(parse_optional(additional_drift_angle), presets, tolerance)
    base = np.hypot(L, B)
    angle = np.arctan(B / L)
    paths = base * np.sin(angle + np.radians(np.asarray(drifts, dtype=float)))
    ensure_finite(base=float(base))

    lines = [SweptPathLine(drift, float(path)) for drift, path in zip(drifts, paths)]
    logger.debug("swept path for %d drift angles, L=%.1f B=%.1f", len(lines), L, B)
    return SweptPathResult(L, B, lines)
