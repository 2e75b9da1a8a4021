"""Nautical constants and angle helpers shared by the calculators."""
from __future__ import annotations

import math

METERS_PER_NM = 1852.0
SECONDS_PER_HOUR = 3600.0
METERS_PER_SHACKLE = 27.432

# Minimum under-keel clearance (6 ft) used for max static draft and warnings.
REGULATORY_UKC_M = 1.83


def to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def relative_to_signed(angle_deg: float) -> float:
    """Map a 0-359 relative bearing to -180..180 (port negative)."""
    return angle_deg - 360.0 if angle_deg > 180.0 else angle_deg


def normalize_bearing(b: float) -> float:
    """Normalise bearing to [0, 360)."""
    return (math.fmod(b, 360.0) + 360.0) % 360.0


def fold_course_difference(course1: float, course2: float) -> float:
    """Return the alteration between two courses, folded to at most 180 degrees."""
    delta = abs(course1 - course2)
    if delta > 180.0:
        delta = 360.0 - delta
    return delta
