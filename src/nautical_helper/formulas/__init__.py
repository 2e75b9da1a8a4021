"""Navigation calculators. Each takes raw field values and returns a result or Invalid."""

from nautical_helper.formulas.anchor import AnchorResult, anchor_swing
from nautical_helper.formulas.rate_of_turn import RotMode, RotResult, calculate_rot
from nautical_helper.formulas.rpm import RpmResult, new_rpm
from nautical_helper.formulas.speed_time_distance import StdMode, StdResult, calculate_std
from nautical_helper.formulas.squat import SquatResult, squat_ukc
from nautical_helper.formulas.swept_path import SweptPathLine, SweptPathResult, swept_path
from nautical_helper.formulas.true_wind import TrueWindResult, true_wind
from nautical_helper.formulas.turn_index import TurnIndexResult, turn_index

__all__ = [
    "AnchorResult",
    "RotMode",
    "RotResult",
    "RpmResult",
    "StdMode",
    "StdResult",
    "SquatResult",
    "SweptPathLine",
    "SweptPathResult",
    "TrueWindResult",
    "TurnIndexResult",
    "anchor_swing",
    "calculate_rot",
    "calculate_std",
    "new_rpm",
    "squat_ukc",
    "swept_path",
    "true_wind",
    "turn_index",
]
