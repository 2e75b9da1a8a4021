from __future__ import annotations

import math

import pytest

from nautical_helper.core.results import ErrorKind, Invalid
from nautical_helper.formulas import (
    RotMode,
    StdMode,
    anchor_swing,
    calculate_rot,
    calculate_std,
    new_rpm,
    squat_ukc,
    swept_path,
    true_wind,
    turn_index,
)
from nautical_helper.formulas.true_wind import TrueWindResult


def test_rot_modes() -> None:
    rot = calculate_rot(RotMode.ROT, speed="10", radius="1.0")
    assert rot.value == pytest.approx(9.55)
    assert rot.text == "9.55 deg/min"

    radius = calculate_rot("radius", speed=10, rot=9.55)
    assert radius.text == "1.00 nm"

    speed = calculate_rot("Speed", rot="9.55", radius="1")
    assert speed.text == "10.00 knots"


def test_rot_rejects_zero_divisor_and_missing_fields() -> None:
    assert calculate_rot("ROT", speed=10, radius=0).kind is ErrorKind.DOMAIN_ERROR
    assert calculate_rot("Radius", speed=10, rot="0").kind is ErrorKind.DOMAIN_ERROR
    assert calculate_rot("ROT", speed=10).kind is ErrorKind.INVALID_INPUT
    assert calculate_rot("Heading", speed=10, radius=1).kind is ErrorKind.INVALID_INPUT


def test_anchor_swing() -> None:
    result = anchor_swing(loa="100", bottom_depth="20", shackles_on_deck="6", hawsepipe_freeboard="0")
    chain = 6 * 27.432
    expected = (math.sqrt(chain ** 2 - 20 ** 2) + 100) / 1852
    assert result.swing_circle_nm == pytest.approx(expected)
    assert result.swing_circle_text == "0.14"
    assert result.normal_wx_text == "5.5"
    assert result.rough_wx_text == "8.4"
    assert result.walk_out_text == "0.5"


def test_anchor_freeboard_is_optional() -> None:
    blank = anchor_swing(100, 20, 6, "")
    zero = anchor_swing(100, 20, 6, 0)
    assert blank == zero
    higher = anchor_swing(100, 20, 6, 5)
    assert higher.swing_circle_nm < zero.swing_circle_nm


def test_anchor_short_cable_is_invalid() -> None:
    result = anchor_swing(loa=100, bottom_depth=50, shackles_on_deck=1)
    assert isinstance(result, Invalid)
    assert result.kind is ErrorKind.DOMAIN_ERROR
    assert result.text == "Invalid"


def test_squat_ukc_warning() -> None:
    result = squat_ukc("10", "2", "0.8", "10", "9")
    assert result.as_text() == {
        "water_depth_at_hw": "12.00",
        "squat": "1.60",
        "max_static_draft": "8.57",
        "ukc": "1.40",
    }
    assert result.ukc_warning is True

    safe = squat_ukc(10, 2, 0.8, 10, 8)
    assert safe.ukc_m == pytest.approx(2.4)
    assert safe.ukc_warning is False


def test_swept_path_presets() -> None:
    result = swept_path("100", "20")
    assert [line.drift_deg for line in result.lines] == [2, 4, 6, 8, 10]
    paths = [line.path_m for line in result.lines]
    assert paths == sorted(paths)

    base = math.hypot(100, 20)
    assert paths[0] == pytest.approx(base * math.sin(math.atan(20 / 100) + math.radians(2)))
    assert result.labels[0] == f"Drift Angle 2°: Swept Path = {paths[0]:.2f} m"


def test_swept_path_additional_angle() -> None:
    assert [line.drift_deg for line in swept_path(100, 20, "5").lines] == [2, 4, 5, 6, 8, 10]
    assert len(swept_path(100, 20, "4.0005").lines) == 5
    assert len(swept_path(100, 20, "-3").lines) == 5
    assert len(swept_path(100, 20, "abc").lines) == 5


def test_swept_path_custom_presets() -> None:
    result = swept_path(100, 20, presets=[1, 3])
    assert [line.drift_deg for line in result.lines] == [1, 3]


@pytest.mark.parametrize("length, beam", [(0, 20), (100, 0), (-5, 20)])
def test_swept_path_rejects_non_positive(length: float, beam: float) -> None:
    assert isinstance(swept_path(length, beam), Invalid)


@pytest.mark.parametrize("heading, expected", [(90, "270"), (270, "90"), (0, "180"), (180, "0")])
def test_true_wind_no_apparent_wind(heading: float, expected: str) -> None:
    result = true_wind(apparent_speed=0, apparent_angle=0, boat_speed=10, heading=heading)
    assert result.speed_kn == pytest.approx(10)
    assert result.direction_text == expected


def test_true_wind_head_wind() -> None:
    result = true_wind("15", "0", "5", "45")
    assert result.speed_text == "10.00"
    assert result.direction_text == "45"


def test_true_wind_port_side_angle() -> None:
    result = true_wind(10, 350, 0, 100)
    assert result.angle_deg == pytest.approx(-10)
    assert result.direction_text == "90"


def test_true_wind_direction_wraps_to_zero() -> None:
    assert TrueWindResult(1.0, 0.0, 359.6).direction_text == "0"


def test_turn_index() -> None:
    result = turn_index("350", "10", "1")
    assert result.alteration_text == "20"
    assert result.lead_distance_nm == pytest.approx(math.tan(math.radians(10)))
    assert result.lead_distance_text == "0.18"

    right_angle = turn_index(90, 180, 0.5)
    assert right_angle.alteration_text == "90"
    assert right_angle.lead_distance_text == "0.50"


@pytest.mark.parametrize("leg1, leg2", [(0, 180), (90, 270), ("10", "190")])
def test_turn_index_reversal_is_domain_error(leg1, leg2) -> None:
    result = turn_index(leg1, leg2, 1)
    assert isinstance(result, Invalid)
    assert result.kind is ErrorKind.DOMAIN_ERROR


def test_speed_time_distance() -> None:
    assert calculate_std(StdMode.SPEED, time="2", distance="20").text == "10.0 knots"
    assert calculate_std("Time", distance=15, speed=10).text == "1.50 hours"
    assert calculate_std("distance", speed=12, time=1.5).text == "18.0 nm"


def test_speed_time_distance_forbidden_divisors() -> None:
    assert calculate_std("Speed", time=0, distance=10).kind is ErrorKind.DOMAIN_ERROR
    assert calculate_std("Time", speed=0, distance=10).kind is ErrorKind.DOMAIN_ERROR


def test_rpm() -> None:
    assert new_rpm("80", "10", "12").text == "96"
    assert new_rpm(80, 0, 12).kind is ErrorKind.DOMAIN_ERROR


@pytest.mark.parametrize(
    "call",
    [
        lambda: calculate_rot("ROT", speed="abc", radius="1"),
        lambda: anchor_swing("abc", "20", "6"),
        lambda: squat_ukc("10", "2", "x", "10", "9"),
        lambda: swept_path("abc", "20"),
        lambda: true_wind("10", "nan", "5", "0"),
        lambda: turn_index("", "10", "1"),
        lambda: calculate_std("Distance", speed="fast", time="1"),
        lambda: new_rpm("80", "10", "inf"),
    ],
)
def test_non_numeric_input_is_invalid(call) -> None:
    result = call()
    assert isinstance(result, Invalid)
    assert result.kind is ErrorKind.INVALID_INPUT
    assert result.text == "Invalid input"
