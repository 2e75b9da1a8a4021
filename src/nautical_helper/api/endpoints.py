"""API routers."""
from __future__ import annotations

from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException

from nautical_helper.api.dependencies import get_settings
from nautical_helper.api.schemas import (
    AnchorRequest,
    AnchorResponse,
    ConvertRequest,
    ConvertResponse,
    IntervalRequest,
    RotRequest,
    RpmRequest,
    RpmResponse,
    ScheduleRequest,
    ScheduleResponse,
    SquatRequest,
    SquatResponse,
    StdRequest,
    SweptPathRequest,
    SweptPathResponse,
    TimeUnderwayResponse,
    TrueWindRequest,
    TrueWindResponse,
    TurnRequest,
    TurnResponse,
    ValueResponse,
    WatchPeriodModel,
)
from nautical_helper.core.config import HelperConfig
from nautical_helper.core.results import Invalid
from nautical_helper.core.units import convert
from nautical_helper.formulas import (
    anchor_swing,
    calculate_rot,
    calculate_std,
    new_rpm,
    squat_ukc,
    swept_path,
    true_wind,
    turn_index,
)
from nautical_helper.watch.schedule import (
    CustomMaxWatch,
    Halfway,
    SchedulePolicy,
    format_period,
    generate_schedule,
    time_underway,
)

T = TypeVar("T")

router = APIRouter()


def _unwrap(result: T | Invalid) -> T:
    """Turn an Invalid result into a 422 with the error kind and display text."""
    if isinstance(result, Invalid):
        raise HTTPException(
            status_code=422,
            detail={"error": result.kind.value, "message": result.message, "text": result.text},
        )
    return result


@router.post("/convert", response_model=ConvertResponse)
def convert_endpoint(req: ConvertRequest, settings: HelperConfig = Depends(get_settings)) -> ConvertResponse:
    conversion = _unwrap(convert(req.value, req.from_unit, req.to_unit, settings.units.decimals))
    return ConvertResponse(value=conversion.value, unit=conversion.unit.label, text=conversion.text)


@router.post("/rot", response_model=ValueResponse)
def rot_endpoint(req: RotRequest) -> ValueResponse:
    result = _unwrap(calculate_rot(req.mode, speed=req.speed, radius=req.radius, rot=req.rot))
    return ValueResponse(value=result.value, unit=result.unit, text=result.text)


@router.post("/anchor", response_model=AnchorResponse)
def anchor_endpoint(req: AnchorRequest) -> AnchorResponse:
    result = _unwrap(anchor_swing(req.loa, req.bottom_depth, req.shackles_on_deck, req.hawsepipe_freeboard))
    return AnchorResponse(
        normal_wx_shots=result.normal_wx_text,
        rough_wx_shots=result.rough_wx_text,
        walk_out_shots=result.walk_out_text,
        swing_circle_nm=result.swing_circle_text,
    )


@router.post("/squat", response_model=SquatResponse)
def squat_endpoint(req: SquatRequest, settings: HelperConfig = Depends(get_settings)) -> SquatResponse:
    result = _unwrap(
        squat_ukc(
            req.least_charted_depth,
            req.height_of_tide,
            req.block_coefficient,
            req.transit_speed,
            req.deep_draft,
            regulatory_ukc_m=settings.squat.regulatory_ukc_m,
        )
    )
    return SquatResponse(**result.as_text(), ukc_warning=result.ukc_warning)


@router.post("/swept-path", response_model=SweptPathResponse)
def swept_path_endpoint(req: SweptPathRequest, settings: HelperConfig = Depends(get_settings)) -> SweptPathResponse:
    result = _unwrap(
        swept_path(
            req.length,
            req.beam,
            req.additional_drift_angle,
            presets=settings.swept_path.preset_drift_angles_deg,
            tolerance=settings.swept_path.duplicate_tolerance_deg,
        )
    )
    return SweptPathResponse(
        lines=result.labels,
        paths_m={f"{line.drift_deg:g}": round(line.path_m, 2) for line in result.lines},
    )


@router.post("/true-wind", response_model=TrueWindResponse)
def true_wind_endpoint(req: TrueWindRequest) -> TrueWindResponse:
    result = _unwrap(true_wind(req.apparent_speed, req.apparent_angle, req.boat_speed, req.heading))
    return TrueWindResponse(true_wind_speed=result.speed_text, true_wind_direction=result.direction_text)


@router.post("/turn", response_model=TurnResponse)
def turn_endpoint(req: TurnRequest) -> TurnResponse:
    result = _unwrap(turn_index(req.leg1, req.leg2, req.radius))
    return TurnResponse(alteration=result.alteration_text, lead_distance_nm=result.lead_distance_text)


@router.post("/std", response_model=ValueResponse)
def std_endpoint(req: StdRequest) -> ValueResponse:
    result = _unwrap(calculate_std(req.mode, time=req.time, distance=req.distance, speed=req.speed))
    return ValueResponse(value=result.value, unit=result.unit, text=result.text)


@router.post("/rpm", response_model=RpmResponse)
def rpm_endpoint(req: RpmRequest) -> RpmResponse:
    result = _unwrap(new_rpm(req.current_rpm, req.current_speed, req.desired_speed))
    return RpmResponse(new_rpm=result.text)


def _policy_from_request(req: ScheduleRequest, settings: HelperConfig) -> SchedulePolicy:
    if req.policy.lower() == "halfway":
        return Halfway()
    if req.policy.lower() == "custom":
        max_hours = req.max_watch_hours
        if max_hours is None:
            max_hours = settings.watch.default_max_watch_hours
        return CustomMaxWatch(max_hours)
    raise HTTPException(status_code=422, detail=f"Unknown policy '{req.policy}'. Use 'halfway' or 'custom'.")


@router.post("/watch/schedule", response_model=ScheduleResponse)
def schedule_endpoint(req: ScheduleRequest, settings: HelperConfig = Depends(get_settings)) -> ScheduleResponse:
    names = settings.watch.operator_names
    schedule = _unwrap(generate_schedule(req.start, req.end, _policy_from_request(req, settings)))
    return ScheduleResponse(
        total_time=schedule.total_time_text,
        periods=[
            WatchPeriodModel(
                start=p.start_time,
                end=p.end_time,
                operator=p.operator.display_name(names),
                duration=p.duration_text,
                line=format_period(p, names),
            )
            for p in schedule
        ],
    )


@router.post("/watch/time-underway", response_model=TimeUnderwayResponse)
def time_underway_endpoint(req: IntervalRequest) -> TimeUnderwayResponse:
    return TimeUnderwayResponse(total_time=_unwrap(time_underway(req.start, req.end)))
