"""API request and response models."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

# Raw field values are accepted as text (as typed) or as JSON numbers.
RawNumber = Optional[Union[float, str]]


class ConvertRequest(BaseModel):
    value: RawNumber = Field(..., description="Value to convert")
    from_unit: str = Field(..., description="Source unit, e.g. 'Feet' or 'FEET'")
    to_unit: str = Field(..., description="Target unit")


class ConvertResponse(BaseModel):
    value: float
    unit: str
    text: str


class RotRequest(BaseModel):
    mode: str = Field("ROT", description="ROT, Radius or Speed")
    speed: RawNumber = Field(None, description="Speed in knots")
    radius: RawNumber = Field(None, description="Turn radius in nm")
    rot: RawNumber = Field(None, description="Rate of turn in deg/min")


class ValueResponse(BaseModel):
    value: float
    unit: str
    text: str


class AnchorRequest(BaseModel):
    loa: RawNumber = Field(..., description="Length overall in metres")
    bottom_depth: RawNumber = Field(..., description="Depth of water in metres")
    shackles_on_deck: RawNumber = Field(..., description="Shackles of cable on deck")
    hawsepipe_freeboard: RawNumber = Field(None, description="Hawsepipe height above water, metres")


class AnchorResponse(BaseModel):
    normal_wx_shots: str
    rough_wx_shots: str
    walk_out_shots: str
    swing_circle_nm: str


class SquatRequest(BaseModel):
    least_charted_depth: RawNumber = Field(..., description="Least charted depth, metres")
    height_of_tide: RawNumber = Field(..., description="Height of tide, metres")
    block_coefficient: RawNumber = Field(..., description="Block coefficient Cb")
    transit_speed: RawNumber = Field(..., description="Speed through the water, knots")
    deep_draft: RawNumber = Field(..., description="Deepest draft, metres")


class SquatResponse(BaseModel):
    water_depth_at_hw: str
    squat: str
    max_static_draft: str
    ukc: str
    ukc_warning: bool


class SweptPathRequest(BaseModel):
    length: RawNumber = Field(..., description="Vessel length, metres")
    beam: RawNumber = Field(..., description="Vessel beam, metres")
    additional_drift_angle: RawNumber = Field(None, description="Extra drift angle, degrees")


class SweptPathResponse(BaseModel):
    lines: List[str]
    paths_m: Dict[str, float]


class TrueWindRequest(BaseModel):
    apparent_speed: RawNumber = Field(..., description="Apparent wind speed, knots")
    apparent_angle: RawNumber = Field(..., description="Apparent wind angle off the bow, 0-359")
    boat_speed: RawNumber = Field(..., description="Boat speed, knots")
    heading: RawNumber = Field(..., description="True heading, 0-359")


class TrueWindResponse(BaseModel):
    true_wind_speed: str
    true_wind_direction: str


class TurnRequest(BaseModel):
    leg1: RawNumber = Field(..., description="Course of the first leg, degrees")
    leg2: RawNumber = Field(..., description="Course of the second leg, degrees")
    radius: RawNumber = Field(..., description="Turn radius, nm")


class TurnResponse(BaseModel):
    alteration: str
    lead_distance_nm: str


class StdRequest(BaseModel):
    mode: str = Field("Distance", description="Speed, Time or Distance")
    time: RawNumber = Field(None, description="Time in hours")
    distance: RawNumber = Field(None, description="Distance in nm")
    speed: RawNumber = Field(None, description="Speed in knots")


class RpmRequest(BaseModel):
    current_rpm: RawNumber = Field(..., description="Current shaft RPM")
    current_speed: RawNumber = Field(..., description="Current speed, knots")
    desired_speed: RawNumber = Field(..., description="Desired speed, knots")


class RpmResponse(BaseModel):
    new_rpm: str


class ScheduleRequest(BaseModel):
    start: datetime
    end: datetime
    policy: str = Field("halfway", description="'halfway' or 'custom'")
    max_watch_hours: RawNumber = Field(None, description="Max watch length for the custom policy")


class WatchPeriodModel(BaseModel):
    start: datetime
    end: datetime
    operator: str
    duration: str
    line: str


class ScheduleResponse(BaseModel):
    total_time: str
    periods: List[WatchPeriodModel]


class IntervalRequest(BaseModel):
    start: datetime
    end: datetime


class TimeUnderwayResponse(BaseModel):
    total_time: str
