"""Calculator commands. Arguments are taken as typed and parsed by the core."""
from __future__ import annotations

from typing import Optional

import typer

from nautical_helper.cli import unwrap
from nautical_helper.core.config import get_config
from nautical_helper.core.units import ConversionUnit, convert
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

app = typer.Typer(help="Navigation calculators")


@app.command("convert")
def convert_cmd(
    value: str = typer.Argument(..., help="Value to convert"),
    from_unit: str = typer.Argument(..., help="Source unit, e.g. Feet or 'Nautical Miles per hour'"),
    to_unit: str = typer.Argument(..., help="Target unit"),
) -> None:
    """Convert lengths (feet, fathoms, shackles, cables, ...) or m/s <-> knots."""
    cfg = get_config()
    conversion = unwrap(convert(value, from_unit, to_unit, cfg.units.decimals))
    typer.echo(f"{conversion.text} {conversion.unit.label}")


@app.command()
def units() -> None:
    """List the units accepted by convert."""
    for unit in ConversionUnit:
        typer.echo(f"{unit.name:<24} {unit.label}")


@app.command()
def rot(
    mode: str = typer.Argument("ROT", help="ROT, Radius or Speed"),
    speed: Optional[str] = typer.Option(None, "--speed", "-s", help="Speed in knots"),
    radius: Optional[str] = typer.Option(None, "--radius", "-r", help="Radius in nm"),
    rate: Optional[str] = typer.Option(None, "--rot", help="Rate of turn in deg/min"),
) -> None:
    """Rate of turn, radius or speed from the other two."""
    result = unwrap(calculate_rot(mode, speed=speed, radius=radius, rot=rate))
    typer.echo(result.text)


@app.command()
def anchor(
    loa: str = typer.Option(..., help="Length overall, metres"),
    depth: str = typer.Option(..., help="Bottom depth, metres"),
    shackles: str = typer.Option(..., help="Shackles on deck"),
    freeboard: Optional[str] = typer.Option(None, help="Hawsepipe freeboard, metres"),
) -> None:
    """Recommended shots of cable and swing circle."""
    result = unwrap(anchor_swing(loa, depth, shackles, freeboard))
    typer.echo(f"Normal weather shots: {result.normal_wx_text}")
    typer.echo(f"Rough weather shots:  {result.rough_wx_text}")
    typer.echo(f"Walk out shots:       {result.walk_out_text}")
    typer.echo(f"Swing circle:         {result.swing_circle_text} nm")


@app.command()
def squat(
    charted_depth: str = typer.Option(..., help="Least charted depth, metres"),
    tide: str = typer.Option(..., help="Height of tide, metres"),
    cb: str = typer.Option(..., help="Block coefficient"),
    speed: str = typer.Option(..., help="Transit speed, knots"),
    draft: str = typer.Option(..., help="Deep draft, metres"),
) -> None:
    """Squat and under-keel clearance at high water."""
    cfg = get_config()
    result = unwrap(squat_ukc(charted_depth, tide, cb, speed, draft, regulatory_ukc_m=cfg.squat.regulatory_ukc_m))
    text = result.as_text()
    typer.echo(f"Water depth at HW: {text['water_depth_at_hw']} m")
    typer.echo(f"Squat:             {text['squat']} m")
    typer.echo(f"Max static draft:  {text['max_static_draft']} m")
    typer.echo(f"UKC:               {text['ukc']} m")
    if result.ukc_warning:
        typer.echo(f"WARNING: UKC below {cfg.squat.regulatory_ukc_m:.2f} m")


@app.command("swept-path")
def swept_path_cmd(
    length: str = typer.Option(..., help="Vessel length, metres"),
    beam: str = typer.Option(..., help="Vessel beam, metres"),
    drift: Optional[str] = typer.Option(None, help="Additional drift angle, degrees"),
) -> None:
    """Swept path for the preset drift angles (plus an optional extra one)."""
    cfg = get_config().swept_path
    result = unwrap(
        swept_path(length, beam, drift, presets=cfg.preset_drift_angles_deg, tolerance=cfg.duplicate_tolerance_deg)
    )
    for label in result.labels:
        typer.echo(label)


@app.command("true-wind")
def true_wind_cmd(
    aws: str = typer.Option(..., help="Apparent wind speed, knots"),
    awa: str = typer.Option(..., help="Apparent wind angle off the bow, 0-359"),
    boat_speed: str = typer.Option(..., help="Boat speed, knots"),
    heading: str = typer.Option(..., help="True heading, 0-359"),
) -> None:
    """True wind speed and direction."""
    result = unwrap(true_wind(aws, awa, boat_speed, heading))
    typer.echo(f"True wind speed:     {result.speed_text} kn")
    typer.echo(f"True wind direction: {result.direction_text}°")


@app.command()
def turn(
    leg1: str = typer.Argument(..., help="Course of first leg, degrees"),
    leg2: str = typer.Argument(..., help="Course of second leg, degrees"),
    radius: str = typer.Option(..., "--radius", "-r", help="Turn radius, nm"),
) -> None:
    """Course alteration and parallel-index lead distance."""
    result = unwrap(turn_index(leg1, leg2, radius))
    typer.echo(f"Alteration:    {result.alteration_text}°")
    typer.echo(f"Lead distance: {result.lead_distance_text} nm")


@app.command()
def std(
    mode: str = typer.Argument(..., help="Speed, Time or Distance"),
    time: Optional[str] = typer.Option(None, "--time", "-t", help="Time, hours"),
    distance: Optional[str] = typer.Option(None, "--distance", "-d", help="Distance, nm"),
    speed: Optional[str] = typer.Option(None, "--speed", "-s", help="Speed, knots"),
) -> None:
    """Speed, time or distance from the other two."""
    result = unwrap(calculate_std(mode, time=time, distance=distance, speed=speed))
    typer.echo(result.text)


@app.command()
def rpm(
    current_rpm: str = typer.Argument(..., help="Current RPM"),
    current_speed: str = typer.Argument(..., help="Current speed, knots"),
    desired_speed: str = typer.Argument(..., help="Desired speed, knots"),
) -> None:
    """RPM required for a new speed."""
    result = unwrap(new_rpm(current_rpm, current_speed, desired_speed))
    typer.echo(result.text)
