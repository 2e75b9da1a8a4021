"""Watch schedule commands."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

import typer

from nautical_helper.cli import unwrap
from nautical_helper.core.config import get_config
from nautical_helper.watch.schedule import CustomMaxWatch, Halfway, format_period, generate_schedule, time_underway

app = typer.Typer(help="Watch schedules for two operators")

_DATE_FORMATS = ["%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M:%S"]


@app.command()
def schedule(
    start: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="Start, e.g. 2024-01-01T00:00"),
    end: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="End, e.g. 2024-01-01T18:00"),
    max_watch: Optional[str] = typer.Option(
        None, "--max-watch", "-m", help="Max watch hours (custom policy). Omit for a halfway split."
    ),
    custom: bool = typer.Option(False, "--custom", help="Custom policy with the configured default max watch"),
) -> None:
    """Split the passage between two operators.

    Examples:
        nautical-helper watch schedule 2024-01-01T00:00 2024-01-01T10:00
        nautical-helper watch schedule 2024-01-01T00:00 2024-01-01T18:00 -m 6    # 3/6/6/3
    """
    cfg = get_config().watch
    if max_watch is not None:
        policy = CustomMaxWatch(max_watch)
    elif custom:
        policy = CustomMaxWatch(cfg.default_max_watch_hours)
    else:
        policy = Halfway()

    result = unwrap(generate_schedule(start, end, policy))

    typer.echo(f"Total Time Underway: {result.total_time_text}")
    typer.echo("Watch Schedule:")
    for period in result:
        typer.echo(format_period(period, cfg.operator_names))


@app.command()
def underway(
    start: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="Start date and time"),
    end: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="End date and time"),
) -> None:
    """Total time underway between two instants."""
    typer.echo(unwrap(time_underway(start, end)))
