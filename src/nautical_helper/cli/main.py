"""Typer CLI for the navigation calculators and watch scheduler."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from nautical_helper import __version__
from nautical_helper.cli import calc_cmd, watch_cmd

app = typer.Typer(help="Navigation calculators and watch scheduling")
app.add_typer(calc_cmd.app, name="calc")
app.add_typer(watch_cmd.app, name="watch")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calculation details"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    if config is not None:
        from nautical_helper.core.config import reload_config

        reload_config(config)


@app.command()
def info() -> None:
    """Show the active configuration."""
    from nautical_helper.core.config import get_config

    cfg = get_config()
    typer.echo(f"=== Nautical Helper {__version__} ===")
    typer.echo(f"Drift angles:  {', '.join(f'{a:g}' for a in cfg.swept_path.preset_drift_angles_deg)}")
    typer.echo(f"Regulatory UKC: {cfg.squat.regulatory_ukc_m:.2f} m")
    typer.echo(f"Operators:     {' / '.join(cfg.watch.operator_names)}")
    typer.echo(f"Max watch:     {cfg.watch.default_max_watch_hours:g} h")


if __name__ == "__main__":
    app()
