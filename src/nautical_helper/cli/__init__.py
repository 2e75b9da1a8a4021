"""Command line interface."""
from __future__ import annotations

from typing import TypeVar

import typer

from nautical_helper.core.results import Invalid

T = TypeVar("T")


def unwrap(result: T | Invalid) -> T:
    """Return a successful result, or print ``<text>: <message>`` to stderr and exit 1."""
    if isinstance(result, Invalid):
        typer.echo(f"{result.text}: {result.message}", err=True)
        raise typer.Exit(1)
    return result
