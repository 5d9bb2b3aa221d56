from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from namefully.cli.utils import console, load_name, name_errors
from namefully.types import Namon


def stats_command(
    name: str = typer.Argument(..., help="Full name to describe"),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Named config from config/namefully.yml",
    ),
    order: Optional[str] = typer.Option(
        None,
        "--order",
        help="Name order of the input: first | last",
    ),
):
    """
    Show the parsed parts of a name and its character statistics.
    """
    with name_errors():
        namefully = load_name(name, config_name=config, order=order)

    parts = Table(title="Name Parts")
    parts.add_column("Part", style="bold")
    parts.add_column("Value")
    for namon in Namon:
        parts.add_row(namon.key, namefully.to_map()[namon.key] or "-")

    summary = namefully.stats()
    numbers = Table(title="Name Statistics")
    numbers.add_column("Metric", style="bold")
    numbers.add_column("Value", justify="right")
    numbers.add_row("Length", str(summary.length))
    numbers.add_row("Count", str(summary.count))
    numbers.add_row("Unique", str(summary.unique))
    numbers.add_row("Top", summary.top)
    numbers.add_row("Frequency", str(summary.frequency))

    console.print(parts)
    console.print(numbers)
