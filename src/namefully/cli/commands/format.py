from __future__ import annotations

from typing import Optional

import typer

from namefully.cli.utils import console, load_name, name_errors


def format_command(
    name: str = typer.Argument(..., help="Full name, e.g. 'Mr John Ben Smith Ph.D'"),
    pattern: str = typer.Option(
        "official",
        "--pattern",
        "-p",
        help="Format pattern or one of: short, long, public, official",
    ),
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
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Validate name content instead of bypassing it",
    ),
):
    """
    Render a name through a format pattern.
    """
    with name_errors():
        namefully = load_name(name, config_name=config, order=order, strict=strict)
        console.print(namefully.format(pattern), highlight=False)
