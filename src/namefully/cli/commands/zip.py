from __future__ import annotations

from typing import Optional

import typer

from namefully.cli.utils import console, load_name, name_errors
from namefully.config import coerce_enum
from namefully.types import Flat


def zip_command(
    name: str = typer.Argument(..., help="Full name to abbreviate"),
    by: str = typer.Option(
        Flat.MID_LAST.value,
        "--by",
        "-b",
        help="Parts to abbreviate: firstName, middleName, lastName, firstMid, midLast, all",
    ),
    period: bool = typer.Option(
        True,
        "--period/--no-period",
        help="Follow each initial with a period",
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
):
    """
    Abbreviate a name to its initials.
    """
    with name_errors():
        variant = coerce_enum(Flat, by)
        namefully = load_name(name, config_name=config, order=order)
        console.print(namefully.zip(by=variant, with_period=period), highlight=False)
