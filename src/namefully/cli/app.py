from __future__ import annotations

import typer

from namefully.cli.commands.format import format_command
from namefully.cli.commands.stats import stats_command
from namefully.cli.commands.zip import zip_command
from namefully.logging import configure_logging

app = typer.Typer(
    name="namefully",
    help="Parse, format and abbreviate person names",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parsing steps at DEBUG level"),
):
    if verbose:
        configure_logging(verbose=True)


app.command("format")(format_command)
app.command("stats")(stats_command)
app.command("zip")(zip_command)


def main():
    app()


if __name__ == "__main__":
    main()
