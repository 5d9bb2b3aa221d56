from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.console import Console

from namefully.config import Config, ConfigRegistry, coerce_enum
from namefully.core.exceptions import NameException
from namefully.logging import get_logger
from namefully.namefully import Namefully
from namefully.types import NameOrder

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

_ORDER_ALIASES = {
    "first": NameOrder.FIRST_NAME,
    "last": NameOrder.LAST_NAME,
}


def resolve_config(
    config_name: Optional[str] = None,
    *,
    order: Optional[str] = None,
    strict: bool = False,
    registry: Optional[ConfigRegistry] = None,
) -> Config:
    """
    Pick the named config from the settings (or the default one) and apply
    the command-line overrides on top of it.
    """
    registry = registry or ConfigRegistry.from_settings()
    config = registry.get(config_name) if config_name else Config()

    overrides = {}
    if order:
        overrides["ordered_by"] = _ORDER_ALIASES.get(order.lower()) or coerce_enum(NameOrder, order)
    if strict:
        overrides["bypass"] = False

    logger.debug("CLI config %r with overrides %s", config.name, overrides)
    return config.merge(**overrides)


def load_name(
    raw: str,
    *,
    config_name: Optional[str] = None,
    order: Optional[str] = None,
    strict: bool = False,
) -> Namefully:
    return Namefully(raw, resolve_config(config_name, order=order, strict=strict))


@contextmanager
def name_errors() -> Iterator[None]:
    """
    Turn name and option errors into a red message and exit code 1.
    """
    try:
        yield
    except NameException as exc:
        err_console.print(f"[bold red]{exc.kind.name}[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        err_console.print(f"[bold red]ERROR[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
