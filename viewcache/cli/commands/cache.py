"""Persisted viewport cache commands."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from viewcache.cli.utils.connection import open_storage
from viewcache.cli.utils.options import ARRAY_ATTR_OPTION, FORCE_OPTION, JSON_OPTION
from viewcache.cli.utils.output import handle_json_output
from viewcache.core.constants import DEFAULT_ARRAY_ATTR
from viewcache.models.cache import CacheEntryInfo

console = Console()

cache_app = typer.Typer(help="Inspect or clear persisted viewports", no_args_is_help=True)


@cache_app.command("show")
def show_cache(
    identifier: Annotated[str | None, typer.Argument(help="Persisted viewport identifier")] = None,
    array_attr: ARRAY_ATTR_OPTION = DEFAULT_ARRAY_ATTR,
    as_json: JSON_OPTION = False,
) -> None:
    """Summarise persisted viewports, or print one of them."""
    with open_storage() as storage:
        keys = [identifier] if identifier else storage.keys()
        if not keys:
            console.print("[yellow]No persisted viewports found.[/yellow]")
            return

        payloads = {key: storage.get(key) for key in keys}

    if identifier and payloads[identifier] is None:
        console.print(f"[yellow]No persisted viewport named '{identifier}'.[/yellow]")
        raise typer.Exit(1)

    if as_json:
        handle_json_output(payloads[identifier] if identifier else payloads)
        return

    table = Table(title="Persisted viewports")
    table.add_column("Identifier")
    table.add_column("Shape")
    table.add_column("Records", justify="right")
    table.add_column("More on server")
    table.add_column("Total", justify="right")

    for key, payload in payloads.items():
        if payload is None:
            continue
        info = CacheEntryInfo.from_payload(key, payload, array_attr)
        table.add_row(
            info.key,
            "envelope" if info.is_envelope else "list",
            str(info.record_count),
            "yes" if info.has_next else "no",
            "" if info.total_results is None else str(info.total_results),
        )

    console.print(table)


@cache_app.command("clear")
def clear_cache(
    identifier: Annotated[str | None, typer.Argument(help="Persisted viewport identifier")] = None,
    force: FORCE_OPTION = False,
) -> None:
    """Delete one persisted viewport, or all of them."""
    with open_storage() as storage:
        if identifier:
            if storage.delete(identifier):
                console.print(f"[green]✓ Removed persisted viewport '{identifier}'[/green]")
            else:
                console.print(f"[yellow]No persisted viewport named '{identifier}'.[/yellow]")
            return

        if not force and not typer.confirm(f"Remove all {len(storage)} persisted viewports?", default=False):
            console.print("[yellow]Nothing removed[/yellow]")
            return

        storage.clear()
        console.print("[green]✓ Cleared all persisted viewports[/green]")
