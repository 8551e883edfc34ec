"""Shared output handlers for CLI commands."""

import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from viewcache.core.constants import ENGINE_KEYS, IS_NEW_KEY, UPDATE_COUNT_KEY, DisplayConstants
from viewcache.core.highlighting import highlight_text
from viewcache.core.viewport import Viewport

console = Console()

JSON_INDENT = 2


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _columns(records: list[dict[str, Any]]) -> list[str]:
    """Record keys shown as table columns, in first-seen order."""
    columns: list[str] = []
    for record in records:
        for key in record:
            if key in ENGINE_KEYS or key in columns:
                continue
            columns.append(key)
    return columns[: DisplayConstants.MAX_COLUMNS]


def _cell(value: Any) -> str:
    text = json.dumps(value, default=str) if isinstance(value, dict | list) else "" if value is None else str(value)
    if len(text) > DisplayConstants.MAX_CELL_LENGTH:
        text = text[: DisplayConstants.MAX_CELL_LENGTH - 3] + "..."
    return text


def build_viewport_table(viewport: Viewport) -> Table:
    """Rich table of the records currently displayed."""
    records = viewport.viewport
    columns = _columns(records)
    title = f"Search: {viewport.current_search}" if viewport.flags.is_searching else None

    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    for column in columns:
        table.add_column(column)
    table.add_column("", justify="left")

    patterns = [viewport.current_search] if viewport.flags.is_searching else []
    offset = viewport.pagination.first_item_index or 1
    for position, record in enumerate(records):
        marker = ""
        if record.get(IS_NEW_KEY):
            marker = "[green]new[/green]"
        elif record.get(UPDATE_COUNT_KEY):
            marker = f"[yellow]updated x{record[UPDATE_COUNT_KEY]}[/yellow]"
        cells = [highlight_text(_cell(record.get(column)), patterns) for column in columns]
        table.add_row(str(offset + position), *cells, marker)

    return table


def format_pagination(viewport: Viewport) -> Text:
    """Footer describing the displayed range and the page links."""
    pagination = viewport.pagination
    footer = Text()

    if not viewport.options.is_paginated:
        footer.append(f"Showing {len(viewport.viewport)} of {pagination.total_results} records")
        if pagination.has_more:
            footer.append("  (more available)", style="dim")
        return footer

    footer.append(
        f"Showing items {pagination.first_item_index} to {pagination.last_item_index} "
        f"of a total of {pagination.total_results}.  "
    )
    footer.append("‹ ", style="bold" if pagination.has_previous else "dim")
    for link in viewport.page_links():
        if link is None:
            footer.append("… ")
        elif link == pagination.page:
            footer.append(f"[{link}] ", style="bold reverse")
        else:
            footer.append(f"{link} ")
    footer.append("›", style="bold" if pagination.has_more else "dim")
    return footer


def print_viewport(viewport: Viewport) -> None:
    """Render the viewport and its pagination footer."""
    if not viewport.viewport:
        console.print("[yellow]No records to show.[/yellow]")
    else:
        console.print(build_viewport_table(viewport))
    console.print(format_pagination(viewport))


def handle_json_output(data: Any, output_path: Path | None = None) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output (can be any type)
        output_path: Optional file path to save output
    """
    json_content = json.dumps(data, indent=JSON_INDENT, default=str)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_content, encoding="utf-8")
        console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")
    else:
        print(json_content)
