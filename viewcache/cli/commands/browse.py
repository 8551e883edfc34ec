"""Browse command implementation."""

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from viewcache.cache.base import DiskCacheStore
from viewcache.cli.utils.connection import get_connection_settings, open_service, open_storage
from viewcache.cli.utils.options import (
    API_TOKEN_OPTION,
    ARRAY_ATTR_OPTION,
    BASE_URL_OPTION,
    PAGE_ONLY_OPTION,
    PAGE_SIZE_OPTION,
    PERSIST_OPTION,
    REVERSE_OPTION,
    SEARCH_OPTION,
    VERBOSE_OPTION,
)
from viewcache.cli.utils.output import configure_logging, print_viewport
from viewcache.config import load_settings
from viewcache.core.constants import DEFAULT_ARRAY_ATTR, CachingMode
from viewcache.core.viewport import Viewport
from viewcache.exceptions import ViewcacheError
from viewcache.models.options import ViewportOptions
from viewcache.models.result import OperationResult

console = Console()
logger = logging.getLogger(__name__)

COMMAND_HELP = (
    "[dim]n next · p previous · g N go to page · s TERM search · c clear search · r refresh · q quit[/dim]"
)


def _report(result: OperationResult) -> None:
    if not result.ok:
        console.print(f"[red]✗ {result.error}[/red]")


def _interact(viewport: Viewport) -> None:
    """Prompt for navigation commands until the user quits."""
    while True:
        print_viewport(viewport)
        console.print(COMMAND_HELP)
        command = typer.prompt(">", default="q", show_default=False).strip()
        action, _, argument = command.partition(" ")
        argument = argument.strip()

        if action == "q":
            break
        elif action == "n":
            result = viewport.next_page()
        elif action == "p":
            result = viewport.previous_page()
        elif action == "g":
            if not argument.isdigit():
                console.print("[red]✗ Usage: g PAGE_NUMBER[/red]")
                continue
            result = viewport.move_to_page(int(argument))
        elif (action == "c" or (action == "s" and not argument)) and not viewport.flags.is_searching:
            # Clearing restores the snapshot taken when a search began
            console.print("[yellow]No active search[/yellow]")
            continue
        elif action == "s":
            viewport.search_text = argument
            result = viewport.search()
        elif action == "c":
            result = viewport.clear_search()
        elif action == "r":
            result = viewport.refresh()
        else:
            console.print(f"[red]✗ Unknown command: {action}[/red]")
            continue

        _report(result)


def browse(
    resource: Annotated[str, typer.Argument(help="Path of the listed resource, e.g. /articles")],
    base_url: BASE_URL_OPTION = None,
    api_token: API_TOKEN_OPTION = None,
    page_size: PAGE_SIZE_OPTION = None,
    search: SEARCH_OPTION = None,
    page_only: PAGE_ONLY_OPTION = False,
    reverse: REVERSE_OPTION = False,
    persist: PERSIST_OPTION = None,
    array_attr: ARRAY_ATTR_OPTION = DEFAULT_ARRAY_ATTR,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Page through a remote resource interactively.

    The first page is loaded straight away; later pages come from the local
    cache when they were fetched before. With --persist the cached first page
    is shown immediately on the next run while fresh data loads.
    """
    settings = load_settings()
    configure_logging(settings.log_level, verbose)
    base_url, api_token = get_connection_settings(base_url, api_token)

    try:
        options = ViewportOptions(
            page_size=page_size or settings.page_size,
            caching=CachingMode.PAGE_ONLY if page_only else CachingMode.FULL,
            reverse=reverse,
            array_attr=array_attr,
            storage_identifier=persist,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid options:[/red] {e}")
        raise typer.Exit(1) from None

    storage: DiskCacheStore | None = open_storage(settings) if persist else None
    try:
        with open_service(base_url, resource, api_token, settings) as service:
            viewport = Viewport(service, options, storage=storage, autoload=False)
            viewport.load_more().unwrap()
            if search:
                viewport.search_text = search
                viewport.search().unwrap()
            _interact(viewport)
    except ViewcacheError as e:
        logger.debug(f"browse failed: {e!r}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    finally:
        if storage is not None:
            storage.close()
