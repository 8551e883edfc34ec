"""Shared CLI options for commands."""

from typing import Annotated

import typer

BASE_URL_OPTION = Annotated[
    str | None,
    typer.Option(
        "--base-url",
        "-u",
        help="API root URL (auto-detected from VIEWCACHE_BASE_URL env var)",
    ),
]

API_TOKEN_OPTION = Annotated[
    str | None,
    typer.Option(
        "--token",
        "-t",
        help="Bearer token (auto-detected from VIEWCACHE_API_TOKEN env var)",
        hide_input=True,
    ),
]

PAGE_SIZE_OPTION = Annotated[
    int | None,
    typer.Option(
        "--page-size",
        "-n",
        help="Records per page (defaults to VIEWCACHE_PAGE_SIZE)",
        min=1,
    ),
]

SEARCH_OPTION = Annotated[
    str | None,
    typer.Option(
        "--search",
        "-s",
        help="Start with the results of this search term",
    ),
]

PAGE_ONLY_OPTION = Annotated[
    bool,
    typer.Option(
        "--page-only",
        help="Keep only the current page cached; enables jumping to any page",
    ),
]

REVERSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--reverse",
        help="Show newest records last",
    ),
]

PERSIST_OPTION = Annotated[
    str | None,
    typer.Option(
        "--persist",
        "-p",
        help="Persist the viewport under this identifier for warm starts",
    ),
]

ARRAY_ATTR_OPTION = Annotated[
    str,
    typer.Option(
        "--array-attr",
        help="Response key holding the record list",
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]

JSON_OPTION = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the raw persisted payload as JSON",
    ),
]

FORCE_OPTION = Annotated[
    bool,
    typer.Option(
        "--force",
        "-f",
        help="Do not ask for confirmation",
    ),
]
