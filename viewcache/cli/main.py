"""Main CLI entry point for viewcache."""

import typer

from viewcache.cli.commands.browse import browse
from viewcache.cli.commands.cache import cache_app
from viewcache.core.constants import PACKAGE_VERSION

app = typer.Typer(
    name="viewcache",
    help="viewcache - Browse paginated record APIs through a local viewport cache",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"viewcache {PACKAGE_VERSION}")
        raise typer.Exit()


@app.callback()
def callback(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """
    viewcache CLI
    """


app.command("browse", help="Page through a remote resource interactively")(browse)
app.add_typer(cache_app, name="cache")


if __name__ == "__main__":
    app()
