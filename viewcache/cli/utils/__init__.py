"""CLI utilities module."""

from viewcache.cli.utils.connection import get_connection_settings, open_service, open_storage
from viewcache.cli.utils.output import (
    build_viewport_table,
    configure_logging,
    format_pagination,
    handle_json_output,
    print_viewport,
)

__all__ = [
    "build_viewport_table",
    "configure_logging",
    "format_pagination",
    "get_connection_settings",
    "handle_json_output",
    "open_service",
    "open_storage",
    "print_viewport",
]
