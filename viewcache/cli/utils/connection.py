"""Connection and storage helpers for CLI commands."""

import typer
from rich.console import Console

from viewcache.api.client import HTTPObjectService
from viewcache.cache.base import DiskCacheStore
from viewcache.config import Settings, load_settings
from viewcache.core.constants import STORAGE_NAMESPACE

console = Console()


def get_connection_settings(
    base_url: str | None = None,
    api_token: str | None = None,
) -> tuple[str, str | None]:
    """Get the API root and token from parameters, environment or prompts.

    Args:
        base_url: Optional API root override
        api_token: Optional token override

    Returns:
        Tuple of (base_url, api_token)
    """
    settings = load_settings()

    final_base_url = base_url or settings.base_url
    if not final_base_url:
        final_base_url = typer.prompt("API base URL")

    final_token = api_token
    if not final_token and settings.api_token:
        final_token = settings.api_token.get_secret_value()

    return final_base_url, final_token


def open_service(base_url: str, resource: str, api_token: str | None, settings: Settings) -> HTTPObjectService:
    """HTTP service for ``resource``; use it as a context manager."""
    return HTTPObjectService(base_url, resource, api_token=api_token, timeout=settings.request_timeout)


def open_storage(settings: Settings | None = None) -> DiskCacheStore:
    """DiskCache store holding persisted viewports."""
    settings = settings or load_settings()
    return DiskCacheStore(STORAGE_NAMESPACE, cache_dir=settings.cache_dir)
