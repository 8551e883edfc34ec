"""HTTP implementation of the remote record source."""

import logging
from typing import Any

import backoff
import requests

from viewcache.api.base import CreateCallback, QueryCallback
from viewcache.core.constants import APIConstants
from viewcache.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    TimeoutError,
)


class HTTPObjectService:
    """Record source backed by a paginated REST resource."""

    def __init__(
        self,
        base_url: str,
        resource: str,
        api_token: str | None = None,
        timeout: float = APIConstants.REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the service.

        Args:
            base_url: API root, e.g. https://api.example.com/v1
            resource: Path of the listed resource, e.g. /articles
            api_token: Optional bearer token
            timeout: Request timeout in seconds

        """
        self.logger = logging.getLogger(__name__)

        self.base_url = base_url.rstrip("/")
        self.resource = "/" + resource.strip("/")
        self.api_token = api_token
        self.timeout = timeout
        self.session: requests.Session | None = None

        self.logger.debug(f"HTTPObjectService for {self.base_url}{self.resource}")

    def __enter__(self) -> "HTTPObjectService":
        """Enter context."""
        self.logger.info("Opening client session")
        self.session = requests.Session()
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context."""
        self.logger.info("Closing client session")
        if self.session:
            self.session.close()
            self.session = None
        else:
            self.logger.warning("No session to close")

    @property
    def headers(self) -> dict[str, str]:
        """Get request headers."""
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    @backoff.on_exception(
        backoff.expo,
        (requests.exceptions.ConnectionError,),
        max_tries=APIConstants.BACKOFF_MAX_TRIES,
        factor=APIConstants.BACKOFF_FACTOR,
        max_value=APIConstants.BACKOFF_MAX_VALUE,
    )
    def _make_request(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request with retry logic.

        Args:
            method: HTTP method
            params: Query parameters
            payload: JSON body

        Returns:
            Decoded response body

        """
        if not self.session:
            raise RuntimeError("Client not initialized. Use context manager.")

        url = f"{self.base_url}{self.resource}"
        method_name = f"{method} {self.resource}"

        self.logger.debug(f"Making request: {method_name} {params or {}}")

        try:
            response = self.session.request(
                method, url, headers=self.headers, params=params, json=payload, timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            raise TimeoutError(method_name, self.timeout) from None

        if response.status_code in (200, 201):
            return response.json()

        response_text = response.text

        # Map status codes to exceptions
        error_map = {
            401: lambda: AuthenticationError(f"Unauthorized access in {method_name}", response_text),
            404: lambda: NotFoundError(f"Resource not found in {method_name}", response_text),
            408: lambda: TimeoutError(method_name, self.timeout),
            429: lambda: RateLimitError(
                f"Rate limit exceeded in {method_name}",
                response_text,
                int(response.headers.get("Retry-After", 0)) if response.headers.get("Retry-After") else None,
            ),
        }

        if response.status_code in error_map:
            raise error_map[response.status_code]()
        elif 500 <= response.status_code < 600:
            raise APIError(response.status_code, f"Server error in {method_name}", response_text)
        else:
            raise APIError(
                response.status_code,
                f"Unexpected response status {response.status_code} in {method_name}",
                response_text,
            )

    def query(self, params: dict[str, Any], callback: QueryCallback) -> None:
        """Fetch one page and hand the decoded body to ``callback``."""
        self.logger.info(f"Fetching page {params.get('page')} of {self.resource}")
        data = self._make_request("GET", params=params)
        callback(data)

    def create(self, callback: CreateCallback, payload: dict[str, Any] | None = None) -> None:
        """Create a record and hand it to ``callback``."""
        self.logger.info(f"Creating record in {self.resource}")
        record = self._make_request("POST", payload=payload or {})
        callback(record)
