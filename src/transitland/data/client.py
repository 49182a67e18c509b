from typing import TypeVar

import httpx

from transitland.data.config import TransitlandConfig
from transitland.data.request import Request
from transitland.exceptions import ConfigurationError
from transitland.models.base import TransitlandObject
from transitland.models.responses import SearchResponse

T = TypeVar("T", bound=TransitlandObject)


class TransitlandClient:
    """Async client for the Transitland REST API sharing one HTTP connection pool.

    Usage:
        async with TransitlandClient(config) as client:
            page = await client.search(Route, "N Judah")
            trips = await client.search(Trip, "Downtown", parent=page.values()[0].id)
    """

    def __init__(self, config: TransitlandConfig):
        """Initialize the client.

        Args:
            config: Configuration with API key, base URL and defaults.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if not config.api_key:
            raise ConfigurationError("No Transitland API key configured (set TRANSITLAND_API_KEY)")
        self._config = config
        self._api_key: str = config.api_key
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TransitlandClient":
        """Enter async context - create HTTP client."""
        self._client = httpx.AsyncClient(timeout=self._config.timeout_seconds)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def default_request(self) -> Request:
        """Request settings derived from the configuration."""
        return Request(
            limit=self._config.page_limit,
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
        )

    def _require_client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")
        return self._client

    async def search(
        self,
        resource: type[T],
        query: str,
        *,
        parent: int | None = None,
        request: Request | None = None,
    ) -> SearchResponse[T]:
        """Search a collection, nested under `parent` when given.

        Args:
            resource: Entity type to search.
            query: Free-text search string.
            parent: Parent resource key for nested resources (route ID for trips).
            request: Request settings; defaults to `default_request`.

        Returns:
            SearchResponse with the first page of results.

        Raises:
            RuntimeError: If client not initialized.
            TransportError: If the HTTP request fails.
            DeserializationError: If the body does not match the resource.
        """
        client = self._require_client()
        request = request or self.default_request

        if parent is None:
            return await request.search(resource, query, self._api_key, client=client)
        return await request.search_with_parent(resource, parent, query, self._api_key, client=client)

    async def get(
        self,
        resource: type[T],
        key: str | int,
        *,
        parent: int | None = None,
        request: Request | None = None,
    ) -> T | None:
        """Fetch a single resource by ID or OnestopID.

        Returns:
            The entity, or None if the service returned no match.

        Raises:
            RuntimeError: If client not initialized.
            TransportError: If the HTTP request fails.
            DeserializationError: If the body does not match the resource.
        """
        client = self._require_client()
        request = request or self.default_request

        if parent is None:
            return await request.get(resource, key, self._api_key, client=client)
        return await request.get_with_parent(resource, parent, key, self._api_key, client=client)

    async def search_next(self, response: SearchResponse[T]) -> SearchResponse[T] | None:
        """Fetch the page following `response`, or None on the last page.

        Raises:
            RuntimeError: If client not initialized.
        """
        client = self._require_client()
        return await response.search_next(client=client)
