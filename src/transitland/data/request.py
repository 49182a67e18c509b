"""Request builder for Transitland REST queries.

A Request is an immutable bundle of query settings. Setters return a new
Request, so one value can be shared between concurrent callers.

Usage:
    request = Request().with_limit(50)
    page = await request.search(Route, "N Judah", api_key)
    for route in page.values():
        ...
"""

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field

from transitland.data.config import DEFAULT_PAGE_LIMIT, DEFAULT_TIMEOUT_SECONDS, TRANSITLAND_BASE_URL
from transitland.exceptions import DeserializationError, TransportError
from transitland.models.base import TransitlandObject
from transitland.models.common import Spec
from transitland.models.responses import SearchResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TransitlandObject)


class Request(BaseModel):
    """Query settings plus the operations that execute them."""

    model_config = ConfigDict(frozen=True)

    spec: Spec = Spec.GTFS
    after: int | None = None  # pagination cursor
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1)
    base_url: str = TRANSITLAND_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def with_spec(self, spec: Spec) -> "Request":
        return self.model_copy(update={"spec": spec})

    def with_limit(self, limit: int) -> "Request":
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        return self.model_copy(update={"limit": limit})

    def with_base_url(self, base_url: str) -> "Request":
        return self.model_copy(update={"base_url": base_url})

    def with_after(self, after: int | None) -> "Request":
        return self.model_copy(update={"after": after})

    def with_timeout(self, timeout: float) -> "Request":
        return self.model_copy(update={"timeout": timeout})

    async def search(
        self,
        resource: type[T],
        query: str,
        api_key: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> SearchResponse[T]:
        """Search a top-level collection.

        Args:
            resource: Entity type to search, e.g. Route.
            query: Free-text search string.
            api_key: Transitland API key.
            client: Optional HTTP client to reuse; a new one is created and
                closed per call otherwise.

        Returns:
            SearchResponse with the matching page of results.

        Raises:
            TransportError: If the HTTP request fails or returns non-2xx.
            DeserializationError: If the body does not match the resource.
        """
        return await self._search(resource, resource.query_path(), query, api_key, client)

    async def search_with_parent(
        self,
        resource: type[T],
        parent: int,
        query: str,
        api_key: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> SearchResponse[T]:
        """Search a collection nested under a parent resource (trips of a route)."""
        return await self._search(resource, resource.query_path(parent), query, api_key, client)

    async def get(
        self,
        resource: type[T],
        key: str | int,
        api_key: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> T | None:
        """Look up a single top-level resource by ID or OnestopID.

        Returns:
            The matching entity, or None if the service returned no results.

        Raises:
            TransportError: If the HTTP request fails or returns non-2xx.
            DeserializationError: If the body does not match the resource.
        """
        return await self._get(resource, resource.by_id_path(), key, api_key, client)

    async def get_with_parent(
        self,
        resource: type[T],
        parent: int,
        key: str | int,
        api_key: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> T | None:
        """Look up a single nested resource under its parent."""
        return await self._get(resource, resource.by_id_path(parent), key, api_key, client)

    async def follow(
        self,
        resource: type[T],
        url: str,
        api_key: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> SearchResponse[T]:
        """Fetch a page from a fully-qualified `meta.next` URL."""
        # the next URL already carries the cursor and original filters
        payload = await self._send(url, {"apikey": api_key}, client)
        return SearchResponse.from_payload(resource, payload).bind(self, resource, api_key)

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path}"

    async def _search(
        self,
        resource: type[T],
        path: str,
        query: str,
        api_key: str,
        client: httpx.AsyncClient | None,
    ) -> SearchResponse[T]:
        params: dict[str, str | int] = {"apikey": api_key, "search": query, "limit": self.limit}
        if self.after is not None:
            params["after"] = self.after
        if resource.filters_by_spec:
            params["spec"] = self.spec.value

        payload = await self._send(self._url(path), params, client)
        response = SearchResponse.from_payload(resource, payload).bind(self, resource, api_key)
        logger.debug(f"Fetched {len(response.values())} {resource.rest_noun}")
        return response

    async def _get(
        self,
        resource: type[T],
        path: str,
        key: str | int,
        api_key: str,
        client: httpx.AsyncClient | None,
    ) -> T | None:
        # the key is a single path segment
        url = self._url(f"{path}/{quote(str(key), safe='')}")
        payload = await self._send(url, {"apikey": api_key, "limit": self.limit}, client)
        results = SearchResponse.from_payload(resource, payload).values()

        if not results:
            return None
        if len(results) > 1:
            # generated OnestopIDs can collide
            logger.warning(f"{len(results)} {resource.rest_noun} matched key {key}, using the first")
        return results[0]

    async def _send(
        self,
        url: str,
        params: dict[str, str | int],
        client: httpx.AsyncClient | None,
    ) -> Any:
        """Issue a GET and decode the JSON body.

        Raises:
            TransportError: If the HTTP request fails or returns non-2xx.
            DeserializationError: If the body is not JSON.
        """
        owned = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=self.timeout)

        # never log params, they carry the API key
        logger.debug(f"GET {url}")
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"Transitland returned HTTP {status_code} for {url}")
            raise TransportError(f"HTTP {status_code}", url=url, status_code=status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {type(e).__name__}")
            raise TransportError(f"{type(e).__name__}: {e}", url=url) from e
        finally:
            if owned:
                await client.aclose()

        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError("Response body is not valid JSON", {"url": url}) from e


async def search(resource: type[T], api_key: str, query: str) -> SearchResponse[T]:
    """Search a top-level collection with default request settings."""
    return await Request().search(resource, query, api_key)


async def get_by_key(resource: type[T], api_key: str, key: str | int) -> T | None:
    """Look up a top-level resource by key with default request settings."""
    return await Request().get(resource, key, api_key)
