"""Response envelope for Transitland collection queries.

The API wraps results in an object keyed by the resource noun, next to an
optional pagination block:

    {"meta": {"after": 5, "next": "https://..."}, "routes": [...]}

The noun is not known to the envelope ahead of time, so the body is parsed
in two phases: split off `meta`, then validate the single remaining list
against the requested resource type.
"""

from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from transitland.exceptions import DeserializationError, UnsupportedOperationError
from transitland.models.base import TransitlandObject

if TYPE_CHECKING:
    from transitland.data.request import Request

T = TypeVar("T", bound=TransitlandObject)


class Meta(BaseModel):
    """Pagination block of a response."""

    model_config = ConfigDict(extra="ignore")

    after: int | None = None  # cursor for the next page
    next: str | None = None  # fully-qualified URL of the next page


class SearchResponse(BaseModel, Generic[T]):
    """A page of typed results plus its pagination cursor."""

    meta: Meta | None = None
    rest: dict[str, list[T]] = {}

    # request context, set by the Request that produced this page
    _request: Any = PrivateAttr(default=None)
    _resource: Any = PrivateAttr(default=None)
    _api_key: str | None = PrivateAttr(default=None)

    @classmethod
    def from_payload(cls, resource: type[T], payload: Any) -> "SearchResponse[T]":
        """Build an envelope from a decoded JSON body.

        Args:
            resource: Entity type the result list holds.
            payload: Decoded JSON body.

        Returns:
            SearchResponse parametrized with the resource type.

        Raises:
            DeserializationError: If the body is not an object, a non-meta key
                does not hold a list, more than one result key is present, or
                an item fails validation.
        """
        if not isinstance(payload, dict):
            raise DeserializationError(
                "Expected a JSON object in response body",
                {"resource": resource.rest_noun, "got": type(payload).__name__},
            )

        body = dict(payload)
        meta = body.pop("meta", None)

        for key, value in body.items():
            if not isinstance(value, list):
                raise DeserializationError(
                    f"Expected a list under '{key}'",
                    {"resource": resource.rest_noun, "got": type(value).__name__},
                )
        if len(body) > 1:
            raise DeserializationError(
                "Ambiguous response: more than one result key",
                {"resource": resource.rest_noun, "keys": sorted(body)},
            )

        try:
            return SearchResponse[resource].model_validate({"meta": meta, "rest": body})
        except ValidationError as e:
            raise DeserializationError(
                f"Response does not match {resource.__name__}: {e.error_count()} error(s)",
                {"resource": resource.rest_noun, "errors": e.errors(include_url=False)},
            ) from e

    @property
    def key(self) -> str | None:
        """Resource noun the server used for the result list."""
        return next(iter(self.rest), None)

    def values(self) -> list[T]:
        """Results on this page, in server order."""
        return next(iter(self.rest.values()), [])

    @property
    def has_next(self) -> bool:
        return self.meta is not None and self.meta.next is not None

    def bind(self, request: "Request", resource: type[T], api_key: str) -> "SearchResponse[T]":
        """Attach the request context needed to follow pagination."""
        self._request = request
        self._resource = resource
        self._api_key = api_key
        return self

    async def search_next(self, client: httpx.AsyncClient | None = None) -> "SearchResponse[T] | None":
        """Fetch the page after this one by following `meta.next`.

        Args:
            client: Optional HTTP client to reuse.

        Returns:
            The next page, or None if this is the last page.

        Raises:
            UnsupportedOperationError: If this envelope was not produced by a
                Request and has no API key to reuse.
            TransportError: If the HTTP request fails.
            DeserializationError: If the next page has an unexpected shape.
        """
        if not self.has_next:
            return None
        if self._request is None or self._resource is None or self._api_key is None:
            raise UnsupportedOperationError(
                "Cannot follow pagination without request context",
                {"next": self.meta.next},
            )
        return await self._request.follow(self._resource, self.meta.next, self._api_key, client=client)
