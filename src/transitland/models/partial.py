"""Partial projections of entities embedded inside other responses.

These carry a subset of the full entity's fields. Never assume a partial
projection holds everything its full counterpart does; see
`transitland.models.entities` for the full shapes.
"""

from transitland.models.base import TransitlandModel
from transitland.models.common import Place, Spec


class FeedVersion(TransitlandModel):
    """Subset of `entities.FeedVersion`."""

    id: int | None = None
    sha1: str
    fetched_at: str
    url: str | None = None
    earliest_calendar_date: str | None = None
    latest_calendar_date: str | None = None


class Feed(TransitlandModel):
    """Subset of `entities.Feed`."""

    name: str | None = None
    onestop_id: str
    spec: Spec


class Operator(TransitlandModel):
    """Subset of `entities.Operator`."""

    onestop_id: str
    name: str
    short_name: str | None = None
    website: str | None = None
    tags: dict[str, str] | None = None


class Route(TransitlandModel):
    """Subset of `entities.Route`."""

    id: int
    route_id: str
    route_long_name: str | None = None
    route_short_name: str | None = None


class Agency(TransitlandModel):
    """Subset of `entities.Agency`."""

    id: int
    agency_id: str | None = None
    agency_name: str | None = None
    places: list[Place] | None = None
