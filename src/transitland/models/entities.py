"""Queryable Transitland entities.

Full shapes as returned by each entity's own endpoint:
https://www.transit.land/documentation/rest-api/
"""

from typing import Any

from transitland.models import partial
from transitland.models.base import TransitlandModel, TransitlandObject
from transitland.models.common import (
    Authorization,
    Calendar,
    FileMetadata,
    Frequency,
    Geometry,
    GTFSLevel,
    License,
    Place,
    PointCoordinates,
    PolygonCoordinates,
    Shape,
    Spec,
    StopTime,
    Urls,
)


class FeedState(TransitlandModel):
    """Current state of a feed: active version and fetch history."""

    last_fetch_error: str | None = None  # empty string if no error
    last_fetched_at: str | None = None
    last_successful_fetch_at: str | None = None
    feed_version: partial.FeedVersion | None = None


class Feed(TransitlandObject):
    """Details on how to access transit information for a given feed.

    Includes URLs to data sources in various formats, license information,
    related feeds, details on how to make authorized requests, and the feed
    version archive.
    """

    rest_noun = "feeds"
    filters_by_spec = True

    id: int
    onestop_id: str
    name: str | None = None
    spec: Spec
    # feeds sharing a namespace can be combined without rewriting entity IDs
    feed_namespace_id: str | None = None
    associated_feeds: list[str] | None = None
    languages: list[str] | None = None
    urls: Urls
    license: License
    authorization: Authorization
    geometry: Geometry[PolygonCoordinates] | None = None
    feed_state: FeedState
    feed_versions: list[partial.FeedVersion] = []


class FeedVersion(TransitlandObject):
    """A GTFS archive published at a particular point in time.

    Feed versions are addressed by the SHA1 checksum of the archive and
    include data derived from it: service levels, file summaries, a convex
    hull of all stops.
    """

    rest_noun = "feed_versions"

    id: int | None = None
    sha1: str | None = None
    fetched_at: str
    url: str | None = None
    earliest_calendar_date: str | None = None
    latest_calendar_date: str | None = None
    files: list[FileMetadata] | None = None
    service_levels: list[Calendar] = []
    feed: partial.Feed


class Agency(TransitlandObject):
    """A GTFS `agency.txt` entity imported from a single feed version.

    Metadata and routes cover only that agency in that feed version.
    """

    rest_noun = "agencies"

    id: int
    onestop_id: str | None = None
    agency_id: str | None = None
    agency_name: str | None = None
    agency_url: str | None = None
    agency_timezone: str | None = None
    agency_lang: str | None = None
    agency_phone: str | None = None
    agency_fare_url: str | None = None
    agency_email: str | None = None
    geometry: Geometry[PolygonCoordinates] | None = None
    operator: partial.Operator | None = None  # only when matched
    places: list[Place] | None = None
    feed_version: partial.FeedVersion | None = None
    routes: list[partial.Route] | None = None


class Operator(TransitlandObject):
    """A higher-level grouping of agencies, possibly across several feeds.

    Operators are matched with agencies through their associated feeds.
    """

    rest_noun = "operators"

    id: int
    onestop_id: str
    name: str | None = None
    short_name: str | None = None
    website: str | None = None
    tags: dict[str, str] | None = None
    agencies: list[partial.Agency] | None = None


class Route(TransitlandObject):
    """A GTFS `routes.txt` entity.

    Route OnestopIDs are generated from a geohash of the visited stops and
    the route name, so two similar routes may share one; a lookup by
    OnestopID can then match more than one route.
    """

    rest_noun = "routes"

    id: int
    onestop_id: str
    route_id: str | None = None
    route_type: int | None = None
    route_short_name: str | None = None
    route_long_name: str | None = None
    route_color: str | None = None
    route_text_color: str | None = None
    route_sort_order: int | None = None
    agency: partial.Agency
    feed_version: partial.FeedVersion | None = None
    route_stops: list[dict[str, Any]] | None = None


class Stop(TransitlandObject):
    """A GTFS `stops.txt` entity.

    Stops with location_type=0 are where vehicles make scheduled stops; other
    types describe stations, entrances, pathway nodes and boarding areas.
    As with routes, OnestopIDs are generated and may collide.
    """

    rest_noun = "stops"

    id: int
    onestop_id: str | None = None
    stop_id: str | None = None
    stop_name: str | None = None
    stop_desc: str | None = None
    stop_url: str | None = None
    stop_timezone: str | None = None
    stop_code: str | None = None
    zone_id: str | None = None
    wheelchair_boarding: int | None = None
    location_type: int | None = None
    # shape differs between stop endpoints, kept untyped
    feed_version: dict[str, Any] = {}
    level: GTFSLevel | None = None
    route_stops: list[dict[str, Any]] = []
    geometry: Geometry[PointCoordinates]


class Trip(TransitlandObject):
    """A GTFS `trips.txt` entity.

    Trips carry their shape, calendar, frequencies and stop times inline;
    those have no endpoints of their own. Trips are only reachable under
    their route: `routes/{route_id}/trips`.
    """

    rest_noun = "trips"

    id: int
    trip_id: str | None = None
    trip_headsign: str | None = None
    trip_short_name: str | None = None
    direction_id: int | None = None
    block_id: str | None = None
    wheelchair_accessible: int | None = None
    bikes_allowed: int | None = None
    stop_pattern_id: int | None = None  # unique within the feed version
    stop_times: list[StopTime] | None = None
    shape: Shape | None = None
    calendar: Calendar
    frequencies: list[Frequency] = []
    route: partial.Route | None = None
    feed_version: partial.FeedVersion

    @classmethod
    def query_path(cls, parent: int | None = None) -> str:
        if parent is None:
            raise ValueError("Trip is nested under a route and requires a route key")
        return f"routes/{parent}/{cls.rest_noun}"

    @classmethod
    def by_id_path(cls, parent: int | None = None) -> str:
        # no separate by-id route; the key is appended to the collection path
        return cls.query_path(parent)
