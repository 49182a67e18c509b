"""Auxiliary value types shared by Transitland entities."""

from enum import Enum
from typing import Generic, TypeVar

from transitland.models.base import TransitlandModel

C = TypeVar("C")

PointCoordinates = tuple[float, float]  # (lon, lat)
PolygonCoordinates = list[list[tuple[float, float]]]


class Spec(str, Enum):
    """Types of feed data.

    GTFS: https://gtfs.org/reference/static/
    GTFS Realtime: https://gtfs.org/reference/realtime/v2
    GBFS: https://github.com/NABSA/gbfs
    MDS: https://github.com/openmobilityfoundation/mobility-data-specification
    """

    GTFS = "gtfs"
    GTFS_REALTIME = "gtfs-rt"
    GBFS = "gbfs"
    MDS = "mds"


class Urls(TransitlandModel):
    """URLs that provide data associated with a feed."""

    static_current: str | None = None
    static_historic: list[str] = []
    static_planned: str | None = None
    realtime_vehicle_positions: str | None = None
    realtime_trip_updates: str | None = None
    realtime_alerts: str | None = None


class License(TransitlandModel):
    """Licensing information for a feed.

    The permission fields hold "yes", "no" or "unknown".
    """

    spdx_identifier: str | None = None
    url: str | None = None
    use_without_attribution: str | None = None
    create_derived_product: str | None = None
    redistribution_allowed: str | None = None
    commercial_use_allowed: str | None = None
    share_alike_optional: str | None = None
    attribution_text: str | None = None
    attribution_instructions: str | None = None


class AuthorizationType(str, Enum):
    """Method for inserting an authorization secret into a feed request."""

    NONE = ""
    HEADER = "header"
    BASIC_AUTH = "basic_auth"
    QUERY_PARAM = "query_param"
    PATH_SEGMENT = "path_segment"


class Authorization(TransitlandModel):
    """Details on how to construct a request for a protected feed."""

    type: AuthorizationType | None = None
    param_name: str | None = None  # only set when type=query_param
    info_url: str


class Geometry(TransitlandModel, Generic[C]):
    """Geometry in GeoJSON format."""

    type: str
    coordinates: C


class FileMetadata(TransitlandModel):
    """Metadata for one text file in the root of a GTFS archive."""

    name: str  # e.g. stops.txt
    sha1: str
    header: str  # comma-separated header row, possibly cleaned up
    rows: int  # excluding header
    csv_like: bool
    size: int  # bytes


class Place(TransitlandModel):
    """Place associated with an agency."""

    city_name: str | None = None
    adm1_name: str | None = None  # state or province
    adm0_name: str | None = None  # country


class GTFSLevel(TransitlandModel):
    """GTFS `levels.txt` entity."""

    level_id: str
    level_name: str | None = None
    level_index: float | None = None


class StopTime(TransitlandModel):
    """GTFS `stop_times.txt` entity, with times as seconds since midnight."""

    arrival_time: int
    departure_time: int
    stop_sequence: int
    stop_headsign: str | None = None
    pickup_type: int | None = None
    drop_off_type: int | None = None
    timepoint: int | None = None
    shape_dist_traveled: float | None = None
    interpolated: int | None = None  # non-zero if times were interpolated on import


class Shape(TransitlandModel):
    """Shape for a trip."""

    shape_id: str
    generated: bool  # built from point-to-point stop locations


class Calendar(TransitlandModel):
    """GTFS `calendar` and `calendar_dates` entities combined.

    Weekday fields are 1 when service is scheduled on that day.
    """

    service_id: str | None = None
    start_date: str
    end_date: str
    added_dates: list[str] | None = None  # exception_type=1
    removed_dates: list[str] | None = None  # exception_type=2
    generated: bool | None = None
    monday: int
    tuesday: int
    wednesday: int
    thursday: int
    friday: int
    saturday: int
    sunday: int


class Frequency(TransitlandModel):
    """GTFS `frequencies.txt` entity."""

    start_time: int  # seconds since midnight
    end_time: int
    headway_secs: int
    exact_times: int
