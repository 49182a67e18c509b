"""Shared sample payloads shaped like Transitland REST responses."""

from collections.abc import Callable
from typing import Any

import pytest

SHA1 = "e535eb2b3b7f6a3a7b9b4bd7a3b8a0c0d2b9e1f4"

Factory = Callable[..., dict[str, Any]]


def create_partial_feed_version(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 10,
        "sha1": SHA1,
        "fetched_at": "2021-05-01T00:00:00Z",
        "url": "https://www.bart.gov/dev/schedules/google_transit.zip",
        "earliest_calendar_date": "2021-05-01",
        "latest_calendar_date": "2021-12-31",
    }
    payload.update(overrides)
    return payload


def create_feed(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 1,
        "onestop_id": "f-9q9-bart",
        "name": "Bay Area Rapid Transit",
        "spec": "gtfs",
        "feed_namespace_id": "",
        "associated_feeds": ["f-9q9-bart~rt"],
        "languages": ["en"],
        "urls": {
            "static_current": "https://www.bart.gov/dev/schedules/google_transit.zip",
            "static_historic": [],
        },
        "license": {
            "spdx_identifier": "",
            "url": "https://www.bart.gov/schedules/developers/developer-license-agreement",
            "use_without_attribution": "yes",
            "create_derived_product": "yes",
            "redistribution_allowed": "unknown",
        },
        "authorization": {"type": "", "param_name": "", "info_url": ""},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[-122.4, 37.7], [-122.0, 37.7], [-122.0, 38.0], [-122.4, 37.7]]],
        },
        "feed_state": {
            "last_fetch_error": "",
            "last_fetched_at": "2021-05-01T00:00:00Z",
            "last_successful_fetch_at": "2021-05-01T00:00:00Z",
            "feed_version": create_partial_feed_version(),
        },
        "feed_versions": [create_partial_feed_version()],
    }
    payload.update(overrides)
    return payload


def create_route(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 1,
        "onestop_id": "r-9q8y-n",
        "route_id": "N",
        "route_type": 0,
        "route_short_name": "N",
        "route_long_name": "Judah",
        "route_color": "005B95",
        "route_text_color": "FFFFFF",
        "route_sort_order": None,
        "agency": {"id": 7, "agency_id": "SFMTA", "agency_name": "San Francisco Municipal Transportation Agency"},
        "feed_version": create_partial_feed_version(),
        "route_stops": [{"stop": {"id": 3, "stop_id": "4448"}}],
    }
    payload.update(overrides)
    return payload


def create_stop(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 3,
        "onestop_id": "s-9q8yy-judah~9thave",
        "stop_id": "4448",
        "stop_name": "Judah St & 9th Ave",
        "stop_code": "14448",
        "location_type": 0,
        "wheelchair_boarding": 1,
        "feed_version": {"id": 10, "sha1": SHA1},
        "level": None,
        "route_stops": [{"route": {"id": 1, "route_short_name": "N"}}],
        "geometry": {"type": "Point", "coordinates": [-122.466, 37.762]},
    }
    payload.update(overrides)
    return payload


def create_trip(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 100,
        "trip_id": "9870123",
        "trip_headsign": "Ocean Beach",
        "direction_id": 0,
        "block_id": "N01",
        "stop_pattern_id": 4,
        "stop_times": [
            {
                "arrival_time": 28800,
                "departure_time": 28830,
                "stop_sequence": 1,
                "stop_headsign": None,
                "pickup_type": 0,
                "drop_off_type": 0,
                "timepoint": 1,
                "shape_dist_traveled": 0.0,
                "interpolated": 0,
            }
        ],
        "shape": {"shape_id": "183", "generated": False},
        "calendar": {
            "service_id": "1",
            "start_date": "2021-05-01",
            "end_date": "2021-12-31",
            "added_dates": [],
            "removed_dates": ["2021-07-04"],
            "generated": False,
            "monday": 1,
            "tuesday": 1,
            "wednesday": 1,
            "thursday": 1,
            "friday": 1,
            "saturday": 0,
            "sunday": 0,
        },
        "frequencies": [{"start_time": 21600, "end_time": 36000, "headway_secs": 600, "exact_times": 0}],
        "route": {"id": 1, "route_id": "N", "route_short_name": "N", "route_long_name": "Judah"},
        "feed_version": create_partial_feed_version(),
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def feed_payload() -> Factory:
    return create_feed


@pytest.fixture
def route_payload() -> Factory:
    return create_route


@pytest.fixture
def stop_payload() -> Factory:
    return create_stop


@pytest.fixture
def trip_payload() -> Factory:
    return create_trip


@pytest.fixture
def feed_version_payload() -> Factory:
    return create_partial_feed_version
