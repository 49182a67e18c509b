"""Typed async client for the Transitland v2 REST API."""

from transitland.data.client import TransitlandClient
from transitland.data.config import TransitlandConfig, get_config
from transitland.data.request import Request, get_by_key, search
from transitland.exceptions import (
    ConfigurationError,
    DeserializationError,
    TransitlandError,
    TransportError,
    UnsupportedOperationError,
)
from transitland.models.common import Spec
from transitland.models.entities import Agency, Feed, FeedVersion, Operator, Route, Stop, Trip
from transitland.models.responses import Meta, SearchResponse

__version__ = "0.1.0"

__all__ = [
    # Client
    "TransitlandClient",
    "Request",
    "search",
    "get_by_key",
    # Config
    "TransitlandConfig",
    "get_config",
    # Entities
    "Feed",
    "FeedVersion",
    "Agency",
    "Operator",
    "Route",
    "Stop",
    "Trip",
    "Spec",
    # Envelope
    "Meta",
    "SearchResponse",
    # Errors
    "TransitlandError",
    "TransportError",
    "DeserializationError",
    "UnsupportedOperationError",
    "ConfigurationError",
]
