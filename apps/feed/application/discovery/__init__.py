"""Nearby Discovery Application Layer."""

from apps.feed.application.discovery.dto import DiscoveryRequest, NearbyBusinessDTO
from apps.feed.application.discovery.ports import BusinessCriteria, BusinessReader
from apps.feed.application.discovery.queries import (
    GetNearbyBusinessesQuery,
    GetNearbyVideosQuery,
)
from apps.feed.application.discovery.services import parse_discovery_request

__all__ = [
    "DiscoveryRequest",
    "NearbyBusinessDTO",
    "BusinessCriteria",
    "BusinessReader",
    "GetNearbyBusinessesQuery",
    "GetNearbyVideosQuery",
    "parse_discovery_request",
]
