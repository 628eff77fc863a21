"""Discovery Request Parsing."""

from __future__ import annotations

from apps.feed.application.discovery.dto import DiscoveryRequest
from apps.feed.application.feed.services import parse_category, parse_search_area


def parse_discovery_request(
    *,
    lat: str | None = None,
    lng: str | None = None,
    radius: str | None = None,
    category: str | None = None,
) -> DiscoveryRequest:
    """GET /businesses, GET /videos 쿼리 파라미터 검증."""
    return DiscoveryRequest(
        area=parse_search_area(lat, lng, radius, radius_field="radius"),
        category=parse_category(category),
    )
