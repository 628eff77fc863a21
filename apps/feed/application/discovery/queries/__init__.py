"""Discovery Queries."""

from apps.feed.application.discovery.queries.get_nearby_businesses import (
    GetNearbyBusinessesQuery,
)
from apps.feed.application.discovery.queries.get_nearby_videos import GetNearbyVideosQuery

__all__ = ["GetNearbyBusinessesQuery", "GetNearbyVideosQuery"]
