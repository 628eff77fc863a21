"""HTTP Schemas."""

from apps.feed.presentation.http.schemas.common import ErrorResponse, HealthResponse
from apps.feed.presentation.http.schemas.feed import (
    BusinessEntry,
    FeedResponse,
    NearbyBusinessEntry,
    VideoEntry,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "BusinessEntry",
    "NearbyBusinessEntry",
    "VideoEntry",
    "FeedResponse",
]
