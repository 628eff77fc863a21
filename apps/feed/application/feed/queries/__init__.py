"""Application Queries."""

from apps.feed.application.feed.queries.get_feed import (
    DEFAULT_LOCATION_FETCH_LIMIT,
    GetFeedQuery,
)

__all__ = ["GetFeedQuery", "DEFAULT_LOCATION_FETCH_LIMIT"]
