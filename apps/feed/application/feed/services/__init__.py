"""Application Services."""

from apps.feed.application.feed.services.distance_filter import DistanceFilterService
from apps.feed.application.feed.services.request_parser import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    FeedRequestParser,
    parse_category,
    parse_cursor,
    parse_number,
    parse_search_area,
)

__all__ = [
    "DistanceFilterService",
    "FeedRequestParser",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "parse_category",
    "parse_cursor",
    "parse_number",
    "parse_search_area",
]
