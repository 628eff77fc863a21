"""Domain Value Objects."""

from apps.feed.domain.value_objects.coordinates import Coordinates
from apps.feed.domain.value_objects.feed_cursor import FeedCursor, ensure_utc
from apps.feed.domain.value_objects.search_area import SearchArea

__all__ = ["Coordinates", "SearchArea", "FeedCursor", "ensure_utc"]
