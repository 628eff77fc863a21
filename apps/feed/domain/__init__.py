"""Feed Domain Layer."""

from apps.feed.domain.entities import Business, Video
from apps.feed.domain.enums import Category
from apps.feed.domain.value_objects import Coordinates, FeedCursor, SearchArea

__all__ = ["Business", "Video", "Category", "Coordinates", "SearchArea", "FeedCursor"]
