"""Domain Services."""

from apps.feed.domain.services.distance import EARTH_RADIUS_MILES, haversine_miles
from apps.feed.domain.services.feed_ordering import is_feed_ordered, sort_for_feed

__all__ = ["EARTH_RADIUS_MILES", "haversine_miles", "sort_for_feed", "is_feed_ordered"]
