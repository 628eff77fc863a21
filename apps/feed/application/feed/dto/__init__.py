"""Application DTOs."""

from apps.feed.application.feed.dto.feed_page import FeedPage
from apps.feed.application.feed.dto.feed_request import FeedRequest

__all__ = ["FeedRequest", "FeedPage"]
