"""Feed Application Layer."""

from apps.feed.application.feed.dto import FeedPage, FeedRequest
from apps.feed.application.feed.ports import VideoCriteria, VideoReader
from apps.feed.application.feed.queries import GetFeedQuery
from apps.feed.application.feed.services import DistanceFilterService, FeedRequestParser

__all__ = [
    "FeedRequest",
    "FeedPage",
    "VideoCriteria",
    "VideoReader",
    "GetFeedQuery",
    "DistanceFilterService",
    "FeedRequestParser",
]
