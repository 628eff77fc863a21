"""PostgreSQL Infrastructure."""

from apps.feed.infrastructure.persistence_postgres.business_reader_sqla import (
    SqlaBusinessReader,
)
from apps.feed.infrastructure.persistence_postgres.models import (
    Base,
    BusinessModel,
    VideoModel,
)
from apps.feed.infrastructure.persistence_postgres.video_reader_sqla import (
    SqlaVideoReader,
    build_video_query,
)

__all__ = [
    "SqlaVideoReader",
    "SqlaBusinessReader",
    "build_video_query",
    "Base",
    "BusinessModel",
    "VideoModel",
]
