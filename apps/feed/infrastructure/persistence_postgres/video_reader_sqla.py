"""SQLAlchemy Video Reader.

VideoReader 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import and_, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from apps.feed.application.common.exceptions import DataMapperError
from apps.feed.application.feed.ports import VideoCriteria
from apps.feed.domain.entities import Business, Video
from apps.feed.infrastructure.persistence_postgres.mappers import (
    business_from_row,
    video_from_row,
)
from apps.feed.infrastructure.persistence_postgres.models import BusinessModel, VideoModel

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaVideoReader:
    """SQLAlchemy 기반 Video Reader."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def find_many(self, criteria: VideoCriteria, *, limit: int | None = None) -> list[Video]:
        stmt = build_video_query(criteria, limit=limit)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Video query failed", exc_info=True)
            raise DataMapperError("find_videos", str(exc)) from exc

        businesses: dict[str, Business] = {}
        videos: list[Video] = []
        for row in result.scalars().unique().all():
            business = businesses.get(row.business_id)
            if business is None:
                business = businesses[row.business_id] = business_from_row(row.business)
            videos.append(video_from_row(row, business))
        return videos


def build_video_query(criteria: VideoCriteria, *, limit: int | None = None) -> "Select":
    """조건 → SELECT 문. (created_at DESC, id ASC) 정렬."""
    stmt = (
        select(VideoModel)
        .join(VideoModel.business)
        .options(contains_eager(VideoModel.business))
        .order_by(VideoModel.created_at.desc(), VideoModel.id.asc())
    )

    if criteria.category is not None:
        stmt = stmt.where(BusinessModel.category == criteria.category.value)

    if criteria.require_coordinates:
        stmt = stmt.where(BusinessModel.lat.is_not(None), BusinessModel.lng.is_not(None))

    if criteria.cursor is not None:
        cursor = criteria.cursor
        stmt = stmt.where(
            or_(
                VideoModel.created_at < cursor.created_at,
                and_(
                    VideoModel.created_at == cursor.created_at,
                    VideoModel.id > cursor.video_id,
                ),
            )
        )

    if limit is not None:
        stmt = stmt.limit(limit)
    return stmt
