"""Dependency Injection Setup.

FastAPI Depends로 Query/Reader를 조립합니다.
데모 모드에서는 DB 세션 대신 시드된 메모리 저장소를 사용합니다.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends

from apps.feed.application.discovery import (
    BusinessReader,
    GetNearbyBusinessesQuery,
    GetNearbyVideosQuery,
)
from apps.feed.application.feed import FeedRequestParser, GetFeedQuery, VideoReader
from apps.feed.infrastructure.persistence_memory import (
    InMemoryBusinessReader,
    InMemoryFeedStore,
    build_demo_store,
)
from apps.feed.infrastructure.persistence_postgres import SqlaBusinessReader, SqlaVideoReader
from apps.feed.setup.config import Settings, get_settings
from apps.feed.setup.database import get_session_factory


@lru_cache
def get_demo_store() -> InMemoryFeedStore:
    return build_demo_store()


# ============================================================
# Readers
# ============================================================


async def get_video_reader(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[VideoReader]:
    if settings.demo_mode:
        yield get_demo_store()
        return
    async with get_session_factory()() as session:
        yield SqlaVideoReader(session)


async def get_business_reader(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[BusinessReader]:
    if settings.demo_mode:
        yield InMemoryBusinessReader(get_demo_store())
        return
    async with get_session_factory()() as session:
        yield SqlaBusinessReader(session)


# ============================================================
# Queries
# ============================================================


def get_feed_request_parser(
    settings: Settings = Depends(get_settings),
) -> FeedRequestParser:
    return FeedRequestParser(
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


def get_feed_query(
    video_reader: VideoReader = Depends(get_video_reader),
    settings: Settings = Depends(get_settings),
) -> GetFeedQuery:
    return GetFeedQuery(video_reader, location_fetch_limit=settings.location_fetch_limit)


def get_nearby_businesses_query(
    business_reader: BusinessReader = Depends(get_business_reader),
) -> GetNearbyBusinessesQuery:
    return GetNearbyBusinessesQuery(business_reader)


def get_nearby_videos_query(
    video_reader: VideoReader = Depends(get_video_reader),
) -> GetNearbyVideosQuery:
    return GetNearbyVideosQuery(video_reader)
