"""Pytest fixtures for Feed service tests."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from apps.feed.domain.entities import Business, Video
from apps.feed.domain.enums import Category
from apps.feed.domain.value_objects import Coordinates, SearchArea
from apps.feed.infrastructure.persistence_memory import InMemoryFeedStore

ORIGIN_LAT = 42.44
ORIGIN_LNG = -76.50
MILES_PER_DEGREE_LAT = 2 * math.pi * 3959 / 360
BASE_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def lat_north_of_origin(miles: float) -> float:
    """원점에서 정북으로 miles 떨어진 위도."""
    return ORIGIN_LAT + miles / MILES_PER_DEGREE_LAT


BusinessFactory = Callable[..., Business]
VideoFactory = Callable[..., Video]


@pytest.fixture
def business_factory() -> BusinessFactory:
    """Business 팩토리. 기본값은 원점 위치의 레스토랑."""

    def _create(
        id_: str = "biz-1",
        name: str = "테스트 식당",
        category: Category = Category.RESTAURANTS,
        latitude: float | None = ORIGIN_LAT,
        longitude: float | None = ORIGIN_LNG,
        miles_north: float | None = None,
    ) -> Business:
        if miles_north is not None:
            latitude = lat_north_of_origin(miles_north)
            longitude = ORIGIN_LNG
        return Business(
            id_=id_,
            name=name,
            category=category,
            latitude=latitude,
            longitude=longitude,
        )

    return _create


@pytest.fixture
def video_factory(business_factory: BusinessFactory) -> VideoFactory:
    """Video 팩토리. minutes_ago로 생성 시각을 지정합니다."""

    def _create(
        id_: str,
        minutes_ago: int = 0,
        business: Business | None = None,
        created_at: datetime | None = None,
    ) -> Video:
        return Video(
            id_=id_,
            title=f"영상 {id_}",
            url=f"https://cdn.example.com/{id_}.mp4",
            thumb_url=f"https://cdn.example.com/{id_}.jpg",
            created_at=created_at or BASE_TIME - timedelta(minutes=minutes_ago),
            business=business or business_factory(),
        )

    return _create


@pytest.fixture
def store() -> InMemoryFeedStore:
    return InMemoryFeedStore()


@pytest.fixture
def area_around_origin() -> Callable[[float], SearchArea]:
    """원점 중심 검색 영역 팩토리."""

    def _create(radius_miles: float) -> SearchArea:
        return SearchArea(
            center=Coordinates(latitude=ORIGIN_LAT, longitude=ORIGIN_LNG),
            radius_miles=radius_miles,
        )

    return _create
