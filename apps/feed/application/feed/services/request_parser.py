"""Request Parser Service.

쿼리 스트링 원본 값을 검증된 도메인 값으로 변환합니다.
빈 문자열은 전달되지 않은 값으로 취급합니다.
"""

from __future__ import annotations

import math

from apps.feed.application.feed.dto import FeedRequest
from apps.feed.domain.enums import Category
from apps.feed.domain.exceptions import (
    IncompleteLocationError,
    InvalidCategoryError,
    InvalidLimitError,
    InvalidNumberError,
    InvalidRadiusError,
)
from apps.feed.domain.value_objects import Coordinates, FeedCursor, SearchArea

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50


def _given(raw: str | None) -> str | None:
    """빈 문자열은 None으로."""
    return raw or None


def parse_number(field: str, raw: str) -> float:
    """유한한 실수로 파싱. NaN/Infinity는 거부합니다."""
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidNumberError(field, raw) from exc
    if not math.isfinite(value):
        raise InvalidNumberError(field, raw)
    return value


def parse_search_area(
    lat: str | None,
    lng: str | None,
    radius: str | None,
    *,
    radius_field: str = "radiusMi",
) -> SearchArea | None:
    """위치 3종 파라미터를 검색 영역으로 변환.

    셋 다 없으면 None, 일부만 있으면 IncompleteLocationError.
    """
    lat, lng, radius = _given(lat), _given(lng), _given(radius)
    if lat is None and lng is None and radius is None:
        return None
    if lat is None or lng is None or radius is None:
        raise IncompleteLocationError(("lat", "lng", radius_field))

    latitude = parse_number("lat", lat)
    longitude = parse_number("lng", lng)
    radius_miles = parse_number(radius_field, radius)

    if radius_miles <= 0:
        raise InvalidRadiusError(radius_field)

    center = Coordinates(latitude=latitude, longitude=longitude)
    return SearchArea(center=center, radius_miles=radius_miles)


def parse_category(raw: str | None) -> Category | None:
    """카테고리 파싱. 알 수 없는 값은 InvalidCategoryError (거부 정책)."""
    raw = _given(raw)
    if raw is None:
        return None
    category = Category.parse(raw)
    if category is Category.UNRECOGNIZED:
        raise InvalidCategoryError(raw)
    return category


def parse_cursor(raw: str | None) -> FeedCursor | None:
    raw = _given(raw)
    if raw is None:
        return None
    return FeedCursor.parse(raw)


class FeedRequestParser:
    """GET /feed 쿼리 파라미터 파서."""

    def __init__(
        self,
        default_limit: int = DEFAULT_PAGE_SIZE,
        max_limit: int = MAX_PAGE_SIZE,
    ) -> None:
        self._default_limit = default_limit
        self._max_limit = max_limit

    def parse(
        self,
        *,
        lat: str | None = None,
        lng: str | None = None,
        radius_mi: str | None = None,
        category: str | None = None,
        cursor: str | None = None,
        limit: str | None = None,
    ) -> FeedRequest:
        """쿼리 파라미터 검증 후 FeedRequest 생성.

        Raises:
            ValidationError: 파라미터가 잘못되었거나 서로 모순되는 경우
        """
        return FeedRequest(
            area=parse_search_area(lat, lng, radius_mi),
            category=parse_category(category),
            cursor=parse_cursor(cursor),
            limit=self.parse_limit(limit),
        )

    def parse_limit(self, raw: str | None) -> int:
        """페이지 크기 파싱. 최대값을 넘으면 최대값으로 자릅니다."""
        raw = _given(raw)
        if raw is None:
            return self._default_limit
        try:
            value = int(raw)
        except ValueError as exc:
            raise InvalidLimitError(raw) from exc
        if value < 1:
            raise InvalidLimitError(raw)
        return min(value, self._max_limit)
