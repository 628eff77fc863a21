"""Feed HTTP Schemas.

응답 필드는 camelCase로 직렬화됩니다 (nextCursor, hasMore, totalInRadius ...).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.feed.application.discovery import NearbyBusinessDTO
from apps.feed.application.feed import FeedPage
from apps.feed.domain.entities import Business, Video

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BusinessEntry(BaseModel):
    """비즈니스 응답 스키마."""

    model_config = _CAMEL_CONFIG

    id: str
    name: str
    category: str
    website: str | None
    address: str | None
    lat: float | None
    lng: float | None

    @classmethod
    def from_entity(cls, business: Business) -> BusinessEntry:
        return cls(
            id=business.id_,
            name=business.name,
            category=business.category.value,
            website=business.website,
            address=business.address,
            lat=business.latitude,
            lng=business.longitude,
        )


class NearbyBusinessEntry(BusinessEntry):
    """주변 비즈니스 응답 스키마 (위치 필터 시 distanceMi 포함)."""

    distance_mi: float | None = None

    @classmethod
    def from_dto(cls, dto: NearbyBusinessDTO) -> NearbyBusinessEntry:
        fields = BusinessEntry.from_entity(dto.business).model_dump()
        if dto.distance_miles is not None:
            fields["distance_mi"] = round(dto.distance_miles, 3)
        return cls(**fields)


class VideoEntry(BaseModel):
    """영상 응답 스키마 (비즈니스 조인 포함)."""

    model_config = _CAMEL_CONFIG

    id: str
    title: str
    url: str
    thumb_url: str | None
    created_at: datetime
    business_id: str
    business: BusinessEntry

    @classmethod
    def from_entity(cls, video: Video) -> VideoEntry:
        return cls(
            id=video.id_,
            title=video.title,
            url=video.url,
            thumb_url=video.thumb_url,
            created_at=video.created_at,
            business_id=video.business_id,
            business=BusinessEntry.from_entity(video.business),
        )


class FeedResponse(BaseModel):
    """GET /feed 응답.

    totalInRadius는 위치 필터가 적용된 경우에만 포함됩니다.
    """

    model_config = _CAMEL_CONFIG

    videos: list[VideoEntry]
    next_cursor: str | None = Field(..., description='다음 페이지 커서 ("<ISO>:<id>")')
    has_more: bool
    total_in_radius: int | None = Field(
        default=None,
        description="가져온 후보 배치 안에서 반경 내 항목 수",
    )

    @classmethod
    def from_page(cls, page: FeedPage) -> FeedResponse:
        fields = {
            "videos": [VideoEntry.from_entity(video) for video in page.videos],
            "next_cursor": page.next_cursor,
            "has_more": page.has_more,
        }
        if page.total_in_radius is not None:
            fields["total_in_radius"] = page.total_in_radius
        return cls(**fields)
