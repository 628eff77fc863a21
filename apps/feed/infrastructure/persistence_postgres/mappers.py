"""ORM Row → Domain Entity Mappers."""

from __future__ import annotations

from apps.feed.domain.entities import Business, Video
from apps.feed.domain.enums import Category
from apps.feed.infrastructure.persistence_postgres.models import BusinessModel, VideoModel


def business_from_row(row: BusinessModel) -> Business:
    return Business(
        id_=row.id,
        name=row.name,
        category=Category(row.category),
        website=row.website,
        address=row.address,
        latitude=row.lat,
        longitude=row.lng,
        owner_id=row.owner_id,
        created_at=row.created_at,
    )


def video_from_row(row: VideoModel, business: Business | None = None) -> Video:
    """영상 행을 엔티티로 변환. business가 주어지면 재사용합니다."""
    return Video(
        id_=row.id,
        title=row.title,
        url=row.url,
        thumb_url=row.thumb_url,
        created_at=row.created_at,
        business=business or business_from_row(row.business),
    )
