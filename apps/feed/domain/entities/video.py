"""Video Entity."""

from __future__ import annotations

from datetime import datetime

from apps.feed.domain.entities.base import Entity
from apps.feed.domain.entities.business import Business
from apps.feed.domain.value_objects import ensure_utc


class Video(Entity[str]):
    """비즈니스가 업로드한 숏폼 영상 (비즈니스 조인 포함)."""

    __slots__ = ("title", "url", "thumb_url", "created_at", "business")

    def __init__(
        self,
        *,
        id_: str,
        title: str,
        url: str,
        created_at: datetime,
        business: Business,
        thumb_url: str | None = None,
    ) -> None:
        super().__init__(id_=id_)
        self.title = title
        self.url = url
        self.thumb_url = thumb_url
        self.created_at = ensure_utc(created_at)
        self.business = business

    @property
    def business_id(self) -> str:
        return self.business.id_
