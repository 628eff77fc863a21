"""Business Entity."""

from __future__ import annotations

from datetime import datetime

from apps.feed.domain.entities.base import Entity
from apps.feed.domain.enums import Category
from apps.feed.domain.value_objects import Coordinates


class Business(Entity[str]):
    """영상을 올리는 지역 비즈니스.

    위도/경도는 둘 다 있을 때만 위치가 있는 것으로 취급합니다.
    """

    __slots__ = (
        "name",
        "category",
        "website",
        "address",
        "latitude",
        "longitude",
        "owner_id",
        "created_at",
    )

    def __init__(
        self,
        *,
        id_: str,
        name: str,
        category: Category,
        website: str | None = None,
        address: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
        owner_id: str | None = None,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id_=id_)
        self.name = name
        self.category = category
        self.website = website
        self.address = address
        self.latitude = latitude
        self.longitude = longitude
        self.owner_id = owner_id
        self.created_at = created_at

    @property
    def coordinates(self) -> Coordinates | None:
        return Coordinates.from_optional(self.latitude, self.longitude)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None
