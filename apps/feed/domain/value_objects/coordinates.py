"""Coordinates Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.feed.domain.exceptions import InvalidCoordinatesError


@dataclass(frozen=True)
class Coordinates:
    """위도/경도 좌표."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """좌표 유효성 검증."""
        if not -90 <= self.latitude <= 90:
            raise InvalidCoordinatesError(f"Invalid latitude: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise InvalidCoordinatesError(f"Invalid longitude: {self.longitude}")

    @classmethod
    def from_optional(cls, latitude: float | None, longitude: float | None) -> Coordinates | None:
        """둘 다 있을 때만 좌표를 만들고, 하나라도 없으면 None."""
        if latitude is None or longitude is None:
            return None
        return cls(latitude=latitude, longitude=longitude)
