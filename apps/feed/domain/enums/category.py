"""Business Category Enum."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """비즈니스 카테고리.

    UNRECOGNIZED는 저장되지 않는 값으로, 알 수 없는 입력 문자열을
    명시적으로 표현하기 위해서만 사용됩니다.
    """

    RESTAURANTS = "RESTAURANTS"
    CLOTHING = "CLOTHING"
    ART = "ART"
    ENTERTAINMENT = "ENTERTAINMENT"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def parse(cls, raw: str) -> Category:
        """입력 문자열을 카테고리로 변환 (알 수 없으면 UNRECOGNIZED)."""
        return _ALIASES.get(raw.strip().lower(), cls.UNRECOGNIZED)

    @classmethod
    def stored(cls) -> tuple[Category, ...]:
        """저장 가능한 카테고리 목록."""
        return tuple(member for member in cls if member is not cls.UNRECOGNIZED)

    @property
    def slug(self) -> str:
        """클라이언트 표시용 소문자 이름."""
        return _SLUGS.get(self, "unknown")


_ALIASES: dict[str, Category] = {
    "restaurant": Category.RESTAURANTS,
    "restaurants": Category.RESTAURANTS,
    "food": Category.RESTAURANTS,
    "clothing": Category.CLOTHING,
    "fashion": Category.CLOTHING,
    "art": Category.ART,
    "gallery": Category.ART,
    "entertainment": Category.ENTERTAINMENT,
    "event": Category.ENTERTAINMENT,
    "events": Category.ENTERTAINMENT,
}

_SLUGS: dict[Category, str] = {
    Category.RESTAURANTS: "restaurant",
    Category.CLOTHING: "clothing",
    Category.ART: "art",
    Category.ENTERTAINMENT: "entertainment",
}
