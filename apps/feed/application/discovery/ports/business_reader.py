"""Business Reader Port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from apps.feed.domain.entities import Business
from apps.feed.domain.enums import Category


@dataclass(frozen=True)
class BusinessCriteria:
    """저장소 레벨 비즈니스 필터."""

    category: Category | None = None
    require_coordinates: bool = False


class BusinessReader(Protocol):
    """비즈니스 조회 포트. 결과는 (name, id) 순서입니다."""

    async def find_many(self, criteria: BusinessCriteria) -> list[Business]:
        ...
