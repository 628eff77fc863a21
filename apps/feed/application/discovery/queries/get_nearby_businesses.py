"""GetNearbyBusinesses Query."""

from __future__ import annotations

import logging

from apps.feed.application.discovery.dto import DiscoveryRequest, NearbyBusinessDTO
from apps.feed.application.discovery.ports import BusinessCriteria, BusinessReader
from apps.feed.application.feed.services import DistanceFilterService

logger = logging.getLogger(__name__)


class GetNearbyBusinessesQuery:
    """주변 비즈니스 조회.

    위치가 없으면 카테고리 조건만 적용한 전체 목록을 반환합니다.
    """

    def __init__(self, business_reader: BusinessReader) -> None:
        self._business_reader = business_reader

    async def execute(self, request: DiscoveryRequest) -> list[NearbyBusinessDTO]:
        criteria = BusinessCriteria(
            category=request.category,
            require_coordinates=request.area is not None,
        )
        businesses = await self._business_reader.find_many(criteria)

        if request.area is None:
            return [NearbyBusinessDTO(business=business) for business in businesses]

        matches = DistanceFilterService.businesses_within(businesses, request.area)
        logger.debug(
            "Nearby businesses filtered",
            extra={"candidates": len(businesses), "matches": len(matches)},
        )
        return [
            NearbyBusinessDTO(business=business, distance_miles=distance)
            for business, distance in matches
        ]
