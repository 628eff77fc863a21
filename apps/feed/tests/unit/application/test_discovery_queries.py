"""주변 비즈니스/영상 조회 Query 테스트."""

from __future__ import annotations

import pytest

from apps.feed.application.discovery import (
    DiscoveryRequest,
    GetNearbyBusinessesQuery,
    GetNearbyVideosQuery,
    parse_discovery_request,
)
from apps.feed.domain.enums import Category
from apps.feed.domain.exceptions import IncompleteLocationError, InvalidRadiusError
from apps.feed.infrastructure.persistence_memory import InMemoryBusinessReader


class TestParseDiscoveryRequest:
    """쿼리 파라미터 검증 (radius 파라미터 이름 사용)."""

    def test_no_params(self) -> None:
        request = parse_discovery_request()

        assert request.area is None
        assert request.category is None

    def test_partial_location_names_radius_field(self) -> None:
        with pytest.raises(IncompleteLocationError) as exc_info:
            parse_discovery_request(lat="42.44", lng="-76.5")

        assert "radius" in exc_info.value.message
        assert "radiusMi" not in exc_info.value.message

    def test_non_positive_radius(self) -> None:
        with pytest.raises(InvalidRadiusError) as exc_info:
            parse_discovery_request(lat="42.44", lng="-76.5", radius="0")

        assert exc_info.value.field == "radius"

    def test_full_request(self) -> None:
        request = parse_discovery_request(lat="42.44", lng="-76.5", radius="3", category="gallery")

        assert request.area is not None
        assert request.area.radius_miles == 3
        assert request.category is Category.ART


class TestGetNearbyBusinessesQuery:
    """주변 비즈니스 조회 테스트."""

    @pytest.mark.asyncio
    async def test_without_location_returns_all_without_distance(
        self, store, business_factory
    ) -> None:
        store.add_business(business_factory(id_="b", name="Bakery"))
        store.add_business(business_factory(id_="a", name="Arcade", latitude=None))

        results = await GetNearbyBusinessesQuery(InMemoryBusinessReader(store)).execute(
            DiscoveryRequest()
        )

        assert [result.business.id_ for result in results] == ["a", "b"]
        assert all(result.distance_miles is None for result in results)

    @pytest.mark.asyncio
    async def test_with_location_sorted_by_distance(
        self, store, business_factory, area_around_origin
    ) -> None:
        """반경 내 비즈니스만 가까운 순으로, 거리 포함"""
        store.add_business(business_factory(id_="far", miles_north=0.8))
        store.add_business(business_factory(id_="near", miles_north=0.2))
        store.add_business(business_factory(id_="outside", miles_north=2.0))
        store.add_business(business_factory(id_="nowhere", latitude=None, longitude=None))

        results = await GetNearbyBusinessesQuery(InMemoryBusinessReader(store)).execute(
            DiscoveryRequest(area=area_around_origin(1))
        )

        assert [result.business.id_ for result in results] == ["near", "far"]
        assert results[0].distance_miles == pytest.approx(0.2, abs=1e-6)
        assert results[1].distance_miles == pytest.approx(0.8, abs=1e-6)

    @pytest.mark.asyncio
    async def test_category_filter(self, store, business_factory) -> None:
        store.add_business(business_factory(id_="shop", category=Category.CLOTHING))
        store.add_business(business_factory(id_="diner"))

        results = await GetNearbyBusinessesQuery(InMemoryBusinessReader(store)).execute(
            DiscoveryRequest(category=Category.CLOTHING)
        )

        assert [result.business.id_ for result in results] == ["shop"]


class TestGetNearbyVideosQuery:
    """주변 영상 조회 테스트."""

    @pytest.mark.asyncio
    async def test_without_location_returns_all_newest_first(self, store, video_factory) -> None:
        store.add_video(video_factory("old", minutes_ago=10))
        store.add_video(video_factory("new", minutes_ago=1))

        videos = await GetNearbyVideosQuery(store).execute(DiscoveryRequest())

        assert [video.id_ for video in videos] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_with_location_filters_by_radius(
        self, store, video_factory, business_factory, area_around_origin
    ) -> None:
        near = business_factory(id_="near", miles_north=0.5)
        far = business_factory(id_="far", miles_north=3)
        unlocated = business_factory(id_="unlocated", latitude=None)
        store.add_video(video_factory("v-near", minutes_ago=3, business=near))
        store.add_video(video_factory("v-far", minutes_ago=2, business=far))
        store.add_video(video_factory("v-unlocated", minutes_ago=1, business=unlocated))

        videos = await GetNearbyVideosQuery(store).execute(
            DiscoveryRequest(area=area_around_origin(1))
        )

        assert [video.id_ for video in videos] == ["v-near"]
