"""GET /feed 엔드포인트 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest

from apps.feed.application.common.exceptions import DataMapperError
from apps.feed.domain.enums import Category
from apps.feed.main import create_app
from apps.feed.setup.config import Settings, get_settings
from apps.feed.setup.constants import INTERNAL_ERROR_MESSAGE, METRICS_PATH, SERVICE_NAME
from apps.feed.setup.dependencies import get_video_reader

LOCATION = {"lat": "42.44", "lng": "-76.50", "radiusMi": "1"}


class TestFeedValidation:
    """잘못된 요청은 400 {"error": ...}"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [
            {"lat": "42.44"},
            {"lat": "42.44", "lng": "-76.50"},
            {"radiusMi": "5"},
        ],
    )
    async def test_partial_location(self, client: httpx.AsyncClient, params: dict) -> None:
        response = await client.get("/feed", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "lat, lng, and radiusMi must all be provided together"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "cursor",
        ["not-a-date:abc", "2025-03-01T12:00:00Z", "2025-03-01T12:00:00.000Z"],
    )
    async def test_malformed_cursor(self, client: httpx.AsyncClient, cursor: str) -> None:
        response = await client.get("/feed", params={"cursor": cursor})

        assert response.status_code == 400
        assert "cursor" in response.json()["error"].lower()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [
            {**LOCATION, "lat": "north"},
            {**LOCATION, "radiusMi": "0"},
            {**LOCATION, "radiusMi": "-2"},
            {**LOCATION, "lat": "91"},
            {"category": "spaceships"},
            {"limit": "0"},
            {"limit": "ten"},
        ],
    )
    async def test_invalid_values(self, client: httpx.AsyncClient, params: dict) -> None:
        response = await client.get("/feed", params=params)

        assert response.status_code == 400
        assert set(response.json()) == {"error"}

    @pytest.mark.asyncio
    async def test_empty_values_are_absent(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/feed", params={"lat": "", "category": "", "cursor": ""})

        assert response.status_code == 200


class TestFeedResponse:
    """응답 형식 및 페이지네이션 테스트."""

    @pytest.mark.asyncio
    async def test_camel_case_shape_without_location(
        self, client: httpx.AsyncClient, store, video_factory
    ) -> None:
        store.add_video(video_factory("v1"))

        response = await client.get("/feed")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"videos", "nextCursor", "hasMore"}
        assert body["nextCursor"] is None
        assert body["hasMore"] is False
        video = body["videos"][0]
        assert video["id"] == "v1"
        assert video["businessId"] == "biz-1"
        assert "thumbUrl" in video
        assert "createdAt" in video
        assert video["business"]["lat"] == pytest.approx(42.44)

    @pytest.mark.asyncio
    async def test_total_in_radius_only_with_location(
        self, client: httpx.AsyncClient, store, video_factory, business_factory
    ) -> None:
        store.add_video(video_factory("near", business=business_factory(id_="n", miles_north=0.9)))
        store.add_video(video_factory("far", business=business_factory(id_="f", miles_north=1.5)))

        response = await client.get("/feed", params=LOCATION)

        body = response.json()
        assert [video["id"] for video in body["videos"]] == ["near"]
        assert body["totalInRadius"] == 1

    @pytest.mark.asyncio
    async def test_cursor_chase(self, client: httpx.AsyncClient, store, video_factory) -> None:
        """limit=2, 5개 → 2/2/1 페이지"""
        for index in range(1, 6):
            store.add_video(video_factory(f"v{index}", minutes_ago=index))

        pages = []
        params = {"limit": "2"}
        while True:
            body = (await client.get("/feed", params=params)).json()
            pages.append(body)
            if not body["hasMore"]:
                break
            params = {"limit": "2", "cursor": body["nextCursor"]}

        assert [[video["id"] for video in page["videos"]] for page in pages] == [
            ["v1", "v2"],
            ["v3", "v4"],
            ["v5"],
        ]
        assert pages[-1]["nextCursor"] is None

    @pytest.mark.asyncio
    async def test_limit_clamped(self, client: httpx.AsyncClient, store, video_factory) -> None:
        for index in range(55):
            store.add_video(video_factory(f"v{index:02d}", minutes_ago=index))

        body = (await client.get("/feed", params={"limit": "500"})).json()

        assert len(body["videos"]) == 50
        assert body["hasMore"] is True

    @pytest.mark.asyncio
    async def test_category_alias(
        self, client: httpx.AsyncClient, store, video_factory, business_factory
    ) -> None:
        gallery = business_factory(id_="g", category=Category.ART)
        store.add_video(video_factory("art", business=gallery))
        store.add_video(video_factory("food"))

        body = (await client.get("/feed", params={"category": "Gallery"})).json()

        assert [video["id"] for video in body["videos"]] == ["art"]


class TestFeedFailures:
    """저장소 오류는 상세 정보 없이 500."""

    @pytest.mark.asyncio
    async def test_store_failure(self, app) -> None:
        reader = AsyncMock()
        reader.find_many.side_effect = DataMapperError("find_videos", "connection refused")
        app.dependency_overrides[get_video_reader] = lambda: reader

        transport = httpx.ASGITransport(app=app)  # type: ignore[arg-type]
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/feed")

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}

    @pytest.mark.asyncio
    async def test_unexpected_failure(self, app) -> None:
        reader = AsyncMock()
        reader.find_many.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_video_reader] = lambda: reader

        transport = httpx.ASGITransport(
            app=app, raise_app_exceptions=False  # type: ignore[arg-type]
        )
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/feed")

        assert response.status_code == 500
        assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}


class TestDemoMode:
    """데모 모드: 시드된 메모리 저장소에서 응답."""

    @pytest.mark.asyncio
    async def test_demo_feed_near_demo_cafe(self) -> None:
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: Settings(DEMO_MODE=True)

        transport = httpx.ASGITransport(app=app)  # type: ignore[arg-type]
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(
                "/feed", params={"lat": "42.4534", "lng": "-76.4735", "radiusMi": "0.5"}
            )

        body = response.json()
        assert [video["id"] for video in body["videos"]] == ["demo-video-01", "demo-video-07"]
        assert body["totalInRadius"] == 2


class TestHealthAndMetrics:
    """Health / Metrics 엔드포인트 테스트."""

    @pytest.mark.asyncio
    async def test_health(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["service"] == SERVICE_NAME

    @pytest.mark.asyncio
    async def test_ping(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/ping")
        assert response.json() == {"pong": True}

    @pytest.mark.asyncio
    async def test_metrics_records_feed_requests(self, client: httpx.AsyncClient) -> None:
        await client.get("/feed")
        await client.get("/feed", params={"lat": "1"})

        response = await client.get(METRICS_PATH)

        assert response.status_code == 200
        assert 'feed_requests_total{endpoint="feed",status="success"}' in response.text
        assert 'feed_requests_total{endpoint="feed",status="invalid"}' in response.text
        assert "feed_query_duration_seconds_bucket" in response.text
