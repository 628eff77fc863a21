"""HTTP integration fixtures.

저장소 의존성을 메모리 저장소로 교체한 앱에 httpx ASGITransport로 요청합니다.
"""

from __future__ import annotations

from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from apps.feed.infrastructure.persistence_memory import InMemoryBusinessReader, InMemoryFeedStore
from apps.feed.main import create_app
from apps.feed.setup.dependencies import get_business_reader, get_video_reader


@pytest.fixture
def app(store: InMemoryFeedStore) -> FastAPI:
    application = create_app()
    application.dependency_overrides[get_video_reader] = lambda: store
    application.dependency_overrides[get_business_reader] = lambda: InMemoryBusinessReader(store)
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """비동기 테스트 클라이언트 fixture"""
    transport = httpx.ASGITransport(app=app)  # type: ignore[arg-type]
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
