"""Health Check Controller."""

from __future__ import annotations

from fastapi import APIRouter

from apps.feed.presentation.http.schemas import HealthResponse
from apps.feed.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """헬스체크 엔드포인트."""
    return HealthResponse(status="healthy", service=SERVICE_NAME, version=SERVICE_VERSION)


@router.get("/ping")
async def ping() -> dict:
    return {"pong": True}
