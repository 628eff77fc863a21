"""Feed API Application

FastAPI 애플리케이션 설정 및 미들웨어 구성
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.feed.infrastructure.metrics import register_metrics
from apps.feed.presentation.http.controllers.router import api_router, health_router
from apps.feed.presentation.http.errors import register_exception_handlers
from apps.feed.setup.config import get_settings
from apps.feed.setup.constants import SERVICE_NAME, SERVICE_VERSION
from apps.feed.setup.database import create_tables, dispose_engine
from apps.feed.setup.logging import configure_logging

# 구조화된 로깅 설정 (ECS JSON 포맷)
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings = get_settings()
    logger.info(
        "Starting %s",
        SERVICE_NAME,
        extra={"demo_mode": settings.demo_mode, "version": SERVICE_VERSION},
    )
    if not settings.demo_mode and settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables initialised")
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성

    Returns:
        FastAPI: 구성된 애플리케이션 인스턴스
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Location-scoped short video feed for local businesses",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router)

    register_metrics(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
