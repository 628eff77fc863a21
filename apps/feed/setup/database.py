"""Database engine / session management for Feed service."""

from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.feed.setup.config import get_settings


@lru_cache
def get_engine() -> AsyncEngine:
    """최초 사용 시 엔진 생성 (데모 모드에서는 만들지 않음)."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables() -> None:
    """모든 테이블 생성 (idempotent)."""
    from apps.feed.infrastructure.persistence_postgres.models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
