"""SQLAlchemy Business Reader.

BusinessReader 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from apps.feed.application.common.exceptions import DataMapperError
from apps.feed.application.discovery.ports import BusinessCriteria
from apps.feed.domain.entities import Business
from apps.feed.infrastructure.persistence_postgres.mappers import business_from_row
from apps.feed.infrastructure.persistence_postgres.models import BusinessModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaBusinessReader:
    """SQLAlchemy 기반 Business Reader."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def find_many(self, criteria: BusinessCriteria) -> list[Business]:
        stmt = select(BusinessModel).order_by(BusinessModel.name.asc(), BusinessModel.id.asc())
        if criteria.category is not None:
            stmt = stmt.where(BusinessModel.category == criteria.category.value)
        if criteria.require_coordinates:
            stmt = stmt.where(BusinessModel.lat.is_not(None), BusinessModel.lng.is_not(None))

        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Business query failed", exc_info=True)
            raise DataMapperError("find_businesses", str(exc)) from exc

        return [business_from_row(row) for row in result.scalars().all()]
