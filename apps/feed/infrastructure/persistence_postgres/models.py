"""SQLAlchemy ORM Models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from apps.feed.domain.enums import Category

# 커서 비교가 Python 문자열 순서와 같도록 id는 바이트 순서(C) collation 사용
ID_TYPE = String(64, collation="C")

_CATEGORY_VALUES = ", ".join(f"'{category.value}'" for category in Category.stored())


class Base(DeclarativeBase):
    """SQLAlchemy Base."""

    pass


class BusinessModel(Base):
    """비즈니스 ORM 모델."""

    __tablename__ = "businesses"
    __table_args__ = (
        CheckConstraint("lat IS NULL OR (lat >= -90 AND lat <= 90)", name="ck_businesses_lat"),
        CheckConstraint("lng IS NULL OR (lng >= -180 AND lng <= 180)", name="ck_businesses_lng"),
        CheckConstraint(f"category IN ({_CATEGORY_VALUES})", name="ck_businesses_category"),
    )

    id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    website: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str | None] = mapped_column(Text)
    lat: Mapped[float | None] = mapped_column(Float)
    lng: Mapped[float | None] = mapped_column(Float)
    owner_id: Mapped[str | None] = mapped_column(String(64))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    videos: Mapped[list["VideoModel"]] = relationship(back_populates="business")


class VideoModel(Base):
    """영상 ORM 모델."""

    __tablename__ = "videos"
    __table_args__ = (Index("ix_videos_feed_order", "created_at", "id"),)

    id: Mapped[str] = mapped_column(ID_TYPE, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    thumb_url: Mapped[str | None] = mapped_column(Text)
    business_id: Mapped[str] = mapped_column(
        ID_TYPE, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    business: Mapped[BusinessModel] = relationship(back_populates="videos")
