"""Demo Seed Data.

데모 모드(FEED_DEMO_MODE=true)에서 사용하는 샘플 비즈니스/영상입니다.
Ithaca, NY 주변 좌표를 사용합니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from apps.feed.domain.entities import Business, Video
from apps.feed.domain.enums import Category
from apps.feed.infrastructure.persistence_memory.store_memory import InMemoryFeedStore

DEMO_EPOCH = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

DEMO_BUSINESSES = (
    Business(
        id_="demo-business-1",
        name="LocalLens Demo Café",
        category=Category.RESTAURANTS,
        website="https://demo.locallens.app",
        address="123 Demo Street, Example City, NY 12345",
        latitude=42.4534,
        longitude=-76.4735,
        owner_id="demo-user-1",
    ),
    Business(
        id_="demo-business-2",
        name="Commons Thread Boutique",
        category=Category.CLOTHING,
        address="171 E State St, Ithaca, NY 14850",
        latitude=42.4390,
        longitude=-76.4970,
    ),
    Business(
        id_="demo-business-3",
        name="Fall Creek Gallery",
        category=Category.ART,
        address="212 Lake St, Ithaca, NY 14850",
        latitude=42.4520,
        longitude=-76.4980,
    ),
    Business(
        id_="demo-business-4",
        name="State Theatre Live",
        category=Category.ENTERTAINMENT,
        address="107 W State St, Ithaca, NY 14850",
        latitude=42.4393,
        longitude=-76.5003,
    ),
    Business(
        id_="demo-business-5",
        name="Trumansburg Diner",
        category=Category.RESTAURANTS,
        address="Trumansburg, NY 14886",
        latitude=42.5423,
        longitude=-76.6661,
    ),
    Business(
        id_="demo-business-6",
        name="Pop-up Food Truck",
        category=Category.RESTAURANTS,
    ),
)

_DEMO_VIDEO_TITLES = (
    ("demo-business-1", "Morning latte art"),
    ("demo-business-2", "Fall collection drop"),
    ("demo-business-3", "Opening night walkthrough"),
    ("demo-business-4", "Backstage before the show"),
    ("demo-business-5", "Pancake stack challenge"),
    ("demo-business-6", "Where we're parked today"),
    ("demo-business-1", "Sourdough out of the oven"),
    ("demo-business-3", "Meet the artist"),
)


def build_demo_videos() -> list[Video]:
    businesses = {business.id_: business for business in DEMO_BUSINESSES}
    videos = []
    for index, (business_id, title) in enumerate(_DEMO_VIDEO_TITLES, start=1):
        videos.append(
            Video(
                id_=f"demo-video-{index:02d}",
                title=title,
                url=f"https://cdn.locallens.app/demo/video-{index:02d}.mp4",
                thumb_url=f"https://cdn.locallens.app/demo/video-{index:02d}.jpg",
                created_at=DEMO_EPOCH - timedelta(hours=index),
                business=businesses[business_id],
            )
        )
    return videos


def build_demo_store() -> InMemoryFeedStore:
    return InMemoryFeedStore(businesses=DEMO_BUSINESSES, videos=build_demo_videos())
