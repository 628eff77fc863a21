"""In-Memory Infrastructure."""

from apps.feed.infrastructure.persistence_memory.demo_seed import build_demo_store
from apps.feed.infrastructure.persistence_memory.store_memory import (
    InMemoryBusinessReader,
    InMemoryFeedStore,
)

__all__ = ["InMemoryFeedStore", "InMemoryBusinessReader", "build_demo_store"]
