"""Domain Entities."""

from apps.feed.domain.entities.base import Entity
from apps.feed.domain.entities.business import Business
from apps.feed.domain.entities.video import Video

__all__ = ["Entity", "Business", "Video"]
