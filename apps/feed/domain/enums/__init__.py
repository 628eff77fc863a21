"""Domain Enums."""

from apps.feed.domain.enums.category import Category

__all__ = ["Category"]
