"""Discovery Ports."""

from apps.feed.application.discovery.ports.business_reader import (
    BusinessCriteria,
    BusinessReader,
)

__all__ = ["BusinessCriteria", "BusinessReader"]
