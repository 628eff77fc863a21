"""Metrics Infrastructure."""

from apps.feed.infrastructure.metrics.prometheus import (
    REGISTRY,
    increment_request,
    observe_candidates,
    register_metrics,
    track_query_duration,
)

__all__ = [
    "REGISTRY",
    "increment_request",
    "observe_candidates",
    "register_metrics",
    "track_query_duration",
]
