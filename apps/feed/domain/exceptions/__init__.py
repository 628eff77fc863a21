"""Domain Exceptions."""

from apps.feed.domain.exceptions.base import DomainError
from apps.feed.domain.exceptions.validation import (
    IncompleteLocationError,
    InvalidCategoryError,
    InvalidCoordinatesError,
    InvalidCursorError,
    InvalidLimitError,
    InvalidNumberError,
    InvalidRadiusError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "IncompleteLocationError",
    "InvalidNumberError",
    "InvalidCoordinatesError",
    "InvalidRadiusError",
    "InvalidCategoryError",
    "InvalidCursorError",
    "InvalidLimitError",
]
