"""Validation Domain Exceptions.

요청 파라미터 검증 실패는 모두 ValidationError 계열로 표현되며,
presentation 계층에서 HTTP 400으로 변환됩니다.
"""

from apps.feed.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 검증 실패."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(reason)


class IncompleteLocationError(ValidationError):
    """위치 파라미터 일부만 전달됨."""

    def __init__(self, fields: tuple[str, str, str] = ("lat", "lng", "radiusMi")) -> None:
        joined = f"{fields[0]}, {fields[1]}, and {fields[2]}"
        super().__init__("location", f"{joined} must all be provided together")


class InvalidNumberError(ValidationError):
    """숫자로 해석할 수 없는 값."""

    def __init__(self, field: str, raw: str) -> None:
        self.raw = raw
        super().__init__(field, f"{field} must be a valid number")


class InvalidCoordinatesError(ValidationError):
    """범위를 벗어난 좌표."""

    def __init__(self, reason: str) -> None:
        super().__init__("coordinates", reason)


class InvalidRadiusError(ValidationError):
    """0 이하의 검색 반경."""

    def __init__(self, field: str = "radiusMi") -> None:
        super().__init__(field, f"{field} must be greater than 0")


class InvalidCategoryError(ValidationError):
    """알 수 없는 카테고리."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("category", f"Unknown category: {raw}")


class InvalidCursorError(ValidationError):
    """잘못된 페이지네이션 커서."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("cursor", 'Invalid cursor format. Expected "createdAt:id"')


class InvalidLimitError(ValidationError):
    """잘못된 페이지 크기."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__("limit", "limit must be a positive integer")
