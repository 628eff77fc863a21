"""Feed Cursor Value Object.

Keyset 페이지네이션 커서입니다. 직전 페이지 마지막 항목의
(created_at, id)를 "<ISO-8601>:<id>" 문자열로 인코딩합니다.

타임스탬프는 앵커된 ISO-8601 패턴으로 먼저 읽고, 그 뒤 구분자 이후 전체를 id로 취급합니다.
id에 콜론이 있어도 인코딩한 커서를 그대로 다시 파싱할 수 있습니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.feed.domain.exceptions import InvalidCursorError

if TYPE_CHECKING:
    from apps.feed.domain.entities.video import Video

CURSOR_SEPARATOR = ":"

_CURSOR_PATTERN = re.compile(
    r"(?P<timestamp>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:?\d{2})?)"
    r":(?P<video_id>.+)",
    re.DOTALL,
)


def ensure_utc(value: datetime) -> datetime:
    """naive datetime은 UTC로 간주합니다."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class FeedCursor:
    """피드 페이지 경계 (created_at, video_id)."""

    created_at: datetime
    video_id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_at", ensure_utc(self.created_at))

    @classmethod
    def parse(cls, raw: str) -> FeedCursor:
        """커서 문자열 파싱.

        Raises:
            InvalidCursorError: 타임스탬프를 해석할 수 없거나 id가 비어 있는 경우
        """
        match = _CURSOR_PATTERN.fullmatch(raw)
        if match is None:
            raise InvalidCursorError(raw)
        timestamp, video_id = match.group("timestamp", "video_id")

        if timestamp.endswith(("Z", "z")):
            timestamp = f"{timestamp[:-1]}+00:00"
        try:
            created_at = datetime.fromisoformat(timestamp)
        except ValueError as exc:
            raise InvalidCursorError(raw) from exc

        return cls(created_at=created_at, video_id=video_id)

    @classmethod
    def after(cls, video: "Video") -> FeedCursor:
        """주어진 영상 바로 다음부터 이어지는 커서."""
        return cls(created_at=video.created_at, video_id=video.id_)

    def encode(self) -> str:
        return f"{self.created_at.isoformat()}{CURSOR_SEPARATOR}{self.video_id}"

    def admits(self, created_at: datetime, video_id: str) -> bool:
        """해당 위치의 항목이 커서 경계 이후(다음 페이지 쪽)에 있는지."""
        created_at = ensure_utc(created_at)
        if created_at < self.created_at:
            return True
        return created_at == self.created_at and video_id > self.video_id

    def __str__(self) -> str:
        return self.encode()
