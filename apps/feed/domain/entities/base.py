"""Entity Base Class.

Entity는 고유한 식별자(ID)를 가지며, 동등성은 ID로 판단합니다.
ORM과 분리된 순수 Python 객체입니다.
"""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class Entity(Generic[T]):
    """모든 Entity의 베이스 클래스."""

    __slots__ = ("id_",)

    def __init__(self, *, id_: T) -> None:
        self.id_: T = id_

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id_ == other.id_

    def __hash__(self) -> int:
        return hash(self.id_)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id_={self.id_!r})"
