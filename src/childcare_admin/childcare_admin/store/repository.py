from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class EntityRepository(Protocol[T]):
    """Uniform repository interface shared by every entity of the store.

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    def get(self, entity_id: int) -> Optional[T]:
        raise NotImplementedError

    def list(self, limit: int = 100, offset: int = 0) -> Sequence[T]:
        raise NotImplementedError

    def list_by(self, column: str, value: Any) -> Sequence[T]:
        raise NotImplementedError

    def create(self, data: dict) -> T:
        raise NotImplementedError

    def update(self, entity_id: int, partial: dict) -> Optional[T]:
        """Mutate only the supplied columns; ``None`` when the row is missing."""

        raise NotImplementedError

    def delete(self, entity_id: int) -> bool:
        raise NotImplementedError
