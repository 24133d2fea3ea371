"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Each call is atomic on its own; no
    transaction boundary is exposed to callers.
    """

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every entity as a materialized list."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity and return it."""

    @abstractmethod
    def save_all(self, entities: Sequence[T]) -> List[T]:
        """Persist several entities, preserving their order."""

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Remove the entity with the given primary key."""
