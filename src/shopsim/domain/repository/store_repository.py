"""Abstract repository for the Store aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopsim.domain.model.store import Store


class StoreRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique store ID."""

    @abstractmethod
    def get_by_id(self, store_id: int) -> Store | None:
        """Return a store by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Store]:
        """Return every store."""

    @abstractmethod
    def save(self, store: Store) -> None:
        """Persist a new or updated store, assigning an ID if needed."""
