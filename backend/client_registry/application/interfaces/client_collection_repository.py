"""Abstract repository interface (port) for the client collection."""

from abc import ABC, abstractmethod

from client_registry.domain.entities import ClientRecord


class ClientCollectionRepository(ABC):
    """Port for whole-collection client persistence — implemented in the infrastructure layer.

    The collection is stored and replaced as a single unit; there is no
    per-record addressing.
    """

    @abstractmethod
    async def load_all(self) -> list[ClientRecord]:
        """Return every stored record in insertion order ([] when nothing is stored yet)."""
        ...

    @abstractmethod
    async def save_all(self, records: list[ClientRecord]) -> None:
        """Atomically replace the stored collection with ``records``."""
        ...
