"""Abstract interface (port) for the read-only CIF enrichment dataset."""

from abc import ABC, abstractmethod
from typing import Any


class CifDirectory(ABC):
    """Looks up company data (name, address, ...) by CIF."""

    @abstractmethod
    async def lookup_by_cif(self, cif: str) -> dict[str, Any] | None:
        """Return the enrichment entry for ``cif``, or None if unknown."""
        ...
