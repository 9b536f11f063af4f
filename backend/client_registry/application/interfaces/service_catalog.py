"""Abstract interface (port) for the read-only service catalog."""

from abc import ABC, abstractmethod
from typing import Any


class ServiceCatalog(ABC):
    """Lists the services a client can be subscribed to."""

    @abstractmethod
    async def list_services(self) -> list[Any]:
        """Return the catalog entries in their published order."""
        ...
