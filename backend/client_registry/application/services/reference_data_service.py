"""Application service for the read-only reference datasets (CIF directory, service catalog)."""

from typing import Any

from client_registry.application.interfaces import CifDirectory, ServiceCatalog
from client_registry.domain.exceptions import EntityNotFoundError


class ReferenceDataService:
    """Read-only lookups used by the client forms. No locking: the datasets never change at runtime."""

    def __init__(self, cif_directory: CifDirectory, service_catalog: ServiceCatalog):
        self._cif_directory = cif_directory
        self._service_catalog = service_catalog

    async def lookup_cif(self, cif: str) -> dict[str, Any]:
        entry = await self._cif_directory.lookup_by_cif(cif)
        if entry is None:
            raise EntityNotFoundError("CIF", cif.strip())
        return entry

    async def list_services(self) -> list[Any]:
        return await self._service_catalog.list_services()
