"""Service catalog backed by a JSON array of service descriptors."""

from pathlib import Path
from typing import Any

from client_registry.application.interfaces import ServiceCatalog
from client_registry.domain.exceptions import StorageError
from client_registry.infrastructure.storage.json_document import read_json_document


class JsonServiceCatalog(ServiceCatalog):
    def __init__(self, path: str | Path):
        self._path = Path(path)

    async def list_services(self) -> list[Any]:
        services = read_json_document(self._path, default=[])
        if not isinstance(services, list):
            raise StorageError(str(self._path), "expected a JSON array of services")
        return services
