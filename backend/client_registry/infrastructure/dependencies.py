"""FastAPI dependency injection — wires infrastructure to application layer."""

from functools import lru_cache

from client_registry.application.services import ClientRecordService, ReferenceDataService
from client_registry.config import get_settings
from client_registry.infrastructure.reference_data import JsonCifDirectory, JsonServiceCatalog
from client_registry.infrastructure.storage.json_client_repository import (
    JsonFileClientRepository,
)


@lru_cache
def get_client_record_service() -> ClientRecordService:
    """Provides the process-wide ClientRecordService.

    Cached so every request shares one instance, and with it the lock that
    serialises load → mutate → persist on the clients file.
    """
    settings = get_settings()
    repository = JsonFileClientRepository(settings.clients_file)
    return ClientRecordService(repository)


def get_reference_data_service() -> ReferenceDataService:
    """Provides a ReferenceDataService over the CIF directory and service catalog files."""
    settings = get_settings()
    return ReferenceDataService(
        cif_directory=JsonCifDirectory(settings.cif_data_file),
        service_catalog=JsonServiceCatalog(settings.service_list_file),
    )
