from .cif_directory import CifDirectory
from .client_collection_repository import ClientCollectionRepository
from .service_catalog import ServiceCatalog

__all__ = [
    "CifDirectory",
    "ClientCollectionRepository",
    "ServiceCatalog",
]
