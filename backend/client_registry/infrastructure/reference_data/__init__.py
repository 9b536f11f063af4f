from .json_cif_directory import JsonCifDirectory
from .json_service_catalog import JsonServiceCatalog

__all__ = ["JsonCifDirectory", "JsonServiceCatalog"]
