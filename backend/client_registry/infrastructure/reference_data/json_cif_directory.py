"""CIF enrichment directory backed by a JSON object keyed by CIF."""

from pathlib import Path
from typing import Any

from client_registry.application.interfaces import CifDirectory
from client_registry.domain.exceptions import StorageError
from client_registry.infrastructure.storage.json_document import read_json_document


class JsonCifDirectory(CifDirectory):
    """Reads the directory file on every lookup so edits show up without a restart."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    async def lookup_by_cif(self, cif: str) -> dict[str, Any] | None:
        key = (cif or "").strip()
        if not key:
            return None
        data = read_json_document(self._path, default={})
        if not isinstance(data, dict):
            raise StorageError(str(self._path), "expected a JSON object keyed by CIF")
        entry = data.get(key)
        if entry is None:
            return None
        if not isinstance(entry, dict):
            raise StorageError(str(self._path), f"entry for CIF {key!r} is not an object")
        return entry
