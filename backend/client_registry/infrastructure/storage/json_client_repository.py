"""Concrete repository for the client collection backed by a single JSON file.

Document layout: an array of wrapper objects, one per client::

    [
      {"client": {"id": "...", "cif": "RO123", "status": "active", ...}},
      ...
    ]
"""

import logging
from pathlib import Path
from typing import Any

from client_registry.application.interfaces import ClientCollectionRepository
from client_registry.domain.entities import ClientRecord
from client_registry.domain.exceptions import MalformedPayloadError, StorageError
from client_registry.infrastructure.storage.json_document import (
    read_json_document,
    write_json_document,
)

logger = logging.getLogger(__name__)


class JsonFileClientRepository(ClientCollectionRepository):
    """Implements the ClientCollectionRepository port on top of one JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _to_entity(self, entry: Any) -> ClientRecord:
        """Map a stored wrapper → domain entity. A null or clientless wrapper becomes an empty client."""
        client = entry.get("client") if isinstance(entry, dict) else None
        if not isinstance(client, dict):
            client = {}
        return ClientRecord.from_dict(client)

    def _to_document(self, record: ClientRecord) -> dict[str, Any]:
        return {"client": record.to_dict()}

    async def load_all(self) -> list[ClientRecord]:
        raw = read_json_document(self._path, default=[])
        if not isinstance(raw, list):
            raise StorageError(str(self._path), "expected a JSON array of clients")
        try:
            records = [self._to_entity(entry) for entry in raw]
        except MalformedPayloadError as exc:
            raise StorageError(str(self._path), str(exc)) from exc
        logger.debug("Loaded %d clients from %s", len(records), self._path)
        return records

    async def save_all(self, records: list[ClientRecord]) -> None:
        write_json_document(self._path, [self._to_document(r) for r in records])
        logger.debug("Saved %d clients to %s", len(records), self._path)
