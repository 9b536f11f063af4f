"""Application service (use case) for the client record store.

Every operation runs one load → check → normalise → mutate → persist cycle
over the whole collection. The cycles are serialised by a single
``asyncio.Lock`` owned by the service, so the service instance must be
shared by every request that touches the same collection.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from client_registry.application.interfaces import ClientCollectionRepository
from client_registry.domain.cif_uniqueness import ensure_cif_available
from client_registry.domain.client_normalizer import normalize_client
from client_registry.domain.entities import (
    ClientMutationResult,
    ClientRecord,
    ClientStatus,
    utc_timestamp,
)
from client_registry.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidStateTransitionError,
    MalformedPayloadError,
    MissingFieldError,
)
from client_registry.domain.identity import generate_client_id

logger = logging.getLogger(__name__)


def _as_payload(payload: Any) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise MalformedPayloadError(
            f"Client payload must be an object, got {type(payload).__name__}"
        )
    return dict(payload)


def _index_by_id(records: list[ClientRecord], client_id: str | None) -> int:
    if not client_id:
        return -1
    for index, record in enumerate(records):
        if record.id == client_id:
            return index
    return -1


def _id_of(record: ClientRecord | None) -> str | None:
    return record.id if record is not None else None


def _index_by_cif(
    records: list[ClientRecord], cif: str | None, *, drafts_only: bool = False
) -> int:
    if not cif:
        return -1
    for index, record in enumerate(records):
        if record.cif and record.cif == cif:
            if drafts_only and not record.is_draft:
                continue
            return index
    return -1


class ClientRecordService:
    """Orchestrates the client lifecycle. Depends on the collection repository port (DI)."""

    def __init__(
        self,
        repository: ClientCollectionRepository,
        *,
        id_factory: Callable[[], str] = generate_client_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock
        self._lock = asyncio.Lock()

    # ── Queries ─────────────────────────────────────────────────────

    async def list_clients(self) -> list[ClientRecord]:
        async with self._lock:
            return await self._load()

    async def get_client(self, client_id: str) -> ClientRecord:
        records = await self.list_clients()
        index = _index_by_id(records, client_id)
        if index < 0:
            raise EntityNotFoundError("Client", client_id)
        return records[index]

    # ── Mutations ───────────────────────────────────────────────────

    async def create_client(self, payload: Mapping[str, Any] | None) -> ClientMutationResult:
        """Create an active client, or promote the matching draft.

        The target is the record with the payload's id, else the draft holding
        the payload's CIF, else a new record appended to the collection.
        """
        proposed = _as_payload(payload)
        cif = proposed.get("cif")
        client_id = proposed.get("id")

        async with self._lock:
            records = await self._load()
            index = _index_by_id(records, client_id)
            if index < 0:
                index = _index_by_cif(records, cif, drafts_only=True)
            existing = records[index] if index >= 0 else None
            # A matched target may keep its own CIF.
            self._check_cif(records, cif, client_id or _id_of(existing))

            record = normalize_client(
                proposed, existing, now=self._clock(), id_factory=self._id_factory
            )
            record.activate()
            self._place(records, index, record)
            await self._repository.save_all(records)

        if existing is not None and existing.is_draft:
            logger.info("Promoted draft client %s (cif=%s) to active", record.id, record.cif)
        elif existing is not None:
            logger.info("Replaced active client %s (cif=%s)", record.id, record.cif)
        else:
            logger.info("Created client %s (cif=%s)", record.id, record.cif)
        return ClientMutationResult(id=record.id, count=len(records))

    async def upsert_draft(self, payload: Mapping[str, Any] | None) -> ClientMutationResult:
        """Save a draft, matched by id first and CIF second.

        Refuses to overwrite a client that is already active.
        """
        proposed = _as_payload(payload)
        cif = proposed.get("cif")
        client_id = proposed.get("id")
        if not cif:
            raise MissingFieldError("Client", "cif")

        async with self._lock:
            records = await self._load()
            index = _index_by_id(records, client_id)
            if index < 0:
                index = _index_by_cif(records, cif)
            existing = records[index] if index >= 0 else None
            # A matched target may keep its own CIF.
            self._check_cif(records, cif, client_id or _id_of(existing))

            if existing is not None and not existing.is_draft:
                logger.warning(
                    "Draft save rejected: client %s (cif=%s) is already active",
                    existing.id,
                    existing.cif,
                )
                raise InvalidStateTransitionError(
                    "Client",
                    existing.id or "",
                    existing.status.value,
                    ClientStatus.DRAFT.value,
                )

            now = self._clock()
            record = normalize_client(
                proposed, existing, now=now, id_factory=self._id_factory
            )
            record.mark_draft(now)
            self._place(records, index, record)
            await self._repository.save_all(records)

        logger.info(
            "%s draft client %s (cif=%s)",
            "Updated" if existing is not None else "Created",
            record.id,
            record.cif,
        )
        return ClientMutationResult(id=record.id, count=len(records))

    async def update_client(
        self, client_id: str, payload: Mapping[str, Any] | None
    ) -> ClientRecord:
        """Merge ``payload`` into the stored client.

        The id is pinned to ``client_id`` whatever the payload says, and the
        status stays what it was: promotion goes through create_client. A draft
        gets a fresh draft timestamp, an active client keeps none, and an empty
        CIF in the payload leaves the stored CIF in place.
        """
        proposed = _as_payload(payload)
        proposed["id"] = client_id

        async with self._lock:
            records = await self._load()
            index = _index_by_id(records, client_id)
            if index < 0:
                raise EntityNotFoundError("Client", client_id)
            existing = records[index]
            self._check_cif(records, proposed.get("cif"), client_id)

            now = self._clock()
            record = normalize_client(
                proposed, existing, now=now, id_factory=self._id_factory
            )
            if existing.is_draft:
                record.mark_draft(now)
            else:
                record.activate()
            if not record.cif:
                record.cif = existing.cif
            records[index] = record
            await self._repository.save_all(records)

        logger.info("Updated client %s", client_id)
        return record

    async def delete_client(self, client_id: str) -> int:
        """Remove the client and return the number of clients left."""
        async with self._lock:
            records = await self._load()
            index = _index_by_id(records, client_id)
            if index < 0:
                raise EntityNotFoundError("Client", client_id)
            del records[index]
            await self._repository.save_all(records)

        logger.info("Deleted client %s (%d remaining)", client_id, len(records))
        return len(records)

    # ── Helpers ─────────────────────────────────────────────────────

    async def _load(self) -> list[ClientRecord]:
        """Load the collection, assigning ids to records stored without one."""
        records = await self._repository.load_all()
        repaired = 0
        for record in records:
            if not record.id:
                record.id = self._id_factory()
                repaired += 1
        if repaired:
            logger.warning("Assigned ids to %d stored client(s) without one", repaired)
            await self._repository.save_all(records)
        return records

    def _check_cif(
        self, records: list[ClientRecord], cif: str | None, client_id: str | None
    ) -> None:
        try:
            ensure_cif_available(records, cif, client_id)
        except DuplicateEntityError:
            logger.warning("Rejected CIF %s: already held by another client", cif)
            raise

    @staticmethod
    def _place(records: list[ClientRecord], index: int, record: ClientRecord) -> None:
        if index >= 0:
            records[index] = record
        else:
            records.append(record)
