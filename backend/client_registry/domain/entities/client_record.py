"""Domain entity — a client identified by its CIF, stored in the flat client collection."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from client_registry.domain.exceptions import MalformedPayloadError

# Wire names of the fields the store manages itself; everything else is a
# pass-through attribute supplied by the frontend.
ID = "id"
CIF = "cif"
STATUS = "status"
SERVICES = "services"
BANK_ACCOUNTS = "bankAccounts"
CREATED_AT = "createdAt"
DRAFT_UPDATED_AT = "draftUpdatedAt"

MANAGED_FIELDS = frozenset(
    {ID, CIF, STATUS, SERVICES, BANK_ACCOUNTS, CREATED_AT, DRAFT_UPDATED_AT}
)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ClientStatus(str, Enum):
    """Lifecycle status of a client record."""

    DRAFT = "draft"
    ACTIVE = "active"

    @classmethod
    def parse(cls, value: Any) -> "ClientStatus":
        """Coerce a raw status value, rejecting anything outside the closed set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise MalformedPayloadError(f"Invalid client status: {value!r}") from None


@dataclass
class ClientRecord:
    """Core domain entity for a stored client.

    ``attributes`` holds every caller-supplied key the store does not manage
    (name, address, contacts...). They are kept verbatim and written back
    alongside the managed fields.
    """

    id: str | None = None
    cif: str | None = None
    status: ClientStatus = ClientStatus.ACTIVE
    services: list[Any] = field(default_factory=list)
    bank_accounts: list[Any] = field(default_factory=list)
    created_at: str | None = None
    draft_updated_at: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def is_draft(self) -> bool:
        return self.status is ClientStatus.DRAFT

    def activate(self) -> None:
        """Finalise the record; an active record carries no draft timestamp."""
        self.status = ClientStatus.ACTIVE
        self.draft_updated_at = None

    def mark_draft(self, timestamp: str) -> None:
        """Keep the record as a draft and stamp the time of this draft save."""
        self.status = ClientStatus.DRAFT
        self.draft_updated_at = timestamp

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientRecord":
        """Build a record from its stored (camelCase) representation."""
        services = data.get(SERVICES)
        bank_accounts = data.get(BANK_ACCOUNTS)
        raw_status = data.get(STATUS)
        return cls(
            id=data.get(ID) or None,
            cif=data.get(CIF),
            status=ClientStatus.parse(raw_status) if raw_status else ClientStatus.ACTIVE,
            services=list(services) if isinstance(services, list) else [],
            bank_accounts=list(bank_accounts) if isinstance(bank_accounts, list) else [],
            created_at=data.get(CREATED_AT),
            draft_updated_at=data.get(DRAFT_UPDATED_AT),
            attributes={k: v for k, v in data.items() if k not in MANAGED_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the stored (camelCase) representation."""
        data: dict[str, Any] = {ID: self.id}
        if self.cif is not None:
            data[CIF] = self.cif
        data.update(self.attributes)
        data[STATUS] = self.status.value
        data[SERVICES] = list(self.services)
        data[BANK_ACCOUNTS] = list(self.bank_accounts)
        if self.created_at is not None:
            data[CREATED_AT] = self.created_at
        data[DRAFT_UPDATED_AT] = self.draft_updated_at
        return data


@dataclass(frozen=True)
class ClientMutationResult:
    """Outcome of a create or draft save: the affected id and the new collection size."""

    id: str
    count: int
