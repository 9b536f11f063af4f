"""Merge a proposed client payload into an (optional) stored record.

Each managed field has its own precedence rule:

    id              payload id (non-empty) → stored id → freshly generated
    services        payload list → stored list → []
    bankAccounts    payload list → stored list → []
    createdAt       payload value → stored value → now
    status          payload value → stored value → "active"
    cif             payload key if present → stored value
    draftUpdatedAt  payload key if present → stored value

Omitting ``services`` or ``bankAccounts`` never clears a stored list.
Remaining keys are merged shallowly, payload over stored.
"""

from collections.abc import Callable, Mapping
from typing import Any

from client_registry.domain.entities.client_record import (
    BANK_ACCOUNTS,
    CIF,
    CREATED_AT,
    DRAFT_UPDATED_AT,
    ID,
    MANAGED_FIELDS,
    SERVICES,
    STATUS,
    ClientRecord,
    ClientStatus,
    utc_timestamp,
)
from client_registry.domain.identity import generate_client_id


def normalize_client(
    proposed: Mapping[str, Any],
    existing: ClientRecord | None = None,
    *,
    now: str | None = None,
    id_factory: Callable[[], str] = generate_client_id,
) -> ClientRecord:
    """Return a complete record built from ``proposed`` on top of ``existing``.

    Pure apart from calling ``id_factory`` when neither side carries an id.
    """
    return ClientRecord(
        id=_resolve_id(proposed, existing, id_factory),
        cif=_resolve_shallow(proposed, CIF, existing.cif if existing else None),
        status=_resolve_status(proposed, existing),
        services=_resolve_list(
            proposed.get(SERVICES), existing.services if existing else None
        ),
        bank_accounts=_resolve_list(
            proposed.get(BANK_ACCOUNTS), existing.bank_accounts if existing else None
        ),
        created_at=_resolve_created_at(proposed, existing, now),
        draft_updated_at=_resolve_shallow(
            proposed, DRAFT_UPDATED_AT, existing.draft_updated_at if existing else None
        ),
        attributes=_merge_attributes(proposed, existing),
    )


def _resolve_id(
    proposed: Mapping[str, Any],
    existing: ClientRecord | None,
    id_factory: Callable[[], str],
) -> str:
    if proposed.get(ID):
        return proposed[ID]
    if existing is not None and existing.id:
        return existing.id
    return id_factory()


def _resolve_list(proposed: Any, existing: Any) -> list[Any]:
    if isinstance(proposed, list):
        return list(proposed)
    if isinstance(existing, list):
        return list(existing)
    return []


def _resolve_created_at(
    proposed: Mapping[str, Any], existing: ClientRecord | None, now: str | None
) -> str:
    if proposed.get(CREATED_AT):
        return proposed[CREATED_AT]
    if existing is not None and existing.created_at:
        return existing.created_at
    return now or utc_timestamp()


def _resolve_status(
    proposed: Mapping[str, Any], existing: ClientRecord | None
) -> ClientStatus:
    if proposed.get(STATUS):
        return ClientStatus.parse(proposed[STATUS])
    if existing is not None:
        return existing.status
    return ClientStatus.ACTIVE


def _resolve_shallow(proposed: Mapping[str, Any], key: str, fallback: Any) -> Any:
    if key in proposed:
        return proposed[key]
    return fallback


def _merge_attributes(
    proposed: Mapping[str, Any], existing: ClientRecord | None
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(existing.attributes) if existing else {}
    for key, value in proposed.items():
        if key not in MANAGED_FIELDS:
            merged[key] = value
    return merged
