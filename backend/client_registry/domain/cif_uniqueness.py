"""CIF uniqueness rule for the client collection.

A CIF conflicts only when it is already held by a *different* client: a
record may always keep its own CIF, and an empty CIF never conflicts.
"""

from collections.abc import Iterable

from client_registry.domain.entities.client_record import ClientRecord
from client_registry.domain.exceptions import DuplicateEntityError


def find_cif_conflict(
    records: Iterable[ClientRecord],
    cif: str | None,
    client_id: str | None = None,
) -> ClientRecord | None:
    """Return the first record that already holds ``cif`` under another identity."""
    if not cif:
        return None
    for record in records:
        if not record.cif or record.cif != cif:
            continue
        if client_id and record.id == client_id:
            continue
        return record
    return None


def ensure_cif_available(
    records: Iterable[ClientRecord],
    cif: str | None,
    client_id: str | None = None,
) -> None:
    """Raise DuplicateEntityError if committing ``cif`` for ``client_id`` would collide."""
    if find_cif_conflict(records, cif, client_id) is not None:
        raise DuplicateEntityError("Client", "cif", str(cif))
