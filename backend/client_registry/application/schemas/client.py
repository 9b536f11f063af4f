"""Pydantic DTOs (Data Transfer Objects) for the client endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from client_registry.domain.entities import ClientStatus


class ClientPayload(BaseModel):
    """Client attributes as submitted by the frontend.

    Only the identity fields are typed; every other key (services,
    bankAccounts, name, address, ...) is accepted as-is and merged by the
    service.
    """

    id: str | None = Field(None, examples=["9b2f6c1e-3f7a-4f0e-9d43-1c2a5b7e8d90"])
    cif: str | None = Field(None, examples=["RO12345678"])
    status: ClientStatus | None = None

    model_config = {"extra": "allow"}

    def to_payload(self) -> dict[str, Any]:
        """Return only the keys the caller actually sent, with wire values."""
        return self.model_dump(mode="json", exclude_unset=True)


class ClientEnvelope(BaseModel):
    """Request body wrapper: ``{"client": {...}}``. A missing client means an empty one."""

    client: ClientPayload | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.client.to_payload() if self.client is not None else {}


class ClientDocument(BaseModel):
    """A stored client as returned by the list and detail endpoints."""

    client: dict[str, Any]


class ClientMutationResponse(BaseModel):
    """Returned after a create or draft save."""

    ok: bool = True
    id: str
    count: int


class ClientDeleteResponse(BaseModel):
    ok: bool = True
    count: int


class OkResponse(BaseModel):
    ok: bool = True
