"""Pydantic DTOs for the read-only reference data endpoints."""

from typing import Any

from pydantic import BaseModel


class CifLookupResponse(BaseModel):
    """Enrichment data found for a CIF."""

    ok: bool = True
    data: dict[str, Any]


class ServiceListResponse(BaseModel):
    """The full service catalog."""

    ok: bool = True
    data: list[Any]
