from .client import (
    ClientDeleteResponse,
    ClientDocument,
    ClientEnvelope,
    ClientMutationResponse,
    ClientPayload,
    OkResponse,
)
from .reference_data import CifLookupResponse, ServiceListResponse

__all__ = [
    "ClientDeleteResponse",
    "ClientDocument",
    "ClientEnvelope",
    "ClientMutationResponse",
    "ClientPayload",
    "OkResponse",
    "CifLookupResponse",
    "ServiceListResponse",
]
