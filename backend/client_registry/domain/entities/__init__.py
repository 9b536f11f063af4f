from .client_record import (
    ClientMutationResult,
    ClientRecord,
    ClientStatus,
    utc_timestamp,
)

__all__ = [
    "ClientMutationResult",
    "ClientRecord",
    "ClientStatus",
    "utc_timestamp",
]
