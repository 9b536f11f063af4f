from .client_record_service import ClientRecordService
from .reference_data_service import ReferenceDataService

__all__ = [
    "ClientRecordService",
    "ReferenceDataService",
]
