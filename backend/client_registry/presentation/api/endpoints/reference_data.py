"""Read-only reference data endpoints — CIF enrichment lookup and service catalog."""

from fastapi import APIRouter, Depends, HTTPException, status

from client_registry.application.schemas.reference_data import (
    CifLookupResponse,
    ServiceListResponse,
)
from client_registry.application.services import ReferenceDataService
from client_registry.domain.exceptions import EntityNotFoundError, StorageError
from client_registry.infrastructure.dependencies import get_reference_data_service

router = APIRouter(tags=["Reference Data"])


@router.get("/cif/{cif}", response_model=CifLookupResponse)
async def lookup_cif(
    cif: str,
    service: ReferenceDataService = Depends(get_reference_data_service),
) -> CifLookupResponse:
    """Return the enrichment data (company name, address, ...) known for a CIF."""
    try:
        data = await service.lookup_cif(cif)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return CifLookupResponse(data=data)


@router.get("/services", response_model=ServiceListResponse)
async def list_services(
    service: ReferenceDataService = Depends(get_reference_data_service),
) -> ServiceListResponse:
    """Return the catalog of services a client can subscribe to."""
    try:
        services = await service.list_services()
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return ServiceListResponse(data=services)
