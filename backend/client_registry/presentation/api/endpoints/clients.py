"""Client store endpoints: list, get, create, draft save, update, delete."""

from fastapi import APIRouter, Depends, HTTPException, status

from client_registry.application.schemas.client import (
    ClientDeleteResponse,
    ClientDocument,
    ClientEnvelope,
    ClientMutationResponse,
    OkResponse,
)
from client_registry.application.services import ClientRecordService
from client_registry.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    MalformedPayloadError,
    MissingFieldError,
    StorageError,
)
from client_registry.infrastructure.dependencies import get_client_record_service

router = APIRouter(prefix="/clients", tags=["Clients"])


def _storage_failure(exc: StorageError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Client store unavailable: {exc.message}",
    )


@router.get("", response_model=list[ClientDocument])
async def list_clients(
    service: ClientRecordService = Depends(get_client_record_service),
) -> list[ClientDocument]:
    """Return every stored client in insertion order."""
    try:
        records = await service.list_clients()
    except StorageError as e:
        raise _storage_failure(e)
    return [ClientDocument(client=r.to_dict()) for r in records]


@router.get("/{client_id}", response_model=ClientDocument)
async def get_client(
    client_id: str,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientDocument:
    """Retrieve a single client by ID."""
    try:
        record = await service.get_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise _storage_failure(e)
    return ClientDocument(client=record.to_dict())


@router.post(
    "", response_model=ClientMutationResponse, status_code=status.HTTP_201_CREATED
)
async def create_client(
    payload: ClientEnvelope | None = None,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientMutationResponse:
    """Create an active client, promoting a matching draft if there is one."""
    try:
        result = await service.create_client(payload.to_payload() if payload else {})
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except MalformedPayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        raise _storage_failure(e)
    return ClientMutationResponse(id=result.id, count=result.count)


@router.post("/draft", response_model=ClientMutationResponse)
async def upsert_draft(
    payload: ClientEnvelope | None = None,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientMutationResponse:
    """Create or update a draft client, matched by id first and CIF second."""
    try:
        result = await service.upsert_draft(payload.to_payload() if payload else {})
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (MissingFieldError, MalformedPayloadError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        raise _storage_failure(e)
    return ClientMutationResponse(id=result.id, count=result.count)


@router.put("/{client_id}", response_model=OkResponse)
async def update_client(
    client_id: str,
    payload: ClientEnvelope | None = None,
    service: ClientRecordService = Depends(get_client_record_service),
) -> OkResponse:
    """Merge the submitted fields into an existing client."""
    try:
        await service.update_client(client_id, payload.to_payload() if payload else {})
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except MalformedPayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        raise _storage_failure(e)
    return OkResponse()


@router.delete("/{client_id}", response_model=ClientDeleteResponse)
async def delete_client(
    client_id: str,
    service: ClientRecordService = Depends(get_client_record_service),
) -> ClientDeleteResponse:
    """Delete a client by ID."""
    try:
        count = await service.delete_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError as e:
        raise _storage_failure(e)
    return ClientDeleteResponse(count=count)
