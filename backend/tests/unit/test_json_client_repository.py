"""Unit tests for the JSON-file client repository and the shared document I/O."""

import json
from pathlib import Path

import pytest

from client_registry.domain.entities import ClientRecord, ClientStatus
from client_registry.domain.exceptions import StorageError
from client_registry.infrastructure.storage.json_client_repository import (
    JsonFileClientRepository,
)


@pytest.fixture
def clients_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "clients.json"


@pytest.mark.asyncio
async def test_missing_file_is_empty_collection(clients_file: Path):
    repository = JsonFileClientRepository(clients_file)
    assert await repository.load_all() == []


@pytest.mark.asyncio
async def test_save_writes_wrapped_pretty_json(clients_file: Path):
    repository = JsonFileClientRepository(clients_file)
    record = ClientRecord(
        id="c-1",
        cif="RO1",
        services=[{"id": "svc"}],
        created_at="2026-01-01T00:00:00.000Z",
        attributes={"name": "Acme"},
    )

    await repository.save_all([record])

    text = clients_file.read_text("utf-8")
    assert text.startswith("[\n  {\n    \"client\": {")
    [entry] = json.loads(text)
    assert entry["client"] == {
        "id": "c-1",
        "cif": "RO1",
        "name": "Acme",
        "status": "active",
        "services": [{"id": "svc"}],
        "bankAccounts": [],
        "createdAt": "2026-01-01T00:00:00.000Z",
        "draftUpdatedAt": None,
    }
    assert list(clients_file.parent.glob("*.tmp")) == []


@pytest.mark.asyncio
async def test_load_preserves_order_and_pass_through_fields(clients_file: Path):
    clients_file.parent.mkdir(parents=True)
    clients_file.write_text(
        json.dumps(
            [
                {"client": {"id": "b", "cif": "RO2", "status": "draft", "notes": "x"}},
                {"client": {"id": "a", "cif": "RO1"}},
            ]
        ),
        encoding="utf-8",
    )

    records = await JsonFileClientRepository(clients_file).load_all()

    assert [r.id for r in records] == ["b", "a"]
    assert records[0].status is ClientStatus.DRAFT
    assert records[0].attributes == {"notes": "x"}
    assert records[1].status is ClientStatus.ACTIVE


@pytest.mark.asyncio
async def test_null_and_clientless_entries_load_as_empty_clients(clients_file: Path):
    clients_file.parent.mkdir(parents=True)
    clients_file.write_text(json.dumps([None, {}, {"client": None}]), encoding="utf-8")

    records = await JsonFileClientRepository(clients_file).load_all()

    assert len(records) == 3
    assert all(r.id is None for r in records)


@pytest.mark.asyncio
async def test_corrupt_file_raises_storage_error(clients_file: Path):
    clients_file.parent.mkdir(parents=True)
    clients_file.write_text("[{\"client\": ", encoding="utf-8")

    with pytest.raises(StorageError):
        await JsonFileClientRepository(clients_file).load_all()


@pytest.mark.asyncio
async def test_non_array_document_raises_storage_error(clients_file: Path):
    clients_file.parent.mkdir(parents=True)
    clients_file.write_text("{\"client\": {}}", encoding="utf-8")

    with pytest.raises(StorageError):
        await JsonFileClientRepository(clients_file).load_all()


@pytest.mark.asyncio
async def test_unknown_stored_status_raises_storage_error(clients_file: Path):
    clients_file.parent.mkdir(parents=True)
    clients_file.write_text(
        json.dumps([{"client": {"id": "a", "status": "archived"}}]), encoding="utf-8"
    )

    with pytest.raises(StorageError):
        await JsonFileClientRepository(clients_file).load_all()


@pytest.mark.asyncio
async def test_save_replaces_previous_document(clients_file: Path):
    repository = JsonFileClientRepository(clients_file)
    await repository.save_all([ClientRecord(id="a", cif="RO1"), ClientRecord(id="b", cif="RO2")])
    await repository.save_all([ClientRecord(id="b", cif="RO2")])

    records = await repository.load_all()
    assert [r.id for r in records] == ["b"]
