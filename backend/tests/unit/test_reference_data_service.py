"""Unit tests for the CIF directory, service catalog and ReferenceDataService."""

import json
from pathlib import Path

import pytest

from client_registry.application.services import ReferenceDataService
from client_registry.domain.exceptions import EntityNotFoundError, StorageError
from client_registry.infrastructure.reference_data import JsonCifDirectory, JsonServiceCatalog

CIF_DATA = {
    "RO12345678": {"name": "Acme SRL", "address": "Str. Lunga 1, Cluj"},
    "RO00000000": {},
    "RO11111111": None,
    "RO22222222": "Acme SRL",
}
SERVICES = [
    {"id": "accounting", "label": "Accounting"},
    {"id": "payroll", "label": "Payroll"},
]


@pytest.fixture
def service(tmp_path: Path) -> ReferenceDataService:
    cif_file = tmp_path / "cif-data.json"
    services_file = tmp_path / "service-list.json"
    cif_file.write_text(json.dumps(CIF_DATA), encoding="utf-8")
    services_file.write_text(json.dumps(SERVICES), encoding="utf-8")
    return ReferenceDataService(JsonCifDirectory(cif_file), JsonServiceCatalog(services_file))


@pytest.mark.asyncio
async def test_lookup_known_cif(service: ReferenceDataService):
    data = await service.lookup_cif("  RO12345678 ")
    assert data["name"] == "Acme SRL"


@pytest.mark.asyncio
@pytest.mark.parametrize("cif", ["RO99999999", "", "   ", "RO11111111"])
async def test_lookup_unknown_or_empty_cif(service: ReferenceDataService, cif: str):
    with pytest.raises(EntityNotFoundError):
        await service.lookup_cif(cif)


@pytest.mark.asyncio
async def test_lookup_cif_with_empty_entry_is_found(service: ReferenceDataService):
    assert await service.lookup_cif("RO00000000") == {}


@pytest.mark.asyncio
async def test_lookup_cif_with_non_object_entry_raises_storage_error(
    service: ReferenceDataService,
):
    with pytest.raises(StorageError):
        await service.lookup_cif("RO22222222")


@pytest.mark.asyncio
async def test_list_services_keeps_order(service: ReferenceDataService):
    services = await service.list_services()
    assert [s["id"] for s in services] == ["accounting", "payroll"]


@pytest.mark.asyncio
async def test_missing_files_mean_empty_datasets(tmp_path: Path):
    service = ReferenceDataService(
        JsonCifDirectory(tmp_path / "absent.json"),
        JsonServiceCatalog(tmp_path / "absent-services.json"),
    )

    assert await service.list_services() == []
    with pytest.raises(EntityNotFoundError):
        await service.lookup_cif("RO12345678")


@pytest.mark.asyncio
async def test_malformed_catalog_raises_storage_error(tmp_path: Path):
    services_file = tmp_path / "service-list.json"
    services_file.write_text(json.dumps({"accounting": {}}), encoding="utf-8")

    with pytest.raises(StorageError):
        await JsonServiceCatalog(services_file).list_services()
