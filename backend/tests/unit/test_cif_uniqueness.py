"""Unit tests for the CIF uniqueness rule."""

import pytest

from client_registry.domain.cif_uniqueness import ensure_cif_available, find_cif_conflict
from client_registry.domain.entities import ClientRecord
from client_registry.domain.exceptions import DuplicateEntityError


@pytest.fixture
def records() -> list[ClientRecord]:
    return [
        ClientRecord(id="a", cif="RO1"),
        ClientRecord(id="b", cif="RO2"),
        ClientRecord(id="c", cif=""),
    ]


def test_same_cif_different_identity_conflicts(records):
    assert find_cif_conflict(records, "RO1", "z").id == "a"


def test_same_cif_without_identity_conflicts(records):
    assert find_cif_conflict(records, "RO2").id == "b"


def test_record_may_keep_its_own_cif(records):
    assert find_cif_conflict(records, "RO1", "a") is None


def test_empty_candidate_never_conflicts(records):
    assert find_cif_conflict(records, "") is None
    assert find_cif_conflict(records, None, "a") is None


def test_unused_cif_is_available(records):
    ensure_cif_available(records, "RO3")


def test_ensure_raises_duplicate(records):
    with pytest.raises(DuplicateEntityError) as exc_info:
        ensure_cif_available(records, "RO1", "b")

    assert exc_info.value.field == "cif"
    assert exc_info.value.value == "RO1"
