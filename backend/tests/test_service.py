"""Service-level tests against an explicitly constructed store."""
import pytest

import service
from store import EntryStore


@pytest.fixture
def store(test_session):
    return EntryStore(test_session)


def test_every_operation_requires_identity(store):
    with pytest.raises(service.UnauthorizedError):
        service.list_entries(store, None)
    with pytest.raises(service.UnauthorizedError):
        service.create_entry(store, "", name="Lindsay", category="Actor")
    with pytest.raises(service.UnauthorizedError):
        service.update_entry(store, None, entry_id="x", name="Lindsay", category="Actor")
    with pytest.raises(service.UnauthorizedError):
        service.delete_entry(store, None, "x")


def test_identity_checked_before_validation(store):
    with pytest.raises(service.UnauthorizedError):
        service.create_entry(store, None, name=None, category=None)


def test_create_sets_owner_and_timestamps(store):
    entry = service.create_entry(store, "alice", name="Lindsay", category="Actor")

    assert entry.id is not None
    assert entry.user_id == "alice"
    assert entry.notes == ""
    assert entry.created_at == entry.updated_at


@pytest.mark.parametrize(
    "name, category",
    [(None, "Actor"), ("", "Actor"), ("   ", "Actor"), ("Lindsay", None), ("Lindsay", "")],
)
def test_create_requires_name_and_category(store, name, category):
    with pytest.raises(service.EntryValidationError, match="Name and category are required"):
        service.create_entry(store, "alice", name=name, category=category)
    assert store.list_for_user("alice") == []


def test_update_keeps_created_at(store):
    entry = service.create_entry(store, "alice", name="Lindsay", category="Actor", notes="n")
    created_at, updated_at = entry.created_at, entry.updated_at

    updated = service.update_entry(
        store, "alice", entry_id=str(entry.id), name="Lindsay", category="Producer"
    )

    assert updated.category == "Producer"
    assert updated.notes == ""
    assert updated.created_at == created_at
    assert updated.updated_at >= updated_at


def test_cross_user_isolation(store):
    entry = service.create_entry(store, "alice", name="Lindsay", category="Actor")

    assert service.list_entries(store, "bob") == []
    assert service.update_entry(store, "bob", entry_id=entry.id, name="X", category="Other") is None
    service.delete_entry(store, "bob", str(entry.id))

    remaining = service.list_entries(store, "alice")
    assert [(e.name, e.category) for e in remaining] == [("Lindsay", "Actor")]


def test_delete_missing_id_leaves_store_unchanged(store):
    service.create_entry(store, "alice", name="Lindsay", category="Actor")

    service.delete_entry(store, "alice", "00000000-0000-0000-0000-000000000000")

    assert len(service.list_entries(store, "alice")) == 1


def test_delete_requires_id(store):
    with pytest.raises(service.EntryValidationError, match="ID is required"):
        service.delete_entry(store, "alice", None)


def test_update_rejects_blank_name(store):
    entry = service.create_entry(store, "alice", name="Lindsay", category="Actor")

    with pytest.raises(service.EntryValidationError):
        service.update_entry(store, "alice", entry_id=str(entry.id), name=" ", category="Actor")

    assert service.list_entries(store, "alice")[0].name == "Lindsay"
