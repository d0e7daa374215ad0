"""Tests for the in-memory entity store."""

from __future__ import annotations

import threading

import pytest

from portal.domain.entities import Application, Service, ServiceCategory, User
from portal.domain.errors import ConflictError, NotFoundError, ValidationError
from portal.infrastructure.store import EntityKind, EntityStore


def _user(username: str, nik: str) -> User:
    return User(id=None, username=username, password="hash", nik=nik, full_name=username.title())


def _category(name: str) -> ServiceCategory:
    return ServiceCategory(id=None, name=name, icon="icon")


def test_insert_assigns_increasing_ids_per_kind(store: EntityStore) -> None:
    first = store.insert(EntityKind.SERVICE_CATEGORY, _category("A"))
    second = store.insert(EntityKind.SERVICE_CATEGORY, _category("B"))
    user = store.insert(EntityKind.USER, _user("alice", "1" * 16))
    third = store.insert(EntityKind.SERVICE_CATEGORY, _category("C"))

    assert [first.id, second.id, third.id] == [1, 2, 3]
    # Users keep their own counter.
    assert user.id == 1


def test_insert_ignores_caller_supplied_id(store: EntityStore) -> None:
    created = store.insert(EntityKind.SERVICE_CATEGORY, ServiceCategory(id=42, name="A", icon="x"))

    assert created.id == 1
    assert store.get(EntityKind.SERVICE_CATEGORY, 42) is None


def test_insert_rejects_entity_of_wrong_kind(store: EntityStore) -> None:
    with pytest.raises(ValidationError):
        store.insert(EntityKind.SERVICE, _category("A"))


def test_get_returns_none_for_missing_record(store: EntityStore) -> None:
    assert store.get(EntityKind.USER, 1) is None


def test_update_with_empty_patch_returns_record_unchanged(store: EntityStore) -> None:
    created = store.insert(EntityKind.SERVICE_CATEGORY, _category("A"))

    assert store.update(EntityKind.SERVICE_CATEGORY, created.id, {}) == created


def test_update_missing_record_raises_even_with_empty_patch(store: EntityStore) -> None:
    with pytest.raises(NotFoundError):
        store.update(EntityKind.SERVICE_CATEGORY, 99, {})
    with pytest.raises(NotFoundError):
        store.update(EntityKind.SERVICE_CATEGORY, 99, {"name": "x"})


def test_update_merges_only_given_fields(store: EntityStore) -> None:
    created = store.insert(
        EntityKind.SERVICE,
        Service(id=None, name="e-KTP", description="d", category="Kependudukan", icon="i"),
    )

    updated = store.update(EntityKind.SERVICE, created.id, {"featured": True})

    assert updated.featured is True
    assert updated.name == "e-KTP"
    assert updated.category == "Kependudukan"
    assert store.get(EntityKind.SERVICE, created.id) == updated


def test_update_rejects_unknown_fields_and_id_changes(store: EntityStore) -> None:
    created = store.insert(EntityKind.SERVICE_CATEGORY, _category("A"))

    with pytest.raises(ValidationError):
        store.update(EntityKind.SERVICE_CATEGORY, created.id, {"colour": "red"})
    with pytest.raises(ValidationError):
        store.update(EntityKind.SERVICE_CATEGORY, created.id, {"id": 7})


def test_user_username_and_nik_are_unique(store: EntityStore) -> None:
    store.insert(EntityKind.USER, _user("alice", "1" * 16))

    with pytest.raises(ConflictError):
        store.insert(EntityKind.USER, _user("alice", "2" * 16))
    with pytest.raises(ConflictError):
        store.insert(EntityKind.USER, _user("bob", "1" * 16))

    bob = store.insert(EntityKind.USER, _user("bob", "2" * 16))
    with pytest.raises(ConflictError):
        store.update(EntityKind.USER, bob.id, {"username": "alice"})
    # Re-saving a record's own values is not a conflict.
    assert store.update(EntityKind.USER, bob.id, {"username": "bob"}).username == "bob"


def test_failed_insert_does_not_consume_an_id(store: EntityStore) -> None:
    store.insert(EntityKind.USER, _user("alice", "1" * 16))
    with pytest.raises(ConflictError):
        store.insert(EntityKind.USER, _user("alice", "2" * 16))

    assert store.insert(EntityKind.USER, _user("bob", "3" * 16)).id == 2


def test_scan_preserves_insertion_order_and_filters(store: EntityStore) -> None:
    for name in ("C", "A", "B"):
        store.insert(EntityKind.SERVICE_CATEGORY, _category(name))

    assert [c.name for c in store.scan(EntityKind.SERVICE_CATEGORY)] == ["C", "A", "B"]
    assert [c.name for c in store.scan(EntityKind.SERVICE_CATEGORY, lambda c: c.name != "A")] == [
        "C",
        "B",
    ]
    assert store.count(EntityKind.SERVICE_CATEGORY) == 3


def test_mark_initialized_only_succeeds_once(store: EntityStore) -> None:
    assert store.mark_initialized("sample_data") is True
    assert store.mark_initialized("sample_data") is False
    assert EntityStore().mark_initialized("sample_data") is True


def test_concurrent_inserts_never_duplicate_ids(store: EntityStore) -> None:
    threads_count = 8
    per_thread = 50
    issued: list[int] = []
    issued_lock = threading.Lock()

    def worker() -> None:
        for _ in range(per_thread):
            record = store.insert(EntityKind.SERVICE_CATEGORY, _category("x"))
            with issued_lock:
                issued.append(record.id)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(issued) == list(range(1, threads_count * per_thread + 1))


def test_records_are_detached_from_stored_state(store: EntityStore) -> None:
    form_data = {"a": 1}
    created = store.insert(
        EntityKind.APPLICATION,
        Application(
            id=None, user_id=1, service_id=1, application_number="P-250000001", form_data=form_data
        ),
    )

    form_data["from_caller"] = True
    created.form_data["from_insert"] = True
    store.get(EntityKind.APPLICATION, created.id).form_data["from_get"] = True
    store.scan(EntityKind.APPLICATION)[0].form_data["from_scan"] = True
    updated = store.update(EntityKind.APPLICATION, created.id, {"status": "processing"})
    updated.form_data["from_update"] = True

    assert store.get(EntityKind.APPLICATION, created.id).form_data == {"a": 1}
