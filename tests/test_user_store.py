"""Tests for the in-memory user store."""

import threading

import pytest

from user_api.models.user import User
from user_api.services.user_store import InMemoryUserStore


@pytest.mark.unit
def test_seed_data(store: InMemoryUserStore) -> None:
    users = store.list_users()

    assert [(u.id, u.name, u.department) for u in users] == [
        (1, "John Doe", "Engineering"),
        (2, "Jane Smith", "Marketing"),
    ]
    assert all(u.active for u in users)
    assert store.next_id == 3


@pytest.mark.unit
def test_unseeded_store_is_empty(empty_store: InMemoryUserStore) -> None:
    assert empty_store.list_users() == []
    assert empty_store.count() == 0
    assert empty_store.next_id == 1


@pytest.mark.unit
def test_create_assigns_counter_value(store: InMemoryUserStore) -> None:
    before = store.next_id

    created = store.create(User(name="Alice Brown", email="alice@example.com"))

    assert created.id == before
    assert store.next_id == before + 1
    assert store.count() == 3
    assert store.list_users()[-1].name == "Alice Brown"


@pytest.mark.unit
def test_create_ids_increase_by_one(empty_store: InMemoryUserStore) -> None:
    ids = [empty_store.create(User(name=f"User {i}", email=f"u{i}@example.com")).id for i in range(3)]
    assert ids == [1, 2, 3]


@pytest.mark.unit
def test_create_keeps_supplied_id_without_touching_counter(store: InMemoryUserStore) -> None:
    created = store.create(User(id=42, name="Bob", email="bob@example.com"))

    assert created.id == 42
    assert store.next_id == 3


@pytest.mark.unit
def test_create_accepts_duplicate_supplied_id(store: InMemoryUserStore) -> None:
    store.create(User(id=1, name="Another John", email="john2@example.com"))

    assert store.count() == 3
    # Lookup returns the first match in insertion order
    assert store.get(1).name == "John Doe"


@pytest.mark.unit
def test_create_does_not_mutate_argument(store: InMemoryUserStore) -> None:
    candidate = User(name="Alice Brown", email="alice@example.com")
    store.create(candidate)
    assert candidate.id is None


@pytest.mark.unit
def test_get(store: InMemoryUserStore) -> None:
    user = store.get(2)
    assert user is not None
    assert user.name == "Jane Smith"
    assert user.email == "jane@example.com"


@pytest.mark.unit
def test_get_missing_returns_none(store: InMemoryUserStore) -> None:
    assert store.get(999) is None


@pytest.mark.unit
def test_reads_return_copies(store: InMemoryUserStore) -> None:
    listed = store.list_users()
    listed[0].name = "Mallory"
    listed.clear()

    fetched = store.get(1)
    fetched.active = False

    assert store.get(1).name == "John Doe"
    assert store.get(1).active is True
    assert store.count() == 2


@pytest.mark.unit
def test_update_replaces_fields_and_keeps_id(store: InMemoryUserStore) -> None:
    patch = User(id=77, name="Updated Name", email="updated@example.com", department=None, active=False)

    updated = store.update(1, patch)

    assert updated is not None
    assert updated.id == 1
    assert updated.name == "Updated Name"
    assert updated.email == "updated@example.com"
    assert updated.department is None
    assert updated.active is False
    assert store.get(1).name == "Updated Name"
    assert store.exists_by_id(77) is False


@pytest.mark.unit
def test_update_missing_returns_none(store: InMemoryUserStore) -> None:
    assert store.update(999, User(name="Nobody", email="nobody@example.com")) is None
    assert store.count() == 2


@pytest.mark.unit
def test_delete(store: InMemoryUserStore) -> None:
    assert store.delete(1) is True
    assert store.get(1) is None
    assert [u.id for u in store.list_users()] == [2]


@pytest.mark.unit
def test_delete_missing_leaves_store_unchanged(store: InMemoryUserStore) -> None:
    before = [u.model_dump() for u in store.list_users()]

    assert store.delete(999) is False
    assert [u.model_dump() for u in store.list_users()] == before


@pytest.mark.unit
def test_filter_by_department(store: InMemoryUserStore) -> None:
    engineering = store.filter_by_department("Engineering")

    assert [u.name for u in engineering] == ["John Doe"]
    assert store.filter_by_department("Nonexistent") == []


@pytest.mark.unit
def test_filter_by_department_is_case_sensitive(store: InMemoryUserStore) -> None:
    assert store.filter_by_department("engineering") == []


@pytest.mark.unit
def test_filter_by_department_skips_users_without_department(store: InMemoryUserStore) -> None:
    store.create(User(name="No Dept", email="nodept@example.com"))
    assert [u.name for u in store.filter_by_department("Engineering")] == ["John Doe"]


@pytest.mark.unit
def test_active_counts(store: InMemoryUserStore) -> None:
    store.create(User(name="Inactive", email="inactive@example.com", active=False))

    assert store.count() == 3
    assert store.count_active() == 2
    assert [u.name for u in store.list_active()] == ["John Doe", "Jane Smith"]


@pytest.mark.unit
def test_average_name_length_empty_store(empty_store: InMemoryUserStore) -> None:
    assert empty_store.average_name_length() == 0.0


@pytest.mark.unit
def test_average_name_length(empty_store: InMemoryUserStore) -> None:
    empty_store.create(User(name="Jo", email="jo@example.com"))
    empty_store.create(User(name="Abcde", email="abcde@example.com"))

    assert empty_store.average_name_length() == 3.5


@pytest.mark.unit
def test_exists_checks(store: InMemoryUserStore) -> None:
    assert store.exists_by_id(1) is True
    assert store.exists_by_id(3) is False
    assert store.exists_by_email("jane@example.com") is True
    assert store.exists_by_email("JANE@example.com") is False


@pytest.mark.unit
def test_concurrent_creates_get_distinct_ids(empty_store: InMemoryUserStore) -> None:
    def worker(offset: int) -> None:
        for i in range(50):
            empty_store.create(User(name=f"User {offset}-{i}", email=f"u{offset}-{i}@example.com"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [u.id for u in empty_store.list_users()]
    assert sorted(ids) == list(range(1, 201))
    assert empty_store.next_id == 201


@pytest.mark.unit
def test_user_equality_is_by_id() -> None:
    a = User(id=1, name="John Doe", email="john@example.com")
    b = User(id=1, name="Someone Else", email="else@example.com", active=False)
    c = User(id=2, name="John Doe", email="john@example.com")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert User(name="x", email="x@y") != User(name="x", email="x@y")


@pytest.mark.unit
def test_average_name_length_counts_code_points(empty_store: InMemoryUserStore) -> None:
    empty_store.create(User(name="\U0001f600\U0001f600", email="smile@example.com"))
    assert empty_store.average_name_length() == 2.0
