from __future__ import annotations

import pytest

from src.bizdesk.bizdesk.core.constants import PRIMARY_OWNER_USER_ID, USERS_KEY
from src.bizdesk.bizdesk.core.enums import Role
from src.bizdesk.bizdesk.core.exceptions import NotFound, ValidationError
from src.bizdesk.bizdesk.users.model import User
from src.bizdesk.bizdesk.users.store_user_directory import StoredUserDirectory


@pytest.fixture
def directory(store):
    return StoredUserDirectory(store)


def _user(user_id: str = "u1", username: str = "sara", role: Role = Role.SALES) -> User:
    return User(id=user_id, username=username, name="Sara", role=role, password_hash="hash")


def test_fresh_store_holds_only_the_primary_owner(directory):
    owner = directory.get_by_id(PRIMARY_OWNER_USER_ID)

    assert [u.id for u in directory.list_all()] == [PRIMARY_OWNER_USER_ID]
    assert owner.role == Role.OWNER
    assert owner.username == "admin"
    assert owner.password_hash is None


def test_create_and_lookup(directory, store):
    directory.create_user(_user())

    assert directory.get_by_id("u1").username == "sara"
    assert directory.get_by_username("sara").id == "u1"
    assert directory.get_by_username("nobody") is None
    docs = {d["id"]: d for d in store.load(USERS_KEY)}
    assert set(docs) == {PRIMARY_OWNER_USER_ID, "u1"}
    assert docs["u1"] == {
        "id": "u1",
        "username": "sara",
        "name": "Sara",
        "role": "SALES",
        "permissions": [],
        "password": "hash",
    }


@pytest.mark.parametrize("clash", [_user("u1", "other"), _user("u2", "sara"), _user("u3", "admin")])
def test_create_rejects_duplicate_id_or_username(directory, clash):
    directory.create_user(_user())
    with pytest.raises(ValidationError):
        directory.create_user(clash)
    assert len(directory.list_all()) == 2


def test_update_and_delete(directory):
    directory.create_user(_user())

    directory.update_user(_user(role=Role.ACCOUNTANT))
    assert directory.get_by_id("u1").role == Role.ACCOUNTANT

    directory.delete_user("u1")
    assert [u.id for u in directory.list_all()] == [PRIMARY_OWNER_USER_ID]


def test_saved_empty_list_is_not_reseeded(directory, store):
    store.save(USERS_KEY, [])
    assert directory.list_all() == ()


def test_update_or_delete_missing_user(directory):
    with pytest.raises(NotFound):
        directory.update_user(_user())
    with pytest.raises(NotFound):
        directory.delete_user("u1")
