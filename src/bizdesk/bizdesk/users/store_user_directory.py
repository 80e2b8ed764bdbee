from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import PRIMARY_OWNER_USER_ID, USERS_KEY
from ..core.enums import Role
from ..core.exceptions import NotFound, ValidationError
from ..storage.port import KeyValueStore
from .model import User
from .repository import UserDirectory

logger = logging.getLogger("bizdesk.users")


def primary_owner_user() -> User:
    """Login behind the reserved owner employee; seeded into a fresh store."""
    return User(id=PRIMARY_OWNER_USER_ID, username="admin", name="General Manager", role=Role.OWNER)


def user_to_doc(user: User) -> dict:
    doc = {
        "id": user.id,
        "username": user.username,
        "name": user.name,
        "role": user.role.value,
        "permissions": list(user.permissions),
    }
    if user.password_hash:
        doc["password"] = user.password_hash
    return doc


def user_from_doc(doc: dict) -> User:
    return User(
        id=str(doc["id"]),
        username=doc["username"],
        name=doc.get("name") or doc["username"],
        role=Role(doc["role"]),
        password_hash=doc.get("password") or None,
        permissions=tuple(doc.get("permissions") or ()),
    )


class StoredUserDirectory(UserDirectory):
    """User directory persisted as one list under ``users_data_v3``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load(self) -> list[User]:
        docs = self._store.load(USERS_KEY, None)
        if docs is None:
            return [primary_owner_user()]
        return [user_from_doc(d) for d in docs]

    def _save(self, users: Sequence[User]) -> None:
        self._store.save(USERS_KEY, [user_to_doc(u) for u in users])

    def get_by_id(self, user_id: str) -> Optional[User]:
        for user in self._load():
            if user.id == user_id:
                return user
        return None

    def get_by_username(self, username: str) -> Optional[User]:
        for user in self._load():
            if user.username == username:
                return user
        return None

    def list_all(self) -> Sequence[User]:
        return tuple(self._load())

    def create_user(self, user: User) -> None:
        users = self._load()
        if any(u.id == user.id for u in users):
            raise ValidationError(f"User {user.id} already exists")
        if any(u.username == user.username for u in users):
            raise ValidationError("Username already taken")
        self._save([*users, user])
        logger.info("Created user id=%s role=%s", user.id, user.role.value)

    def update_user(self, user: User) -> None:
        users = self._load()
        if not any(u.id == user.id for u in users):
            raise NotFound(f"User {user.id} does not exist")
        if any(u.username == user.username and u.id != user.id for u in users):
            raise ValidationError("Username already taken")
        self._save([user if u.id == user.id else u for u in users])
        logger.info("Updated user id=%s role=%s", user.id, user.role.value)

    def delete_user(self, user_id: str) -> None:
        users = self._load()
        remaining = [u for u in users if u.id != user_id]
        if len(remaining) == len(users):
            raise NotFound(f"User {user_id} does not exist")
        self._save(remaining)
        logger.info("Deleted user id=%s", user_id)
