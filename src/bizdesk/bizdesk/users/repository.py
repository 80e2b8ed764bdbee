from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserDirectory(Protocol):
    """User-directory port.

    Payroll issues create/update/delete requests through this interface and
    never stores users itself.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, user: User) -> None:
        raise NotImplementedError

    def update_user(self, user: User) -> None:
        raise NotImplementedError

    def delete_user(self, user_id: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError
