from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: login account.

    Owned by the user directory; other modules only keep its id.
    """

    id: str
    username: str
    name: str
    role: Role
    password_hash: Optional[str] = None
    permissions: tuple[str, ...] = ()


@dataclass(frozen=True)
class Credentials:
    """What an operator types when giving an employee a login."""

    username: str
    role: Role = Role.VIEWER
    password: Optional[str] = None
