from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: a login account.

    Note: plain data object (no DB access code here).
    """

    profile_id: int
    username: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class SessionUser:
    """The signed-in user, passed explicitly into services that need it."""

    profile_id: int
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
