from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Profile


class ProfileRepository(Protocol):
    """Repository interface for login profiles."""

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Profile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Profile]:
        raise NotImplementedError

    def create(self, *, username: str, password_hash: str, role: Role) -> int:
        raise NotImplementedError

    def update_role(self, profile_id: int, *, role: Role) -> bool:
        raise NotImplementedError
