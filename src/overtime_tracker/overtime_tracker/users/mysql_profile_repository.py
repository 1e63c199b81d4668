from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository

PROFILE_COLUMNS = "profile_id, username, password_hash, role, created_at, updated_at"


def _to_profile(r: dict) -> Profile:
    return Profile(
        profile_id=int(r["profile_id"]),
        username=r["username"],
        password_hash=r["password_hash"],
        role=Role(r["role"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, profile_id: int) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {PROFILE_COLUMNS} FROM profiles WHERE profile_id=%s", (int(profile_id),))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def get_by_username(self, username: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {PROFILE_COLUMNS} FROM profiles WHERE username=%s", (username,))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def list_all(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {PROFILE_COLUMNS} FROM profiles ORDER BY created_at DESC")
            return [_to_profile(r) for r in fetchall(cur)]

    def create(self, *, username: str, password_hash: str, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO profiles(username, password_hash, role) VALUES(%s,%s,%s)",
                (username, password_hash, role.value),
            )
            return int(cur.lastrowid)

    def update_role(self, profile_id: int, *, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE profiles SET role=%s, updated_at=NOW() WHERE profile_id=%s",
                (role.value, int(profile_id)),
            )
            return cur.rowcount > 0
