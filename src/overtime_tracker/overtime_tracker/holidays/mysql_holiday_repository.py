from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


def _to_holiday(r: dict) -> Holiday:
    return Holiday(
        holiday_id=int(r["holiday_id"]),
        holiday_date=r["holiday_date"],
        description=r.get("description"),
        created_at=r.get("created_at"),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_id, holiday_date, description, created_at FROM holidays ORDER BY holiday_date DESC"
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def list_in_range(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, holiday_date, description, created_at
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date
                """,
                (start_date, end_date),
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_id, holiday_date, description, created_at FROM holidays WHERE holiday_date=%s",
                (holiday_date,),
            )
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def create(self, *, holiday_date: date, description: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO holidays(holiday_date, description) VALUES(%s,%s)",
                (holiday_date, description),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            return cur.rowcount > 0
