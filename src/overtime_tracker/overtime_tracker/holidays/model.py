from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    holiday_id: int
    holiday_date: date
    description: Optional[str] = None
    created_at: Optional[datetime] = None
