from __future__ import annotations

from datetime import datetime

import pytest

from src.overtime_tracker.overtime_tracker.core.enums import Role
from src.overtime_tracker.overtime_tracker.users.model import SessionUser


@pytest.fixture
def admin_user() -> SessionUser:
    return SessionUser(profile_id=1, username="admin", role=Role.ADMIN)


@pytest.fixture
def regular_user() -> SessionUser:
    return SessionUser(profile_id=2, username="clerk", role=Role.USER)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 20, 18, 0, 0)
