from __future__ import annotations

import logging
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_admin, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import Profile, SessionUser
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign in / sign up."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, username: str, password: str) -> SessionUser:
        profile = self._profiles.get_by_username((username or "").strip())
        if not profile:
            raise AuthenticationError("Wrong username or password")

        try:
            ok = check_password_hash(profile.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Wrong username or password")

        return SessionUser(profile_id=profile.profile_id, username=profile.username, role=profile.role)

    def sign_up(self, username: str, password: str) -> SessionUser:
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if self._profiles.get_by_username(username):
            raise ValidationError("Username already exists")

        profile_id = self._profiles.create(
            username=username,
            password_hash=generate_password_hash(password),
            role=Role.USER,
        )
        logger.info("Profile %s signed up", username)
        return SessionUser(profile_id=profile_id, username=username, role=Role.USER)


class ProfileService:
    """Use case: manage account roles (admin)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def list_all(self, *, current_user: SessionUser) -> Sequence[Profile]:
        require_admin(current_user)
        return self._profiles.list_all()

    def change_role(self, *, current_user: SessionUser, profile_id: int, role: str) -> None:
        require_admin(current_user)
        try:
            new_role = Role(role)
        except ValueError:
            raise ValidationError(f"Unknown role: {role!r}")

        if int(profile_id) == current_user.profile_id and new_role != Role.ADMIN:
            raise ValidationError("You cannot remove your own admin role")

        if not self._profiles.update_role(int(profile_id), role=new_role):
            raise NotFoundError("Profile not found")
        logger.info("Profile %s role set to %s by %s", profile_id, new_role.value, current_user.username)
