from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from werkzeug.security import check_password_hash

from ..common.validators import FieldRules, require_non_empty, validate_form
from ..core.exceptions import AuthenticationError, FormValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Username atau password salah!"

LOGIN_RULES = (
    FieldRules("username").check(require_non_empty, "Username wajib diisi!"),
    FieldRules("password").check(require_non_empty, "Password wajib diisi!"),
)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the session after login."""

    user_id: int
    username: str


class AuthService:
    """Use case: authenticate an admin (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, form: Mapping[str, str]) -> SessionUser:
        errors = validate_form(form, LOGIN_RULES)
        if errors:
            raise FormValidationError(errors)
        return self.authenticate(form.get("username", "").strip(), form.get("password", ""))

    def authenticate(self, username: str, password: str) -> SessionUser:
        # Same message for unknown user and wrong password.
        user = self._users.get_by_username(username)
        if not user:
            logger.info("Login rejected: unknown username")
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Login rejected for user_id=%s", user.user_id)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Login ok for user_id=%s", user.user_id)
        return SessionUser(user_id=user.user_id, username=user.username)
