"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from transapi.domain.users.repositories import PasswordHasher
from transapi.shared.errors.base import HashError
from transapi.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = "pbkdf2:sha256:600000") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password, method=self._method))
        except (OSError, ValueError, NotImplementedError) as exc:
            logger.error(f"password.hash: failed method={self._method.split(':')[0]} ({type(exc).__name__})")
            raise HashError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            return False
