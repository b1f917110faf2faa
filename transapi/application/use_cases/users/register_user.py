# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from transapi.domain.users.entities import User
from transapi.domain.users.exceptions import UserAlreadyExistsError
from transapi.domain.users.repositories import PasswordHasher, UserRepository
from transapi.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        existing = self._users.find_by_username(username)
        if existing is not None:
            logger.info(f"auth.register: conflict username={username}")
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        # The repository re-checks uniqueness against the unique constraint.
        user = self._users.add(username, hashed)
        logger.info(f"auth.register: ok user_id={user.id}")
        return user


__all__ = ["RegisterUserUseCase"]
