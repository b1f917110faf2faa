# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import timedelta

from transapi.domain.users.exceptions import InvalidCredentialsError
from transapi.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from transapi.shared.logging import logger


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: str
    expires_in: int


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
        token_ttl: timedelta,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._token_ttl = token_ttl
        self._decoy: str | None = None

    def execute(self, username: str, password: str) -> LoginResult:
        user = self._users.find_by_username(username)
        # Unknown usernames are verified against a decoy hash.
        stored_hash = user.password_hash if user is not None else self._decoy_hash()
        password_valid = self._password_hasher.verify(password, stored_hash) and user is not None

        if not password_valid:
            logger.info(f"auth.login: rejected username={username}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.username)
        logger.info(f"auth.login: ok username={username}")
        return LoginResult(token=token, expires_in=int(self._token_ttl.total_seconds()))

    def _decoy_hash(self) -> str:
        if self._decoy is None:
            self._decoy = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._decoy


__all__ = ["LoginResult", "LoginUserUseCase"]
