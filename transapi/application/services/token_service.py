# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens signed with a shared HMAC key."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from transapi.domain.users.entities import Claims
from transapi.domain.users.exceptions import (
    InvalidTokenSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from transapi.domain.users.repositories import TokenService

HMAC_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Issues and validates JWTs carrying ``sub`` (username), ``iat`` and ``exp``.

    Validation only accepts the configured algorithm, so a token whose header
    names ``none``, an asymmetric algorithm or another HMAC variant is
    rejected before its claims are looked at. Expiry is checked against the
    injected clock, which keeps validity a pure function of token, time and
    secret.
    """

    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(f"unsupported token algorithm: {algorithm}")
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, username: str) -> str:
        issued_at = self._clock()
        payload = {
            "sub": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> Claims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"], "verify_exp": False, "verify_iat": False},
            )
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            raise InvalidTokenSignatureError() from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError() from exc

        username = payload.get("sub")
        exp = payload.get("exp")
        iat = payload.get("iat", exp)
        if not isinstance(username, str) or not username:
            raise MalformedTokenError()
        if not isinstance(exp, (int, float)) or not isinstance(iat, (int, float)):
            raise MalformedTokenError()

        expires_at = datetime.fromtimestamp(exp, UTC)
        if self._clock() >= expires_at:
            raise TokenExpiredError()

        return Claims(
            username=username,
            issued_at=datetime.fromtimestamp(iat, UTC),
            expires_at=expires_at,
        )
