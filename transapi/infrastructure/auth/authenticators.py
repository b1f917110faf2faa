# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request authenticators selectable per route group."""

from __future__ import annotations

import hmac
from collections.abc import Mapping

from transapi.domain.users.entities import Principal
from transapi.domain.users.exceptions import InvalidSharedSecretError, MissingTokenError
from transapi.domain.users.repositories import Authenticator, TokenService
from transapi.shared.config import AuthConfig

_BEARER_PREFIX = "Bearer "


class TokenAuthenticator(Authenticator):
    scheme = "token"

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, headers: Mapping[str, str]) -> Principal:
        auth = headers.get("Authorization", "")
        if not auth.startswith(_BEARER_PREFIX):
            raise MissingTokenError()
        token = auth[len(_BEARER_PREFIX):].strip()
        if not token:
            raise MissingTokenError()

        claims = self._tokens.validate(token)
        return Principal(scheme=self.scheme, username=claims.username)


class SharedSecretAuthenticator(Authenticator):
    scheme = "shared_secret"

    def __init__(self, *, secret: str, header: str = "x-scr") -> None:
        if not secret:
            raise ValueError("shared secret must not be empty")
        self._secret = secret.encode()
        self._header = header

    def authenticate(self, headers: Mapping[str, str]) -> Principal:
        presented = headers.get(self._header, "")
        if not hmac.compare_digest(presented.encode(), self._secret):
            raise InvalidSharedSecretError(self._header)
        return Principal(scheme=self.scheme)


def build_authenticator(strategy: str, *, config: AuthConfig, tokens: TokenService) -> Authenticator:
    if strategy == TokenAuthenticator.scheme:
        return TokenAuthenticator(tokens)
    if strategy == SharedSecretAuthenticator.scheme:
        return SharedSecretAuthenticator(
            secret=config.shared_secret, header=config.shared_secret_header
        )
    raise ValueError(f"unknown auth strategy: {strategy}")


__all__ = ["SharedSecretAuthenticator", "TokenAuthenticator", "build_authenticator"]
