# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from transapi.shared.errors.base import AuthError, ConflictError, DomainError


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "Username is already taken"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid username or password"


class MissingTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__("missing_token", message="Bearer token required")


class InvalidTokenSignatureError(AuthError):
    def __init__(self) -> None:
        super().__init__("invalid_signature", message="Token signature is invalid")


class TokenExpiredError(AuthError):
    def __init__(self) -> None:
        super().__init__("expired", message="Token has expired")


class MalformedTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__("malformed", message="Token is malformed")


class InvalidSharedSecretError(AuthError):
    def __init__(self, header: str) -> None:
        super().__init__("invalid_shared_secret", message=f"invalid {header} header")
