# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from transapi.domain.users.entities import Principal
from transapi.domain.users.repositories import Authenticator
from transapi.shared.errors.base import AuthError
from transapi.shared.logging import logger


def _client_ip() -> str | None:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr


def auth_required(authenticator: Authenticator) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Run ``authenticator`` before the view; any ``AuthError`` halts with 401."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                principal = authenticator.authenticate(request.headers)
            except AuthError as exc:
                logger.warning(
                    f"Auth failed ({exc.reason}) on {request.method} {request.path} "
                    f"from {_client_ip()}"
                )
                raise

            g.principal = principal
            g.username = principal.username
            logger.debug(
                f"Auth OK: scheme={principal.scheme} user={principal.username} "
                f"{request.method} {request.path}"
            )
            return func(*args, **kwargs)

        return wrapper

    return decorator


def current_principal() -> Principal | None:
    return getattr(g, "principal", None)


__all__ = ["auth_required", "current_principal"]
