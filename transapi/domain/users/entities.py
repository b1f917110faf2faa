# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(slots=True, frozen=True)
class Principal:
    """Identity established by an authenticator for the current request."""

    scheme: str
    username: str | None = None


@dataclass(slots=True, frozen=True)
class Claims:

    username: str
    issued_at: datetime
    expires_at: datetime
