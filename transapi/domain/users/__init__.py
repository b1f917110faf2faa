# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Claims, Principal, User
from .repositories import Authenticator, PasswordHasher, TokenService, UserRepository

__all__ = [
    "Authenticator",
    "Claims",
    "PasswordHasher",
    "Principal",
    "TokenService",
    "User",
    "UserRepository",
]
