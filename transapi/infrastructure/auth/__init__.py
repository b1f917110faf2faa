# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authenticators import (
    SharedSecretAuthenticator,
    TokenAuthenticator,
    build_authenticator,
)
from .gate import auth_required, current_principal

__all__ = [
    "SharedSecretAuthenticator",
    "TokenAuthenticator",
    "auth_required",
    "build_authenticator",
    "current_principal",
]
