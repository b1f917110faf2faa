# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # Secrets and translator credentials
    (r"(secret[_-]?key\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-]{8,})(['\"]?)", r"\1***REDACTED***\3"),
    (r"(shared[_-]?secret\s*[:=]\s*['\"]?)([^'\"\s,]{4,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(x-scr\s*[:=]\s*['\"]?)([^'\"\s,]{4,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(appid\s*[:=]\s*['\"]?)([a-zA-Z0-9]{6,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(sign\s*[:=]\s*['\"]?)([a-f0-9]{32})(['\"]?)", r"\1***REDACTED***\3"),

    # Tokens
    (r"(bearer\s+)([a-zA-Z0-9_\-\.]{20,})", r"\1***REDACTED***", re.IGNORECASE),
    (r"(token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),
    # Bare JWTs
    (r"\beyJ[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+\.[a-zA-Z0-9_\-]+", r"***JWT***"),

    # Passwords
    (r"(password\s*[:=]\s*['\"]?)([^'\"]{6,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Database URLs with credentials
    (r"(postgres(?:ql)?|mysql|mongodb)(\+\w+)?://([^:]+):([^@]+)@", r"\1\2://\3:***REDACTED***@"),

    # Authorization headers
    (r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
]

_COMPILED = [
    (re.compile(pattern_tuple[0], pattern_tuple[2] if len(pattern_tuple) == 3 else 0), pattern_tuple[1])
    for pattern_tuple in SENSITIVE_PATTERNS
]


def sanitize_message(message: str) -> str:
    sanitized = message

    for pattern, replacement in _COMPILED:
        sanitized = pattern.sub(replacement, sanitized)

    return sanitized


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
