# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from transapi.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class ProductDraft:
    """Client-supplied product fields; replaces all three on update."""

    name: str
    price: float
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvariantViolation("must not be empty", field="name")
        if isinstance(self.price, bool) or not isinstance(self.price, (int, float)):
            raise InvariantViolation("must be a number", field="price")
        if not math.isfinite(self.price) or self.price < 0:
            raise InvariantViolation("must be a finite, non-negative number", field="price")


@dataclass(slots=True, frozen=True)
class Product:

    id: int
    name: str
    description: str | None
    price: float
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
