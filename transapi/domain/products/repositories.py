# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Product, ProductDraft


class ProductRepository(Protocol):
    """Record store for products; tombstoned rows are never returned."""

    def add(self, draft: ProductDraft) -> Product: ...
    def list_active(self) -> Sequence[Product]: ...
    def get(self, product_id: int) -> Product | None: ...
    def replace(self, product_id: int, draft: ProductDraft) -> Product | None: ...
    def soft_delete(self, product_id: int) -> bool: ...
