# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from transapi.domain.products.entities import Product
from transapi.domain.products.repositories import ProductRepository


class ListProductsUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self) -> list[Product]:
        return list(self._products.list_active())


__all__ = ["ListProductsUseCase"]
