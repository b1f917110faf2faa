# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from transapi.domain.products.entities import Product
from transapi.domain.products.exceptions import ProductNotFoundError
from transapi.domain.products.repositories import ProductRepository


class GetProductUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product


__all__ = ["GetProductUseCase"]
