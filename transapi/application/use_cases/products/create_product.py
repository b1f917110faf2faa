# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from transapi.domain.products.entities import Product, ProductDraft
from transapi.domain.products.repositories import ProductRepository
from transapi.shared.logging import logger


class CreateProductUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, draft: ProductDraft) -> Product:
        product = self._products.add(draft)
        logger.info(f"products.create: ok id={product.id}")
        return product


__all__ = ["CreateProductUseCase"]
