# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from transapi.domain.products.entities import Product, ProductDraft
from transapi.domain.products.exceptions import ProductNotFoundError
from transapi.domain.products.repositories import ProductRepository
from transapi.shared.logging import logger


class UpdateProductUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int, draft: ProductDraft) -> Product:
        product = self._products.replace(product_id, draft)
        if product is None:
            logger.info(f"products.update: not_found id={product_id}")
            raise ProductNotFoundError(product_id)
        logger.info(f"products.update: ok id={product_id}")
        return product


__all__ = ["UpdateProductUseCase"]
