# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from transapi.domain.products.exceptions import ProductNotFoundError
from transapi.domain.products.repositories import ProductRepository
from transapi.shared.logging import logger


class DeleteProductUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int) -> None:
        if not self._products.soft_delete(product_id):
            logger.info(f"products.delete: not_found id={product_id}")
            raise ProductNotFoundError(product_id)
        logger.info(f"products.delete: ok id={product_id}")


__all__ = ["DeleteProductUseCase"]
