# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_product import CreateProductUseCase
from .delete_product import DeleteProductUseCase
from .get_product import GetProductUseCase
from .list_products import ListProductsUseCase
from .update_product import UpdateProductUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "UpdateProductUseCase",
]
