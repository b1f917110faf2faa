# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Product, ProductDraft
from .exceptions import ProductNotFoundError
from .repositories import ProductRepository

__all__ = ["Product", "ProductDraft", "ProductNotFoundError", "ProductRepository"]
