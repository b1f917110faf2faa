# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth import LoginRequestDTO, LoginResponseDTO, RegisterRequestDTO, RegisterResponseDTO
from .products import ProductDTO, ProductRequestDTO
from .translation import TranslateRequestDTO, TranslateResponseDTO

__all__ = [
    "LoginRequestDTO",
    "LoginResponseDTO",
    "ProductDTO",
    "ProductRequestDTO",
    "RegisterRequestDTO",
    "RegisterResponseDTO",
    "TranslateRequestDTO",
    "TranslateResponseDTO",
]
