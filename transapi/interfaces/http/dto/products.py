# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from transapi.domain.products.entities import Product, ProductDraft


class ProductRequestDTO(BaseModel):
    """Body of POST and PUT; PUT replaces all three fields."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10_000)
    price: float = Field(ge=0, allow_inf_nan=False, strict=True)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name cannot be empty")
        return value

    def to_draft(self) -> ProductDraft:
        return ProductDraft(name=self.name, price=self.price, description=self.description)


class ProductDTO(BaseModel):
    id: int
    name: str
    description: str | None
    price: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
