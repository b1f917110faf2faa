# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from transapi.domain.products.entities import Product as DomainProduct
from transapi.domain.products.entities import ProductDraft
from transapi.domain.products.repositories import ProductRepository
from transapi.infrastructure.db.models import Product
from transapi.infrastructure.repositories._mapping import as_utc, as_utc_or_none
from transapi.infrastructure.unit_of_work import unit_of_work_scope

# Largest value a SQL BIGINT / SQLite INTEGER primary key can hold.
_MAX_ROW_ID = 2**63 - 1


def _to_domain(row: Product) -> DomainProduct:
    return DomainProduct(
        id=row.id,
        name=row.name,
        description=row.description,
        price=float(row.price),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        deleted_at=as_utc_or_none(row.deleted_at),
    )


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    @staticmethod
    def _active(session: Session, product_id: int) -> Product | None:
        if not 0 < product_id <= _MAX_ROW_ID:
            return None
        return session.scalars(
            select(Product).where(Product.id == product_id, Product.deleted_at.is_(None))
        ).first()

    def add(self, draft: ProductDraft) -> DomainProduct:
        with unit_of_work_scope(self._session_factory, "products.add") as session:
            row = Product(name=draft.name, description=draft.description, price=draft.price)
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def list_active(self) -> Sequence[DomainProduct]:
        with unit_of_work_scope(self._session_factory, "products.list") as session:
            rows = session.scalars(
                select(Product).where(Product.deleted_at.is_(None)).order_by(Product.id.asc())
            ).all()
            return [_to_domain(row) for row in rows]

    def get(self, product_id: int) -> DomainProduct | None:
        with unit_of_work_scope(self._session_factory, "products.get") as session:
            row = self._active(session, product_id)
            return _to_domain(row) if row else None

    def replace(self, product_id: int, draft: ProductDraft) -> DomainProduct | None:
        with unit_of_work_scope(self._session_factory, "products.replace") as session:
            row = self._active(session, product_id)
            if row is None:
                return None
            row.name = draft.name
            row.description = draft.description
            row.price = draft.price
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def soft_delete(self, product_id: int) -> bool:
        with unit_of_work_scope(self._session_factory, "products.soft_delete") as session:
            row = self._active(session, product_id)
            if row is None:
                return False
            now = datetime.now(UTC)
            row.deleted_at = now
            row.updated_at = now
            return True
