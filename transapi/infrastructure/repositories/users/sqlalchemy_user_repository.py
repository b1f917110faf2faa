# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from transapi.domain.users.entities import User as DomainUser
from transapi.domain.users.exceptions import UserAlreadyExistsError
from transapi.domain.users.repositories import UserRepository
from transapi.infrastructure.db.models import User
from transapi.infrastructure.repositories._mapping import as_utc, as_utc_or_none
from transapi.infrastructure.unit_of_work import unit_of_work_scope
from transapi.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        deleted_at=as_utc_or_none(row.deleted_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_username") as session:
            row = session.scalars(
                select(User).where(User.username == username, User.deleted_at.is_(None))
            ).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_id") as session:
            row = session.scalars(
                select(User).where(User.id == user_id, User.deleted_at.is_(None))
            ).first()
            return _to_domain(row) if row else None

    def add(self, username: str, password_hash: str) -> DomainUser:
        with unit_of_work_scope(self._session_factory, "users.add") as session:
            row = User(username=username, password_hash=password_hash)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                logger.info(f"users.add: unique violation username={username}")
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)
