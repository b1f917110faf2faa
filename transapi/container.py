# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container.

Every service is built lazily from the ``AppConfig`` the container was given,
so tests can swap any attribute (``container.translator = FakeTranslator()``)
before the first request touches it.
"""

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from transapi.application.services.password_hashing import WerkzeugPasswordHasher
from transapi.application.services.token_service import JwtTokenService
from transapi.application.use_cases.products import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from transapi.application.use_cases.translation import TranslateTextsUseCase
from transapi.application.use_cases.users.login_user import LoginUserUseCase
from transapi.application.use_cases.users.register_user import RegisterUserUseCase
from transapi.domain.translation.ports import Translator
from transapi.domain.users.repositories import Authenticator
from transapi.infrastructure.auth import build_authenticator
from transapi.infrastructure.db import create_db_engine, create_session_factory
from transapi.infrastructure.repositories.products.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from transapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from transapi.infrastructure.translation import HttpTranslator
from transapi.interfaces.http.controllers.auth_controller import AuthController
from transapi.interfaces.http.controllers.misc_controller import MiscController
from transapi.interfaces.http.controllers.products_controller import ProductsController
from transapi.interfaces.http.controllers.translate_controller import TranslateController
from transapi.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Infrastructure

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.secret_key,
            algorithm=self.config.auth.jwt_algorithm,
            ttl=self.config.auth.token_ttl,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository(self.session_factory)

    @cached_property
    def translator(self) -> Translator:
        return HttpTranslator(self.config.translator)

    @cached_property
    def products_authenticator(self) -> Authenticator:
        return build_authenticator(
            self.config.auth.products_strategy,
            config=self.config.auth,
            tokens=self.token_service,
        )

    @cached_property
    def translate_authenticator(self) -> Authenticator:
        return build_authenticator(
            self.config.auth.translate_strategy,
            config=self.config.auth,
            tokens=self.token_service,
        )

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
            token_ttl=self.config.auth.token_ttl,
        )

    @cached_property
    def translate_texts_use_case(self) -> TranslateTextsUseCase:
        return TranslateTextsUseCase(
            self.translator,
            metrics_enabled=self.config.observability.metrics_enabled,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        products = self.product_repository
        return ProductsController(
            authenticator=self.products_authenticator,
            create_use_case=CreateProductUseCase(products),
            list_use_case=ListProductsUseCase(products),
            get_use_case=GetProductUseCase(products),
            update_use_case=UpdateProductUseCase(products),
            delete_use_case=DeleteProductUseCase(products),
        )

    @cached_property
    def translate_controller(self) -> TranslateController:
        return TranslateController(
            authenticator=self.translate_authenticator,
            translate_use_case=self.translate_texts_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            engine=self.engine,
            metrics_enabled=self.config.observability.metrics_enabled,
        )

    def controllers(self) -> list:
        return [
            self.misc_controller,
            self.auth_controller,
            self.products_controller,
            self.translate_controller,
        ]
