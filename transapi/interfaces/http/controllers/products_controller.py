# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request

from transapi.application.use_cases.products import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from transapi.domain.users.repositories import Authenticator
from transapi.infrastructure.auth import auth_required, current_principal
from transapi.interfaces.http.dto.products import ProductDTO, ProductRequestDTO
from transapi.shared.errors.validation import parse_body
from transapi.shared.logging import logger


def _dump(product) -> dict:
    return ProductDTO.from_entity(product).model_dump(mode="json")


def _actor() -> str:
    principal = current_principal()
    if principal is None:
        return "-"
    return principal.username or principal.scheme


class ProductsController:
    def __init__(
        self,
        *,
        authenticator: Authenticator,
        create_use_case: CreateProductUseCase,
        list_use_case: ListProductsUseCase,
        get_use_case: GetProductUseCase,
        update_use_case: UpdateProductUseCase,
        delete_use_case: DeleteProductUseCase,
    ) -> None:
        self._authenticator = authenticator
        self._create = create_use_case
        self._list = list_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def as_blueprint(self) -> Blueprint:
        guard = auth_required(self._authenticator)
        bp = Blueprint("products", __name__, url_prefix="/api")
        bp.add_url_rule("/products", view_func=guard(self.create), methods=["POST"])
        bp.add_url_rule("/products", view_func=guard(self.list_products), methods=["GET"])
        bp.add_url_rule(
            "/products/<int:product_id>",
            view_func=guard(self.get),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/products/<int:product_id>",
            view_func=guard(self.update),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/products/<int:product_id>",
            view_func=guard(self.delete),
            methods=["DELETE"],
        )
        return bp

    def create(self) -> tuple[Response, int]:
        dto = parse_body(ProductRequestDTO, request.get_json(silent=True))
        product = self._create.execute(dto.to_draft())
        logger.debug(f"products.create: by={_actor()} id={product.id}")
        return jsonify(_dump(product)), 201

    def list_products(self) -> Response:
        t0 = perf_counter()
        items = self._list.execute()
        dt = (perf_counter() - t0) * 1000
        logger.info(f"products.list: ok (by={_actor()}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([_dump(product) for product in items])

    def get(self, product_id: int) -> Response:
        return jsonify(_dump(self._get.execute(product_id)))

    def update(self, product_id: int) -> Response:
        dto = parse_body(ProductRequestDTO, request.get_json(silent=True))
        product = self._update.execute(product_id, dto.to_draft())
        return jsonify(_dump(product))

    def delete(self, product_id: int) -> tuple[str, int]:
        self._delete.execute(product_id)
        return "", 204
