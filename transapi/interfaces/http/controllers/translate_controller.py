# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from transapi.application.use_cases.translation import TranslateTextsUseCase
from transapi.domain.users.repositories import Authenticator
from transapi.infrastructure.auth import auth_required
from transapi.interfaces.http.dto.translation import TranslateRequestDTO, TranslateResponseDTO
from transapi.shared.errors.validation import parse_body


class TranslateController:
    def __init__(
        self,
        *,
        authenticator: Authenticator,
        translate_use_case: TranslateTextsUseCase,
    ) -> None:
        self._authenticator = authenticator
        self._translate = translate_use_case

    def as_blueprint(self) -> Blueprint:
        guard = auth_required(self._authenticator)
        bp = Blueprint("translate", __name__)
        bp.add_url_rule("/trans", view_func=guard(self.translate), methods=["POST"])
        # Legacy versioned path kept for existing clients.
        bp.add_url_rule(
            "/api/v1/trans",
            endpoint="translate_v1",
            view_func=guard(self.translate),
            methods=["POST"],
        )
        bp.add_url_rule("/api/v1", view_func=self.version_root, methods=["GET"])
        return bp

    def translate(self) -> Response:
        dto = parse_body(TranslateRequestDTO, request.get_json(silent=True))
        items = self._translate.execute(dto.from_lang, dto.to_lang, dto.texts)
        payload = TranslateResponseDTO.model_validate(
            {"results": [item.to_dict() for item in items]}
        )
        return jsonify(payload.model_dump(exclude_none=True))

    def version_root(self) -> Response:
        return jsonify({"code": 200, "msg": "success", "data": "/api/v1 router"})
