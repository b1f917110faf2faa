# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from transapi.application.use_cases.users.login_user import LoginUserUseCase
from transapi.application.use_cases.users.register_user import RegisterUserUseCase
from transapi.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginResponseDTO,
    RegisterRequestDTO,
    RegisterResponseDTO,
)
from transapi.shared.errors.validation import parse_body
from transapi.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO, request.get_json(silent=True))

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: created user_id={user.id} ip={_get_client_ip()}")
        return jsonify(RegisterResponseDTO().model_dump()), 201

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO, request.get_json(silent=True))

        result = self._login_use_case.execute(dto.username, dto.password)

        payload = LoginResponseDTO(token=result.token, expires_in=result.expires_in)
        logger.info(f"auth.login: issued username={dto.username} ip={_get_client_ip()}")
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
