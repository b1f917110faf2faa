# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Callable
from typing import Any

import httpx

from transapi.domain.translation.entities import TranslationResult
from transapi.domain.translation.exceptions import TranslationFailedError
from transapi.domain.translation.ports import Translator
from transapi.shared.config import TranslatorConfig
from transapi.shared.logging import logger


def sign_request(app_id: str, text: str, salt: str, secret: str) -> str:
    """MD5 of ``appid + q + salt + secret``, hex encoded."""
    return hashlib.md5(f"{app_id}{text}{salt}{secret}".encode()).hexdigest()


def _random_salt() -> str:
    return str(secrets.randbelow(10**10))


class HttpTranslator(Translator):
    """Client for a Baidu-style ``/translate`` endpoint.

    One POST per text, no retries. Every failure mode (transport, HTTP
    status, body shape, backend ``error_code``) surfaces as
    ``TranslationFailedError`` so the batch loop can record it per item.
    """

    def __init__(
        self,
        config: TranslatorConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        salt_factory: Callable[[], str] = _random_salt,
    ) -> None:
        self._url = config.url
        self._app_id = config.app_id
        self._secret = config.secret
        self._timeout = config.timeout
        self._transport = transport
        self._salt_factory = salt_factory

    def translate(self, text: str, from_lang: str, to_lang: str) -> TranslationResult:
        if not self._app_id or not self._secret:
            raise TranslationFailedError("translator credentials are not configured")

        salt = self._salt_factory()
        try:
            form = {
                "q": text,
                "from": from_lang,
                "to": to_lang,
                "appid": self._app_id,
                "salt": salt,
                "sign": sign_request(self._app_id, text, salt, self._secret),
            }
            with httpx.Client(timeout=self._timeout, transport=self._transport) as http:
                response = http.post(self._url, data=form)
        except UnicodeError as exc:
            raise TranslationFailedError("text cannot be encoded as UTF-8") from exc
        except httpx.TimeoutException as exc:
            raise TranslationFailedError(f"translator timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TranslationFailedError(f"translator unreachable: {exc}") from exc

        if response.status_code != 200:
            logger.warning(
                f"translator: http {response.status_code} body={response.text[:200]}"
            )
            raise TranslationFailedError(f"translator returned HTTP {response.status_code}")

        return self._parse(response)

    @staticmethod
    def _parse(response: httpx.Response) -> TranslationResult:
        try:
            body: Any = response.json()
        except ValueError as exc:
            raise TranslationFailedError("translator returned a non-JSON body") from exc

        if not isinstance(body, dict):
            raise TranslationFailedError("translator returned an unexpected payload")

        if body.get("error_code") not in (None, "", "52000"):
            code = body.get("error_code")
            message = body.get("error_msg") or "unknown error"
            raise TranslationFailedError(f"translator error {code}: {message}")

        segments = body.get("trans_result")
        if not isinstance(segments, list) or not segments:
            raise TranslationFailedError("translator response has no trans_result")

        try:
            source = "\n".join(str(seg["src"]) for seg in segments)
            target = "\n".join(str(seg["dst"]) for seg in segments)
        except (KeyError, TypeError) as exc:
            raise TranslationFailedError("translator response is malformed") from exc

        return TranslationResult(source=source, target=target)


__all__ = ["HttpTranslator", "sign_request"]
