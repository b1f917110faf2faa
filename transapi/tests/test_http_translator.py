from __future__ import annotations

import hashlib
from urllib.parse import parse_qs

import httpx
import pytest

from transapi.application.use_cases.translation import TranslateTextsUseCase
from transapi.domain.translation.entities import TRANSLATION_FAILED
from transapi.domain.translation.exceptions import TranslationFailedError
from transapi.infrastructure.translation import HttpTranslator, sign_request
from transapi.shared.config import TranslatorConfig

CONFIG = TranslatorConfig(url="https://translate.test/api", app_id="app-1", secret="s3cret")


def _translator(handler) -> HttpTranslator:
    return HttpTranslator(
        CONFIG, transport=httpx.MockTransport(handler), salt_factory=lambda: "1435660288"
    )


def test_sign_request_is_md5_of_concatenation() -> None:
    expected = hashlib.md5(b"app-1apple1435660288s3cret").hexdigest()

    assert sign_request("app-1", "apple", "1435660288", "s3cret") == expected


def test_translate_sends_signed_form_and_parses_result() -> None:
    seen: dict[str, list[str]] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(parse_qs(request.content.decode()))
        return httpx.Response(
            200,
            json={"from": "en", "to": "zh", "trans_result": [{"src": "apple", "dst": "苹果"}]},
        )

    result = _translator(handler).translate("apple", "en", "zh")

    assert (result.source, result.target) == ("apple", "苹果")
    assert seen["q"] == ["apple"]
    assert seen["from"] == ["en"]
    assert seen["to"] == ["zh"]
    assert seen["appid"] == ["app-1"]
    assert seen["salt"] == ["1435660288"]
    assert seen["sign"] == [sign_request("app-1", "apple", "1435660288", "s3cret")]


def test_multi_segment_result_is_joined() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"trans_result": [{"src": "a", "dst": "A"}, {"src": "b", "dst": "B"}]},
        )

    result = _translator(handler).translate("a\nb", "en", "fr")

    assert result.target == "A\nB"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"error_code": "54001", "error_msg": "Invalid Sign"}),
        httpx.Response(200, json={"from": "en", "to": "zh"}),
        httpx.Response(200, json={"trans_result": [{"src": "x"}]}),
        httpx.Response(200, text="<html>oops</html>"),
        httpx.Response(502, text="bad gateway"),
    ],
    ids=["backend-error", "no-result", "missing-dst", "non-json", "http-502"],
)
def test_backend_failures_raise(response: httpx.Response) -> None:
    with pytest.raises(TranslationFailedError):
        _translator(lambda request: response).translate("x", "en", "zh")


def test_backend_error_message_is_surfaced() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error_code": "54001", "error_msg": "Invalid Sign"})

    with pytest.raises(TranslationFailedError, match="54001: Invalid Sign"):
        _translator(handler).translate("x", "en", "zh")


def test_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TranslationFailedError, match="unreachable"):
        _translator(handler).translate("x", "en", "zh")


def test_missing_credentials_fail_without_request() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    translator = HttpTranslator(
        TranslatorConfig(app_id="", secret=""), transport=httpx.MockTransport(handler)
    )

    with pytest.raises(TranslationFailedError):
        translator.translate("x", "en", "zh")
    assert calls == []


def test_unencodable_text_fails_only_its_own_item() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        text = parse_qs(request.content.decode())["q"][0]
        return httpx.Response(200, json={"trans_result": [{"src": text, "dst": text.upper()}]})

    use_case = TranslateTextsUseCase(_translator(handler), metrics_enabled=False)

    items = use_case.execute("auto", "en", ["ok", "\ud800x", "ok2"])

    assert [item.translated for item in items] == ["OK", TRANSLATION_FAILED, "OK2"]
    assert items[1].original == "\ud800x"
    assert "UTF-8" in items[1].error
