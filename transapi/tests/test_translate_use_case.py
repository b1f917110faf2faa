from __future__ import annotations

import pytest

from transapi.application.use_cases.translation import TranslateTextsUseCase
from transapi.domain.translation.entities import TRANSLATION_FAILED
from transapi.shared.errors import ValidationError

from transapi.tests.fakes import StubTranslator


def test_batch_preserves_order_and_isolates_failures() -> None:
    translator = StubTranslator(failing={"boom"})
    use_case = TranslateTextsUseCase(translator, metrics_enabled=False)

    items = use_case.execute("en", "de", ["hello", "boom", "world"])

    assert [item.to_dict() for item in items] == [
        {"original": "hello", "translated": "HELLO"},
        {"original": "boom", "translated": TRANSLATION_FAILED, "error": "backend rejected 'boom'"},
        {"original": "world", "translated": "WORLD"},
    ]
    assert [call[0] for call in translator.calls] == ["hello", "boom", "world"]


def test_all_items_failing_still_returns_full_batch() -> None:
    translator = StubTranslator(failing={"a", "b"})
    items = TranslateTextsUseCase(translator).execute("auto", "en", ["a", "b"])

    assert len(items) == 2
    assert all(not item.ok for item in items)
    assert all(item.translated == TRANSLATION_FAILED for item in items)


def test_languages_passed_through() -> None:
    translator = StubTranslator()
    TranslateTextsUseCase(translator).execute("auto", "zh", ["hi"])

    assert translator.calls == [("hi", "auto", "zh")]


def test_empty_batch_rejected_without_calls() -> None:
    translator = StubTranslator()

    with pytest.raises(ValidationError) as exc_info:
        TranslateTextsUseCase(translator).execute("en", "de", [])

    assert exc_info.value.code == "no_texts"
    assert exc_info.value.message == "No texts provided"
    assert translator.calls == []
