# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from time import perf_counter

from transapi.domain.translation.entities import TranslationItem
from transapi.domain.translation.exceptions import TranslationFailedError
from transapi.domain.translation.ports import Translator
from transapi.infrastructure.observability import record_translation_item
from transapi.shared.errors.base import ValidationError
from transapi.shared.logging import logger


class TranslateTextsUseCase:
    """Translate a batch one text at a time.

    Each text is sent to the backend on its own. A failure is recorded as an
    error item at the same position and the loop moves on, so the output
    always has exactly one item per input, in input order.
    """

    def __init__(self, translator: Translator, *, metrics_enabled: bool = True) -> None:
        self._translator = translator
        self._metrics_enabled = metrics_enabled

    def execute(self, from_lang: str, to_lang: str, texts: Sequence[str]) -> list[TranslationItem]:
        if not texts:
            raise ValidationError("no_texts", message="No texts provided")

        t0 = perf_counter()
        items = [self._translate_one(text, from_lang, to_lang) for text in texts]
        failed = sum(1 for item in items if not item.ok)

        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"translate.batch: done (from={from_lang}, to={to_lang}, n={len(items)}, "
            f"failed={failed}, dt_ms={dt:.0f})"
        )
        return items

    def _translate_one(self, text: str, from_lang: str, to_lang: str) -> TranslationItem:
        try:
            result = self._translator.translate(text, from_lang, to_lang)
        except TranslationFailedError as exc:
            logger.warning(f"translate.item: failed ({exc})")
            item = TranslationItem.failed(text, str(exc))
        else:
            item = TranslationItem.succeeded(result)

        if self._metrics_enabled:
            record_translation_item(item.ok)
        return item


__all__ = ["TranslateTextsUseCase"]
