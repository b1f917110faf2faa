# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TranslationResult


class Translator(Protocol):
    def translate(self, text: str, from_lang: str, to_lang: str) -> TranslationResult:
        """Translate one text; raises TranslationFailedError on any backend failure."""
        ...
