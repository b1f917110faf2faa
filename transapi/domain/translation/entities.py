# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

TRANSLATION_FAILED = "Translation failed"


@dataclass(slots=True, frozen=True)
class TranslationResult:

    source: str
    target: str


@dataclass(slots=True, frozen=True)
class TranslationItem:
    """One entry of a batch response, positionally matched to its input."""

    original: str
    translated: str
    error: str | None = None

    @classmethod
    def succeeded(cls, result: TranslationResult) -> TranslationItem:
        return cls(original=result.source, translated=result.target)

    @classmethod
    def failed(cls, text: str, error: str) -> TranslationItem:
        return cls(original=text, translated=TRANSLATION_FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, str]:
        payload = {"original": self.original, "translated": self.translated}
        if self.error is not None:
            payload["error"] = self.error
        return payload
