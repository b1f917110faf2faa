# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TRANSLATION_FAILED, TranslationItem, TranslationResult
from .exceptions import TranslationFailedError
from .ports import Translator

__all__ = [
    "TRANSLATION_FAILED",
    "TranslationFailedError",
    "TranslationItem",
    "TranslationResult",
    "Translator",
]
