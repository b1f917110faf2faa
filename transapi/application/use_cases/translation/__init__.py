# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .translate_texts import TranslateTextsUseCase

__all__ = ["TranslateTextsUseCase"]
