# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .http_translator import HttpTranslator, sign_request

__all__ = ["HttpTranslator", "sign_request"]
