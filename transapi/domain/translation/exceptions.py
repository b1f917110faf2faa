# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class TranslationFailedError(Exception):
    """A single text could not be translated by the backend."""
