# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TranslateRequestDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_lang: str = Field(default="auto", alias="fromLang", max_length=16)
    to_lang: str = Field(alias="toLang", min_length=1, max_length=16)
    texts: list[str]

    @field_validator("from_lang")
    @classmethod
    def default_source_language(cls, value: str) -> str:
        return value.strip() or "auto"


class TranslateItemDTO(BaseModel):
    original: str
    translated: str
    error: str | None = None


class TranslateResponseDTO(BaseModel):
    results: list[TranslateItemDTO]
