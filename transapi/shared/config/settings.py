# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AuthStrategy = Literal["token", "shared_secret"]

_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///transapi.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SETTINGS_CONFIG

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class AuthConfig(BaseSettings):
    # Token signing
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_ttl_hours: float = Field(24.0, gt=0, alias="TOKEN_TTL_HOURS")

    # Password hashing (werkzeug method string, fixed cost)
    password_hash_method: str = Field("pbkdf2:sha256:600000", alias="PASSWORD_HASH_METHOD")

    # Shared-secret gate
    shared_secret: str = Field("dev-shared-secret", alias="SHARED_SECRET")
    shared_secret_header: str = Field("x-scr", alias="SHARED_SECRET_HEADER")

    # Strategy per route group
    products_strategy: AuthStrategy = Field("token", alias="AUTH_PRODUCTS_STRATEGY")
    translate_strategy: AuthStrategy = Field("shared_secret", alias="AUTH_TRANSLATE_STRATEGY")

    model_config = _SETTINGS_CONFIG

    @field_validator("jwt_algorithm", mode="after")
    @classmethod
    def _hmac_only(cls, value: str) -> str:
        value = value.upper()
        if value not in ("HS256", "HS384", "HS512"):
            raise ValueError("only HMAC algorithms (HS256, HS384, HS512) are allowed")
        return value

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(hours=self.token_ttl_hours)


class TranslatorConfig(BaseSettings):
    url: str = Field(
        "https://fanyi-api.baidu.com/api/trans/vip/translate", alias="TRANSLATOR_URL"
    )
    app_id: str = Field("", alias="TRANSLATOR_APP_ID")
    secret: str = Field("", alias="TRANSLATOR_SECRET")
    timeout: float = Field(10.0, ge=0.1, alias="TRANSLATOR_TIMEOUT")

    model_config = _SETTINGS_CONFIG


class ObservabilityConfig(BaseSettings):
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    model_config = _SETTINGS_CONFIG

    @field_validator("metrics_enabled", mode="before")
    @classmethod
    def _parse_metrics(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SETTINGS_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _translator_config_factory() -> TranslatorConfig:
    return TranslatorConfig()  # type: ignore[call-arg]


def _observability_config_factory() -> ObservabilityConfig:
    return ObservabilityConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


_INSECURE_SECRETS = (
    "dev",
    "development",
    "test",
    "",
    "dev-secret-key-change-me-in-production",
    "dev-shared-secret",
)


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev-secret-key-change-me-in-production", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    translator: TranslatorConfig = Field(default_factory=_translator_config_factory)
    observability: ObservabilityConfig = Field(default_factory=_observability_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        insecure = []
        if self.secret_key in _INSECURE_SECRETS:
            insecure.append("SECRET_KEY")
        if self.auth.shared_secret in _INSECURE_SECRETS:
            insecure.append("SHARED_SECRET")
        if insecure:
            print(
                f"\n❌ CRITICAL SECURITY ERROR: insecure {', '.join(insecure)} in production!\n"
                "   Secrets must be strong random values in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")
        if not self.translator.app_id or not self.translator.secret:
            warnings.append("⚠️  Translator credentials are not configured")

        if warnings:
            print("\n⚠️  PRODUCTION WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = [
    "AppConfig",
    "AuthConfig",
    "AuthStrategy",
    "DatabaseConfig",
    "ObservabilityConfig",
    "SecurityConfig",
    "TranslatorConfig",
    "load_config",
]
