from __future__ import annotations

import pytest
from pydantic import ValidationError

from transapi.shared.config import AuthConfig, ObservabilityConfig, SecurityConfig


def test_observability_reads_metrics_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("METRICS_ENABLED", "no")

    config = ObservabilityConfig()

    assert config.metrics_enabled is False
    assert set(config.model_dump()) == {"metrics_enabled"}


def test_allowed_origins_split_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test,")

    assert SecurityConfig().allowed_origins == ["https://a.test", "https://b.test"]


def test_auth_strategies_and_algorithm_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTH_PRODUCTS_STRATEGY", "shared_secret")
    monkeypatch.setenv("JWT_ALGORITHM", "hs512")

    config = AuthConfig()

    assert config.products_strategy == "shared_secret"
    assert config.translate_strategy == "shared_secret"
    assert config.jwt_algorithm == "HS512"


def test_non_hmac_algorithm_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_ALGORITHM", "RS256")

    with pytest.raises(ValidationError):
        AuthConfig()
