from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from transapi.app import create_app
from transapi.container import Container
from transapi.shared.config import (
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    ObservabilityConfig,
    SecurityConfig,
    TranslatorConfig,
)
from transapi.tests.fakes import StubTranslator

SHARED_SECRET = "test-shared-secret-value"
SECRET_KEY = "test-signing-key-with-at-least-32-bytes!"


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key=SECRET_KEY,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'test.db'}"),
        auth=AuthConfig(
            password_hash_method="pbkdf2:sha256:1000",
            shared_secret=SHARED_SECRET,
        ),
        translator=TranslatorConfig(app_id="app", secret="secret"),
        observability=ObservabilityConfig(metrics_enabled=True),
        security=SecurityConfig(allowed_origins=["*"]),
    )


@pytest.fixture()
def translator() -> StubTranslator:
    return StubTranslator(failing={"boom"})


@pytest.fixture()
def container(config: AppConfig, translator: StubTranslator) -> Iterator[Container]:
    container = Container(config)
    container.translator = translator
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
