from __future__ import annotations

from flask.testing import FlaskClient

from transapi.container import Container
from transapi.shared.config import AppConfig
from transapi.tests.fakes import StubTranslator

CREDENTIALS = {"username": "alice", "password": "secret123"}


def _bearer(client: FlaskClient) -> dict[str, str]:
    client.post("/register", json=CREDENTIALS)
    token = client.post("/login", json=CREDENTIALS).get_json()["token"]
    return {"Authorization": f"Bearer {token}"}


def test_root_and_health(client: FlaskClient) -> None:
    root = client.get("/")
    assert root.status_code == 200
    assert root.get_data(as_text=True) == "server is running!"

    health = client.get("/api/health")
    assert health.status_code == 200
    assert health.get_json() == {"ok": True, "database": "ok"}


def test_register_twice_conflicts(client: FlaskClient) -> None:
    first = client.post("/register", json=CREDENTIALS)
    assert first.status_code == 201
    assert "message" in first.get_json()

    second = client.post("/register", json=CREDENTIALS)
    assert second.status_code == 409
    assert second.get_json()["error"] == "user_already_exists"


def test_register_rejects_invalid_body(client: FlaskClient) -> None:
    assert client.post("/register", json={"username": "alice"}).status_code == 400
    assert client.post("/register", data="not json").status_code == 400
    assert client.post("/register", json=["alice"]).status_code == 400


def test_login_issues_token_and_rejects_wrong_password(client: FlaskClient) -> None:
    client.post("/register", json=CREDENTIALS)

    ok = client.post("/login", json=CREDENTIALS)
    assert ok.status_code == 200
    body = ok.get_json()
    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 24 * 3600

    bad = client.post("/login", json={"username": "alice", "password": "wrong-one"})
    assert bad.status_code == 401
    assert "token" not in bad.get_json()


def test_product_lifecycle(client: FlaskClient) -> None:
    headers = _bearer(client)

    created = client.post(
        "/api/products",
        json={"name": "Lamp", "description": "Desk lamp", "price": 19.5},
        headers=headers,
    )
    assert created.status_code == 201
    product = created.get_json()
    product_id = product["id"]

    fetched = client.get(f"/api/products/{product_id}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.get_json() == product

    updated = client.put(
        f"/api/products/{product_id}",
        json={"name": "Lamp XL", "price": 25},
        headers=headers,
    )
    assert updated.status_code == 200
    body = updated.get_json()
    assert (body["id"], body["created_at"]) == (product_id, product["created_at"])
    assert (body["name"], body["description"], body["price"]) == ("Lamp XL", None, 25.0)

    listed = client.get("/api/products", headers=headers)
    assert [p["id"] for p in listed.get_json()] == [product_id]

    deleted = client.delete(f"/api/products/{product_id}", headers=headers)
    assert deleted.status_code == 204
    assert deleted.get_data() == b""

    missing = client.get(f"/api/products/{product_id}", headers=headers)
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "product_not_found"
    assert client.get("/api/products", headers=headers).get_json() == []


def test_product_validation(client: FlaskClient) -> None:
    headers = _bearer(client)

    for payload in ({"price": 1}, {"name": "", "price": 1}, {"name": "x", "price": -1}, {"name": "x"}):
        response = client.post("/api/products", json=payload, headers=headers)
        assert response.status_code == 400, payload
        assert response.get_json()["error"] == "validation_error"


def test_products_require_token_and_have_no_side_effects(
    client: FlaskClient, container: Container
) -> None:
    unauthenticated = client.post("/api/products", json={"name": "Lamp", "price": 1})
    assert unauthenticated.status_code == 401
    assert unauthenticated.get_json()["context"] == {"reason": "missing_token"}

    forged = client.get("/api/products", headers={"Authorization": "Bearer a.b.c"})
    assert forged.status_code == 401

    assert container.product_repository.list_active() == []


def test_translate_requires_shared_secret(
    client: FlaskClient, translator: StubTranslator
) -> None:
    payload = {"fromLang": "en", "toLang": "de", "texts": ["hello"]}

    assert client.post("/trans", json=payload).status_code == 401
    assert client.post("/trans", json=payload, headers={"x-scr": "wrong"}).status_code == 401
    assert translator.calls == []


def test_translate_batch(client: FlaskClient, config: AppConfig) -> None:
    headers = {"x-scr": config.auth.shared_secret}

    response = client.post(
        "/trans",
        json={"fromLang": "en", "toLang": "de", "texts": ["hello", "boom", "world"]},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.get_json() == {
        "results": [
            {"original": "hello", "translated": "HELLO"},
            {
                "original": "boom",
                "translated": "Translation failed",
                "error": "backend rejected 'boom'",
            },
            {"original": "world", "translated": "WORLD"},
        ]
    }


def test_translate_rejects_empty_and_malformed_batches(
    client: FlaskClient, config: AppConfig
) -> None:
    headers = {"x-scr": config.auth.shared_secret}

    empty = client.post("/trans", json={"toLang": "de", "texts": []}, headers=headers)
    assert empty.status_code == 400
    assert empty.get_json()["message"] == "No texts provided"

    malformed = client.post("/trans", data="{", headers=headers)
    assert malformed.status_code == 400


def test_versioned_translate_path(client: FlaskClient, config: AppConfig) -> None:
    response = client.post(
        "/api/v1/trans",
        json={"toLang": "de", "texts": ["hi"]},
        headers={"x-scr": config.auth.shared_secret},
    )

    assert response.status_code == 200
    assert response.get_json()["results"] == [{"original": "hi", "translated": "HI"}]


def test_unknown_route_returns_json_error(client: FlaskClient) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["message"] == "The route is not defined."


def test_response_headers(client: FlaskClient) -> None:
    response = client.get("/", headers={"Origin": "https://example.com"})

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["X-Request-ID"]


def test_metrics_exposed(client: FlaskClient) -> None:
    client.get("/")
    response = client.get("/metrics")

    assert response.status_code == 200
    assert b"transapi_requests_total" in response.data


def test_out_of_range_product_id_is_not_found(client: FlaskClient) -> None:
    headers = _bearer(client)
    url = "/api/products/99999999999999999999999"

    assert client.get(url, headers=headers).status_code == 404
    assert client.put(url, json={"name": "x", "price": 1}, headers=headers).status_code == 404
    assert client.delete(url, headers=headers).status_code == 404


def test_product_price_must_be_a_json_number(client: FlaskClient) -> None:
    headers = _bearer(client)

    for price in (True, "12"):
        response = client.post("/api/products", json={"name": "x", "price": price}, headers=headers)
        assert response.status_code == 400, price
        assert response.get_json()["context"]["fields"] == ["price"]

    assert client.post(
        "/api/products", json={"name": "x", "price": 12}, headers=headers
    ).status_code == 201
