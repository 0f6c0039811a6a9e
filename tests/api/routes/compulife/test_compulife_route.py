"""Testes do endpoint multiplexado POST / e do health check GET /."""

from __future__ import annotations

import json
from dataclasses import replace
from urllib.parse import parse_qs, urlsplit

from conftest import FakeUpstream, make_settings

from api.connectors.compulife import ACTIONS
from api.routes.ghl.router import list_ghl_endpoints
from config.settings import AnthropicSettings, CompulifeSettings

SIDEBYSIDE = "https://www.compulifeapi.com/api/sidebyside/"

QUOTE_BODY = {
    "action": "quote-compare",
    "State": "MS",
    "BirthMonth": "6",
    "Birthday": "15",
    "BirthYear": "1967",
    "Sex": "M",
    "Smoker": "N",
    "Health": "PP",
    "NewCategory": "5",
    "FaceAmount": "250000",
    "ModeUsed": "M",
}


def test_health_reports_configuration_flags(make_client) -> None:
    settings = make_settings(anthropic=AnthropicSettings(api_key=""))

    with make_client(settings) as client:
        response = client.get("/")

    payload = response.json()
    assert response.status_code == 200
    assert payload["status"] == "ok"
    assert payload["service"] == "quoteit-api-hub"
    assert payload["version"] == "6.2.0"
    assert payload["configured"] == {
        "compulife": True,
        "ghl": True,
        "anthropic": False,
        "google_drive": True,
        "google_vision": True,
        "supabase": True,
    }
    assert payload["ghl_endpoints"] == list_ghl_endpoints()
    assert "POST   /ghl/phone/call" in payload["ghl_endpoints"]


def test_empty_body_defaults_to_ping(make_client, upstream: FakeUpstream) -> None:
    with make_client() as client:
        response = client.post("/")

    assert response.status_code == 200
    assert response.json()["service"] == "compulife-proxy"
    assert upstream.requests == []


def test_unknown_action_returns_400_with_valid_actions(make_client) -> None:
    with make_client() as client:
        response = client.post("/", json={"action": "bogus"})

    payload = response.json()
    assert response.status_code == 400
    assert "bogus" in payload["error"]
    assert payload["valid_actions"] == list(ACTIONS)


def test_invalid_json_is_400(make_client) -> None:
    with make_client() as client:
        response = client.post(
            "/", content=b"{not json", headers={"Content-Type": "application/json"}
        )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_quote_end_to_end_sends_fifteen_keys(make_client, upstream: FakeUpstream) -> None:
    upstream.add("GET", SIDEBYSIDE, json_body={"Compulife_ComparisonResults": [{"x": 1}]})

    with make_client() as client:
        response = client.post("/", json={**QUOTE_BODY, "Injected": "nope"})

    assert response.status_code == 200
    assert response.json() == {"Compulife_ComparisonResults": [{"x": 1}]}
    params = json.loads(parse_qs(urlsplit(str(upstream.last.url)).query)["COMPULIFE"][0])
    assert len(params) == 15
    assert params["COMPULIFEAUTHORIZATIONID"] == "AUTH-123"
    assert "Injected" not in params


def test_quote_without_auth_id_is_500(make_client, upstream: FakeUpstream) -> None:
    settings = replace(make_settings(), compulife=CompulifeSettings(auth_id=""))

    with make_client(settings) as client:
        response = client.post("/", json=QUOTE_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "COMPULIFE_AUTH_ID not configured"}
    assert upstream.requests == []


def test_raw_upstream_body_is_returned_as_raw(make_client, upstream: FakeUpstream) -> None:
    upstream.add("GET", "https://www.compulifeapi.com/api/CategoryList", text="OK plain")

    with make_client() as client:
        response = client.post("/", json={"action": "get-categories"})

    assert response.json() == {"raw": "OK plain", "status": 200}


def test_correlation_id_is_echoed(make_client) -> None:
    with make_client() as client:
        echoed = client.get("/", headers={"x-correlation-id": "req-123"})
        generated = client.get("/")

    assert echoed.headers["x-correlation-id"] == "req-123"
    assert generated.headers["x-correlation-id"]
    assert generated.headers["x-correlation-id"] != "req-123"


def test_unsafe_correlation_id_is_replaced(make_client) -> None:
    with make_client() as client:
        response = client.get("/", headers={"x-correlation-id": "bad id with spaces"})

    assert response.headers["x-correlation-id"] != "bad id with spaces"


def test_cors_preflight_allows_configured_origin(make_client) -> None:
    with make_client() as client:
        response = client.options(
            "/",
            headers={
                "Origin": "https://quoteitengine.com",
                "Access-Control-Request-Method": "POST",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://quoteitengine.com"


def test_transport_failure_is_500(make_client, upstream: FakeUpstream) -> None:
    import httpx

    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    upstream.handler = _fail  # type: ignore[method-assign]

    with make_client() as client:
        response = client.post("/", json={"action": "get-categories"})

    assert response.status_code == 500
    assert response.json()["error"] is True


def test_cors_simple_request_from_allowed_origin(make_client) -> None:
    with make_client() as client:
        response = client.get("/", headers={"Origin": "https://quoteitengine.com"})

    assert response.headers["access-control-allow-origin"] == "https://quoteitengine.com"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_cors_disallowed_origin_gets_no_allow_header(make_client) -> None:
    with make_client() as client:
        simple = client.get("/", headers={"Origin": "https://evil.example"})
        preflight = client.options(
            "/",
            headers={
                "Origin": "https://evil.example",
                "Access-Control-Request-Method": "POST",
            },
        )

    assert "access-control-allow-origin" not in simple.headers
    assert preflight.status_code == 400
    assert "access-control-allow-origin" not in preflight.headers


def test_unexpected_exception_becomes_json_500(upstream: FakeUpstream) -> None:
    from fastapi.testclient import TestClient

    from app.app import create_app

    app = create_app(make_settings(), transport=upstream.transport)

    async def _explode() -> None:
        raise RuntimeError("kaboom")

    app.add_api_route("/explode", _explode, methods=["GET"])

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/explode", headers={"x-correlation-id": "req-500"})

    assert response.status_code == 500
    assert response.json() == {"error": True, "message": "kaboom"}
    assert response.headers["x-correlation-id"] == "req-500"
