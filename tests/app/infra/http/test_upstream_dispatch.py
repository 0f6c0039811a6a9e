"""Testes do dispatcher upstream e do resultado tipado."""

from __future__ import annotations

import json

import httpx
import pytest
from conftest import FakeUpstream

from app.errors import UpstreamError
from app.infra.http import (
    Raw,
    Structured,
    UpstreamHttpClient,
    create_async_http_client,
    error_envelope,
    parse_body,
    passthrough_reply,
    to_reply,
)


class TestParseBody:
    def test_json_round_trips_to_identical_structure(self) -> None:
        value = {"a": [1, 2, {"b": None}], "c": "ç"}
        result = parse_body(json.dumps(value), 200)

        assert isinstance(result, Structured)
        assert result.payload == value

    def test_non_json_becomes_raw_with_status(self) -> None:
        text = "<html>Bad Gateway</html>"
        result = parse_body(text, 502)

        assert isinstance(result, Raw)
        assert result.payload == {"raw": text, "status": 502}
        assert len(result.payload["raw"]) == len(text)

    def test_empty_body_is_raw(self) -> None:
        assert parse_body("", 204).payload == {"raw": "", "status": 204}


class TestErrorEnvelope:
    @pytest.mark.parametrize(
        ("body", "message"),
        [
            ({"message": "m1"}, "m1"),
            ({"msg": "m2"}, "m2"),
            ({"error": {"message": "m3"}}, "m3"),
        ],
    )
    def test_message_extraction(self, body: dict, message: str) -> None:
        result = parse_body(json.dumps(body), 400)
        assert error_envelope(result)["message"] == message

    def test_falls_back_to_body_snippet(self) -> None:
        text = "x" * 500
        envelope = error_envelope(parse_body(text, 500))

        assert envelope["message"] == "x" * 200
        assert envelope["data"] == {"raw": text}

    def test_to_reply_only_wraps_non_2xx(self) -> None:
        ok = to_reply(parse_body('{"id": 1}', 201))
        failed = to_reply(parse_body('{"message": "nope"}', 422))

        assert (ok.payload, ok.status_code, ok.ok) == ({"id": 1}, 201, True)
        assert failed.payload["error"] is True
        assert failed.payload["status"] == 422
        assert failed.status_code == 422

    def test_passthrough_keeps_error_body(self) -> None:
        reply = passthrough_reply(parse_body('{"Error": "bad state"}', 400))
        assert reply.payload == {"Error": "bad state"}
        assert reply.status_code == 400
        assert not reply.ok


@pytest.mark.asyncio
async def test_send_returns_tagged_result(upstream: FakeUpstream) -> None:
    upstream.add("GET", "https://api.test/ok", json_body={"x": 1})
    upstream.add("GET", "https://api.test/raw", text="plain")
    client = UpstreamHttpClient(upstream.client(), integration="test")

    structured = await client.get("https://api.test/ok")
    raw = await client.get("https://api.test/raw")

    assert structured == Structured(value={"x": 1}, status=200, text='{"x": 1}')
    assert raw == Raw(text="plain", status=200)


@pytest.mark.asyncio
async def test_transport_failure_becomes_upstream_error() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client = UpstreamHttpClient(
        httpx.AsyncClient(transport=httpx.MockTransport(_fail)), integration="ghl"
    )

    with pytest.raises(UpstreamError) as exc_info:
        await client.post("https://api.test/x", json={})

    assert exc_info.value.status_code == 500
    assert exc_info.value.integration == "ghl"
    assert exc_info.value.as_payload() == {
        "error": True,
        "message": "ghl request failed: ConnectTimeout",
    }


@pytest.mark.asyncio
async def test_create_async_http_client_applies_timeout() -> None:
    client = create_async_http_client(12.5)
    try:
        assert client.timeout.read == 12.5
        assert client.timeout.connect == 12.5
    finally:
        await client.aclose()
