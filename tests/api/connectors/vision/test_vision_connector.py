"""Testes do OCR via Google Vision e da agregação de confiança."""

from __future__ import annotations

import base64
import json

import pytest
from conftest import FakeUpstream

from api.connectors.vision import VisionClient, average_word_confidence
from api.connectors.vision.client import build_annotate_request, summarize_annotation
from app.errors import NotConfiguredError
from app.infra.http import UpstreamHttpClient
from config.settings import GOOGLE_VISION_URL, GoogleVisionSettings


def _annotation(*confidences: float | None) -> dict:
    words = [{} if c is None else {"confidence": c} for c in confidences]
    return {
        "text": "JOHN SMITH\n",
        "pages": [{"blocks": [{"paragraphs": [{"words": words}]}]}],
    }


def _client(upstream: FakeUpstream, api_key: str = "vision-key") -> VisionClient:
    return VisionClient(
        GoogleVisionSettings(api_key=api_key),
        UpstreamHttpClient(upstream.client(), integration="google_vision"),
    )


class TestConfidence:
    def test_average_in_percent_with_one_decimal(self) -> None:
        assert average_word_confidence(_annotation(0.9, 0.8, 0.95)) == (88.3, 3)

    def test_words_without_confidence_are_ignored(self) -> None:
        assert average_word_confidence(_annotation(1.0, None)) == (100.0, 1)

    def test_boolean_confidence_is_not_a_score(self) -> None:
        assert average_word_confidence(_annotation(0.5, True, False)) == (50.0, 1)

    def test_no_words(self) -> None:
        assert average_word_confidence({}) == (0.0, 0)

    def test_words_across_blocks(self) -> None:
        annotation = {
            "pages": [
                {"blocks": [{"paragraphs": [{"words": [{"confidence": 0.5}]}]}]},
                {"blocks": [{"paragraphs": [{"words": [{"confidence": 1.0}]}]}]},
            ]
        }
        assert average_word_confidence(annotation) == (75.0, 2)


def test_build_annotate_request_encodes_image() -> None:
    request = build_annotate_request(b"img", language_hints=["en"])
    (item,) = request["requests"]
    assert base64.b64decode(item["image"]["content"]) == b"img"
    assert item["features"] == [{"type": "DOCUMENT_TEXT_DETECTION"}]
    assert item["imageContext"] == {"languageHints": ["en"]}


def test_summarize_empty_response() -> None:
    assert summarize_annotation({"responses": [{}]}) == {"text": "", "confidence": 0.0, "word_count": 0}


@pytest.mark.asyncio
async def test_detect_text_summarizes_response(upstream: FakeUpstream) -> None:
    upstream.add(
        "POST",
        GOOGLE_VISION_URL,
        json_body={"responses": [{"fullTextAnnotation": _annotation(0.9, 0.7)}]},
    )

    reply = await _client(upstream).detect_text(b"png-bytes")

    assert reply.payload == {"text": "JOHN SMITH\n", "confidence": 80.0, "word_count": 2}
    assert upstream.last.url.params["key"] == "vision-key"
    sent = json.loads(upstream.last.content)
    assert base64.b64decode(sent["requests"][0]["image"]["content"]) == b"png-bytes"


@pytest.mark.asyncio
async def test_per_image_error_becomes_500_envelope(upstream: FakeUpstream) -> None:
    upstream.add(
        "POST",
        GOOGLE_VISION_URL,
        json_body={"responses": [{"error": {"code": 3, "message": "Bad image data."}}]},
    )

    reply = await _client(upstream).detect_text(b"junk")

    assert reply.status_code == 500
    assert reply.payload["error"] is True
    assert reply.payload["message"] == "Bad image data."


@pytest.mark.asyncio
async def test_missing_key_fails_before_io(upstream: FakeUpstream) -> None:
    with pytest.raises(NotConfiguredError, match="GOOGLE_VISION_API_KEY"):
        await _client(upstream, api_key="").detect_text(b"x")
    assert upstream.requests == []
