"""Cliente do Google Cloud Vision (OCR via images:annotate).

Autenticação por API key em query param. A resposta é reduzida a
{text, confidence, word_count}.
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.vision.confidence import average_word_confidence
from app.errors import NotConfiguredError
from app.infra.http import Structured, UpstreamReply, to_reply

if TYPE_CHECKING:
    from app.infra.http import UpstreamHttpClient
    from config.settings import GoogleVisionSettings

logger = logging.getLogger(__name__)

DEFAULT_FEATURE = "DOCUMENT_TEXT_DETECTION"


def build_annotate_request(
    image: bytes,
    *,
    feature: str = DEFAULT_FEATURE,
    language_hints: list[str] | None = None,
) -> dict[str, Any]:
    request: dict[str, Any] = {
        "image": {"content": base64.b64encode(image).decode("ascii")},
        "features": [{"type": feature}],
    }
    if language_hints:
        request["imageContext"] = {"languageHints": language_hints}
    return {"requests": [request]}


def summarize_annotation(response: dict[str, Any]) -> dict[str, Any]:
    """Extrai texto completo e confiança média da primeira resposta."""
    first = (response.get("responses") or [{}])[0]
    annotation = first.get("fullTextAnnotation") or {}
    confidence, word_count = average_word_confidence(annotation)
    return {
        "text": annotation.get("text", ""),
        "confidence": confidence,
        "word_count": word_count,
    }


class VisionClient:
    """OCR de imagens com a API key do servidor."""

    def __init__(self, settings: GoogleVisionSettings, upstream: UpstreamHttpClient) -> None:
        self._settings = settings
        self._upstream = upstream

    def ensure_configured(self) -> None:
        if not self._settings.api_key:
            raise NotConfiguredError("GOOGLE_VISION_API_KEY")

    async def detect_text(
        self,
        image: bytes,
        *,
        language_hints: list[str] | None = None,
    ) -> UpstreamReply:
        """Executa OCR e agrega a confiança por palavra.

        Erro por imagem (HTTP 200 com `error`) vira envelope com status 500.
        """
        self.ensure_configured()
        result = await self._upstream.post(
            self._settings.annotate_url,
            params={"key": self._settings.api_key},
            json=build_annotate_request(image, language_hints=language_hints),
        )
        if not (result.ok and isinstance(result, Structured) and isinstance(result.value, dict)):
            return to_reply(result)

        first = (result.value.get("responses") or [{}])[0]
        image_error = first.get("error")
        if image_error:
            logger.warning("vision_image_error", extra={"code": image_error.get("code")})
            envelope = {
                "error": True,
                "status": 500,
                "message": image_error.get("message", "Vision annotate error"),
                "data": image_error,
            }
            return UpstreamReply(payload=envelope, status_code=500, ok=False)

        return UpstreamReply(payload=summarize_annotation(result.value), status_code=200, ok=True)
