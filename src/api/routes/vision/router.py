"""OCR de imagens via Google Vision."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from api.routes.dependencies import configured_json_body, get_services, reply_response
from api.validators.base64_payload import decode_base64_field
from app.bootstrap import RelayServices
from app.errors import ClientInputError

router = APIRouter()

vision_body = configured_json_body(lambda services: services.vision)


@router.post("/ocr")
async def detect_text(
    body: dict[str, Any] = Depends(vision_body),
    services: RelayServices = Depends(get_services),
) -> Response:
    vision = services.vision
    image = decode_base64_field(body.get("image"), "image")

    hints = body.get("languageHints")
    if hints is not None and not (
        isinstance(hints, list) and all(isinstance(h, str) for h in hints)
    ):
        raise ClientInputError("languageHints must be a list of strings")

    return reply_response(await vision.detect_text(image, language_hints=hints))
