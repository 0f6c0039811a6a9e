"""Montagem do payload da Messages API.

Duas formas aceitas em POST /anthropic:
- passthrough: corpo já tem `model` e `messages`, enviado como está
- simplificada: {image, media_type, prompt} expandida em uma única
  mensagem de usuário com bloco de imagem + bloco de texto
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.errors import ClientInputError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import AnthropicSettings

DEFAULT_MEDIA_TYPE = "image/png"

LEAD_CARD_PROMPT = (
    "Extract all text from this lead card. Return JSON: first_name, last_name, "
    "address, city, state, zip, phone, age, dob, gender, tobacco, beneficiary, "
    "mortgage_amount, insurance_company, policy_type, vendor_source."
)


def is_passthrough(body: Mapping[str, Any]) -> bool:
    return bool(body.get("model")) and bool(body.get("messages"))


def build_messages_payload(
    body: Mapping[str, Any],
    settings: AnthropicSettings,
) -> dict[str, Any]:
    """Retorna o payload a enviar para /v1/messages.

    Raises:
        ClientInputError: Forma simplificada sem `image`.
    """
    if is_passthrough(body):
        return dict(body)

    image = body.get("image")
    if not image:
        raise ClientInputError("image (base64) required")

    return {
        "model": settings.model,
        "max_tokens": settings.max_tokens,
        "messages": [
            {
                "role": "user",
                "content": [
                    {
                        "type": "image",
                        "source": {
                            "type": "base64",
                            "media_type": body.get("media_type") or DEFAULT_MEDIA_TYPE,
                            "data": image,
                        },
                    },
                    {"type": "text", "text": body.get("prompt") or LEAD_CARD_PROMPT},
                ],
            }
        ],
    }
