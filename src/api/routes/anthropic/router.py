"""Proxy do Anthropic Messages API (chave fica no servidor)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from api.routes.dependencies import configured_json_body, get_services, reply_response
from app.bootstrap import RelayServices

router = APIRouter()

anthropic_body = configured_json_body(lambda services: services.anthropic)


@router.post("/anthropic")
async def create_message(
    body: dict[str, Any] = Depends(anthropic_body),
    services: RelayServices = Depends(get_services),
) -> Response:
    """Repassa `{model, messages}` ou monta a leitura de lead card a partir de `image`."""
    return reply_response(await services.anthropic.create_message(body))
