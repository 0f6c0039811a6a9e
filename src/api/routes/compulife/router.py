"""Endpoint multiplexado da Compulife: `POST /` com `{action, ...campos}`."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Response

from api.connectors.compulife import resolve_action
from api.routes.dependencies import get_services, read_json_object, reply_response
from app.bootstrap import RelayServices

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/")
async def compulife_action(
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    """Despacha a ação pedida (default: ping).

    Ação desconhecida -> 400 com a lista de ações válidas.
    """
    action, handler = resolve_action(body)
    logger.info("compulife_action", extra={"action": action})
    reply = await handler(services.compulife, body)
    return reply_response(reply)
