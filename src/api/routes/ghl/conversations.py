"""Rotas GHL de conversas e mensagens."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from api.connectors.ghl import build_message, path_segment
from api.routes.dependencies import get_services, read_json_object, reply_response
from app.bootstrap import RelayServices

router = APIRouter()


@router.post("/conversations/messages")
async def send_message(
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    """Envia SMS (default), Email ou WhatsApp para um contato."""
    return reply_response(
        await services.ghl.request("POST", "/conversations/messages", build_message(body))
    )


@router.get("/conversations/{conversation_id}/messages")
async def list_messages(
    conversation_id: str,
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request(
            "GET", f"/conversations/{path_segment(conversation_id)}/messages"
        )
    )


@router.get("/conversations/{contact_id}")
async def search_conversations(
    contact_id: str,
    services: RelayServices = Depends(get_services),
) -> Response:
    ghl = services.ghl
    reply = await ghl.request(
        "GET",
        "/conversations/search",
        params={"locationId": ghl.location_id, "contactId": contact_id},
    )
    return reply_response(reply)
