"""Rotas GHL de usuários, pipelines, oportunidades e click-to-dial."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Response

from api.connectors.ghl import build_call_log, path_segment, tel_uri
from api.routes.dependencies import get_services, read_json_object, reply_response
from app.bootstrap import RelayServices
from app.errors import ClientInputError

logger = logging.getLogger(__name__)

router = APIRouter()

DIAL_NOTE = "Frontend should open tel: URI or GHL softphone widget"


@router.get("/users")
async def list_users(services: RelayServices = Depends(get_services)) -> Response:
    ghl = services.ghl
    return reply_response(
        await ghl.request("GET", "/users/", params={"locationId": ghl.location_id})
    )


@router.get("/pipelines")
async def list_pipelines(services: RelayServices = Depends(get_services)) -> Response:
    ghl = services.ghl
    return reply_response(
        await ghl.request(
            "GET", "/opportunities/pipelines", params={"locationId": ghl.location_id}
        )
    )


@router.post("/opportunities")
async def create_opportunity(
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    ghl = services.ghl
    return reply_response(await ghl.request("POST", "/opportunities/", ghl.with_location(body)))


@router.put("/opportunities/{opportunity_id}")
async def update_opportunity(
    opportunity_id: str,
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request(
            "PUT", f"/opportunities/{path_segment(opportunity_id)}", body
        )
    )


@router.post("/phone/call")
async def start_call(
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> dict[str, Any]:
    """Click-to-dial: registra a ligação no CRM e devolve o URI tel:.

    O registro só acontece quando há contactId; falha no registro não
    impede a discagem (o envelope de erro vai em `ghlLog`).
    """
    phone = body.get("phone")
    if not isinstance(phone, str) or not phone:
        raise ClientInputError("phone required")
    contact_id = body.get("contactId")

    ghl_log = None
    if contact_id:
        reply = await services.ghl.request(
            "POST", "/conversations/messages", build_call_log(contact_id, phone)
        )
        ghl_log = reply.payload
        if not reply.ok:
            logger.warning("ghl_call_log_failed", extra={"status_code": reply.status_code})

    return {
        "success": True,
        "action": "dial",
        "phone": phone,
        "contactId": contact_id,
        "telUri": tel_uri(phone),
        "ghlLog": ghl_log,
        "note": DIAL_NOTE,
    }
