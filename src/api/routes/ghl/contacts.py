"""Rotas GHL de contatos: criação, busca, leitura, update, tags, notas e tarefas."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from api.connectors.ghl import build_note, path_segment, search_field
from api.routes.dependencies import get_services, read_json_object, reply_response
from app.bootstrap import RelayServices

router = APIRouter()


@router.post("/contacts")
async def create_contact(
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    ghl = services.ghl
    return reply_response(await ghl.request("POST", "/contacts/", ghl.with_location(body)))


# Registrada antes de /contacts/{contact_id} para não ser capturada como id.
@router.get("/contacts/search")
async def search_contacts(
    query: str | None = None,
    q: str | None = None,
    services: RelayServices = Depends(get_services),
) -> Response:
    """Busca de duplicado por email (quando há '@') ou telefone."""
    term = query or q or ""
    ghl = services.ghl
    reply = await ghl.request(
        "GET",
        "/contacts/search/duplicate",
        params={"locationId": ghl.location_id, search_field(term): term},
    )
    return reply_response(reply)


@router.get("/contacts/{contact_id}")
async def get_contact(
    contact_id: str,
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request("GET", f"/contacts/{path_segment(contact_id)}")
    )


@router.put("/contacts/{contact_id}")
async def update_contact(
    contact_id: str,
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request("PUT", f"/contacts/{path_segment(contact_id)}", body)
    )


@router.post("/contacts/{contact_id}/tags")
async def add_contact_tags(
    contact_id: str,
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request("POST", f"/contacts/{path_segment(contact_id)}/tags", body)
    )


@router.post("/contacts/{contact_id}/notes")
async def add_contact_note(
    contact_id: str,
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    """Aceita o texto em `body` ou `note`."""
    reply = await services.ghl.request(
        "POST", f"/contacts/{path_segment(contact_id)}/notes", build_note(body)
    )
    return reply_response(reply)


@router.post("/contacts/{contact_id}/tasks")
async def add_contact_task(
    contact_id: str,
    body: dict[str, Any] = Depends(read_json_object),
    services: RelayServices = Depends(get_services),
) -> Response:
    return reply_response(
        await services.ghl.request("POST", f"/contacts/{path_segment(contact_id)}/tasks", body)
    )
