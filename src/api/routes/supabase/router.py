"""Supabase Storage: upload de objetos e URLs assinadas."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Response

from api.connectors.supabase import DEFAULT_SIGNED_URL_SECONDS, normalize_object_path
from api.routes.dependencies import configured_json_body, get_services, reply_response
from api.validators.base64_payload import decode_base64_field, strip_data_url
from app.bootstrap import RelayServices
from app.errors import ClientInputError

router = APIRouter()

supabase_body = configured_json_body(lambda services: services.supabase)

MAX_SIGNED_URL_SECONDS = 7 * 24 * 3600


@router.post("/upload")
async def upload_object(
    body: dict[str, Any] = Depends(supabase_body),
    services: RelayServices = Depends(get_services),
) -> Response:
    """Upload de `{path, data, contentType?, upsert?}` no bucket configurado."""
    storage = services.supabase
    path = normalize_object_path(body.get("path"))
    content = decode_base64_field(body.get("data"), "data")

    content_type = body.get("contentType")
    if not isinstance(content_type, str) or not content_type:
        _, content_type = strip_data_url(str(body.get("data", "")))

    reply = await storage.upload(
        path,
        content,
        content_type=content_type,
        upsert=body.get("upsert") is True,
    )
    return reply_response(reply)


@router.get("/signed-url")
async def signed_url(
    path: str | None = None,
    expires_in: int = Query(DEFAULT_SIGNED_URL_SECONDS, alias="expiresIn"),
    services: RelayServices = Depends(get_services),
) -> Response:
    storage = services.supabase
    storage.ensure_configured()
    object_path = normalize_object_path(path)
    if not 0 < expires_in <= MAX_SIGNED_URL_SECONDS:
        raise ClientInputError(
            f"expiresIn must be between 1 and {MAX_SIGNED_URL_SECONDS} seconds"
        )
    return reply_response(await storage.create_signed_url(object_path, expires_in))
