"""Upload de arquivos para o Google Drive."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.routes.dependencies import configured_json_body, get_services
from api.validators.base64_payload import decode_base64_field, strip_data_url
from app.bootstrap import RelayServices
from app.errors import ClientInputError
from app.infra.google import DriveUpload

router = APIRouter()

drive_body = configured_json_body(lambda services: services.drive)

DEFAULT_MIME_TYPE = "application/octet-stream"


def parse_drive_upload(body: dict[str, Any]) -> DriveUpload:
    """Valida `{filename, data, mimeType?, folder?}`.

    O mime type cai para o do data URL e depois para octet-stream.

    Raises:
        ClientInputError: filename ausente ou data inválido.
    """
    filename = body.get("filename")
    if not isinstance(filename, str) or not filename.strip():
        raise ClientInputError("filename required")
    content = decode_base64_field(body.get("data"), "data")

    mime_type = body.get("mimeType")
    if not isinstance(mime_type, str) or not mime_type:
        _, data_url_mime = strip_data_url(str(body.get("data", "")))
        mime_type = data_url_mime or DEFAULT_MIME_TYPE

    folder = body.get("folder")
    if folder is not None and not isinstance(folder, str):
        raise ClientInputError("folder must be a string")

    return DriveUpload(
        filename=filename.strip(),
        content=content,
        mime_type=mime_type,
        folder=folder.strip() if folder else None,
    )


@router.post("/upload")
async def upload_file(
    body: dict[str, Any] = Depends(drive_body),
    services: RelayServices = Depends(get_services),
) -> dict[str, Any]:
    return await services.drive.upload(parse_drive_upload(body))
