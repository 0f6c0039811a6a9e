"""Client concreto de Google Drive para upload de arquivos do frontend.

Fluxo de upload:
1. access token via GoogleOAuthTokenCache
2. pasta de destino: busca por nome dentro da pasta raiz, cria se não existir
3. upload multipart do arquivo
4. permissão pública de leitura (anyone/reader)

A biblioteca do Google é síncrona; cada chamada roda em asyncio.to_thread.
"""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from app.errors import NotConfiguredError, UpstreamError
from app.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.infra.google.oauth_token_cache import GoogleOAuthTokenCache
    from config.settings import GoogleDriveSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_drive_client"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
_FILE_FIELDS = "id, name, mimeType, webViewLink, webContentLink"


@dataclass(frozen=True, slots=True)
class DriveUpload:
    """Arquivo a enviar."""

    filename: str
    content: bytes
    mime_type: str
    folder: str | None = None


def build_drive_service(access_token: str) -> Any:
    """Cria o resource Drive v3 autenticado com o bearer token."""
    credentials = Credentials(token=access_token)
    return build("drive", "v3", credentials=credentials, cache_discovery=False)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def escape_query_value(value: str) -> str:
    """Escapa barra invertida e aspas simples para a query `q` do Drive."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def folder_query(name: str, parent_id: str) -> str:
    return (
        f"mimeType='{FOLDER_MIME_TYPE}' and name='{escape_query_value(name)}' "
        f"and '{escape_query_value(parent_id)}' in parents and trashed=false"
    )


class GoogleDriveClient:
    """Upload para o Drive com token OAuth cacheado."""

    __slots__ = ("_service_factory", "_settings", "_tokens")

    def __init__(
        self,
        settings: GoogleDriveSettings,
        tokens: GoogleOAuthTokenCache,
        *,
        service_factory: Callable[[str], Any] = build_drive_service,
    ) -> None:
        self._settings = settings
        self._tokens = tokens
        self._service_factory = service_factory

    def ensure_configured(self) -> None:
        missing = self._settings.missing()
        if missing:
            raise NotConfiguredError(missing[0])

    async def upload(self, upload: DriveUpload) -> dict[str, Any]:
        """Executa o fluxo completo de upload.

        Raises:
            NotConfiguredError: Credenciais OAuth ou pasta raiz ausentes.
            UpstreamError: Erro HTTP do Drive (status propagado).
        """
        self.ensure_configured()
        token = await self._tokens.get_access_token()
        service = self._service_factory(token)

        try:
            folder_id = await asyncio.to_thread(self._resolve_folder_sync, service, upload.folder)
            created = await asyncio.to_thread(self._create_file_sync, service, upload, folder_id)
            await asyncio.to_thread(self._grant_public_read_sync, service, created["id"])
        except HttpError as exc:
            status_code = http_status(exc)
            if status_code == 401:
                self._tokens.invalidate()
            self._log_error(action="upload", exc=exc)
            raise UpstreamError(
                "Google Drive upload failed",
                integration="google_drive",
                status_code=status_code,
            ) from exc

        logger.info(
            "google_drive_uploaded",
            extra={
                "component": _COMPONENT,
                "size": len(upload.content),
                "mime_type": upload.mime_type,
                "correlation_id": get_correlation_id(),
            },
        )
        return {
            "success": True,
            "fileId": created["id"],
            "name": created.get("name", upload.filename),
            "mimeType": created.get("mimeType", upload.mime_type),
            "webViewLink": created.get("webViewLink"),
            "webContentLink": created.get("webContentLink"),
            "folderId": folder_id,
        }

    def _resolve_folder_sync(self, service: Any, folder: str | None) -> str:
        root_id = self._settings.folder_id
        if not folder:
            return root_id

        found = (
            service.files()
            .list(
                q=folder_query(folder, root_id),
                fields="files(id, name)",
                pageSize=1,
                supportsAllDrives=True,
                includeItemsFromAllDrives=True,
            )
            .execute()
        )
        files = found.get("files") or []
        if files:
            return files[0]["id"]

        created = (
            service.files()
            .create(
                body={"name": folder, "mimeType": FOLDER_MIME_TYPE, "parents": [root_id]},
                fields="id",
                supportsAllDrives=True,
            )
            .execute()
        )
        logger.info("google_drive_folder_created", extra={"component": _COMPONENT})
        return created["id"]

    def _create_file_sync(self, service: Any, upload: DriveUpload, folder_id: str) -> dict[str, Any]:
        media = MediaIoBaseUpload(io.BytesIO(upload.content), mimetype=upload.mime_type, resumable=False)
        return (
            service.files()
            .create(
                body={"name": upload.filename, "parents": [folder_id]},
                media_body=media,
                fields=_FILE_FIELDS,
                supportsAllDrives=True,
            )
            .execute()
        )

    def _grant_public_read_sync(self, service: Any, file_id: str) -> None:
        service.permissions().create(
            fileId=file_id,
            body={"role": "reader", "type": "anyone"},
            supportsAllDrives=True,
        ).execute()

    def _log_error(self, *, action: str, exc: HttpError) -> None:
        logger.error(
            "google_drive_http_error",
            extra={
                "component": _COMPONENT,
                "action": action,
                "status_code": http_status(exc),
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
