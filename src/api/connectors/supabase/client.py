"""Cliente do Supabase Storage (upload de objetos e URLs assinadas)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from app.errors import ClientInputError, NotConfiguredError
from app.infra.http import Structured, UpstreamReply, to_reply

if TYPE_CHECKING:
    from app.infra.http import UpstreamHttpClient
    from config.settings import SupabaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_SIGNED_URL_SECONDS = 3600


def normalize_object_path(path: Any) -> str:
    """Valida o path do objeto dentro do bucket.

    Raises:
        ClientInputError: Path ausente, absoluto ou com segmentos '..'.
    """
    if not path or not isinstance(path, str):
        raise ClientInputError("path required")
    cleaned = path.strip().lstrip("/")
    segments = cleaned.split("/")
    if not cleaned or any(segment in ("", ".", "..") for segment in segments):
        raise ClientInputError(f"invalid path: {path}")
    return cleaned


class SupabaseStorageClient:
    """Storage API com a service key do servidor."""

    def __init__(self, settings: SupabaseSettings, upstream: UpstreamHttpClient) -> None:
        self._settings = settings
        self._upstream = upstream

    def ensure_configured(self) -> None:
        missing = self._settings.missing()
        if missing:
            raise NotConfiguredError(missing[0])

    def _headers(self, **extra: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.key}",
            "apikey": self._settings.key,
            **extra,
        }

    def _object_url(self, kind: str, path: str) -> str:
        return (
            f"{self._settings.storage_url}/{kind}/"
            f"{quote(self._settings.bucket, safe='')}/{quote(path, safe='/')}"
        )

    async def upload(
        self,
        path: str,
        content: bytes,
        *,
        content_type: str | None = None,
        upsert: bool = False,
    ) -> UpstreamReply:
        """Envia o objeto para `<bucket>/<path>`."""
        self.ensure_configured()
        result = await self._upstream.post(
            self._object_url("object", path),
            headers=self._headers(
                **{
                    "Content-Type": content_type or DEFAULT_CONTENT_TYPE,
                    "x-upsert": "true" if upsert else "false",
                }
            ),
            content=content,
        )
        reply = to_reply(result)
        if not reply.ok:
            return reply
        payload = {
            "success": True,
            "bucket": self._settings.bucket,
            "path": path,
            "size": len(content),
            "data": reply.payload,
        }
        return UpstreamReply(payload=payload, status_code=200, ok=True)

    async def create_signed_url(
        self,
        path: str,
        expires_in: int = DEFAULT_SIGNED_URL_SECONDS,
    ) -> UpstreamReply:
        """Gera URL assinada com validade `expires_in` segundos."""
        self.ensure_configured()
        result = await self._upstream.post(
            self._object_url("object/sign", path),
            headers=self._headers(**{"Content-Type": "application/json"}),
            json={"expiresIn": expires_in},
        )
        reply = to_reply(result)
        if not reply.ok:
            return reply

        body = result.value if isinstance(result, Structured) else None
        signed = body.get("signedURL") if isinstance(body, dict) else None
        if not isinstance(signed, str) or not signed:
            logger.warning("supabase_signed_url_missing", extra={"status_code": result.status})
            envelope = {
                "error": True,
                "status": 500,
                "message": "signedURL missing from storage response",
                "data": reply.payload,
            }
            return UpstreamReply(payload=envelope, status_code=500, ok=False)

        payload = {
            "signedUrl": f"{self._settings.storage_url}{signed}",
            "path": path,
            "expiresIn": expires_in,
        }
        return UpstreamReply(payload=payload, status_code=200, ok=True)
