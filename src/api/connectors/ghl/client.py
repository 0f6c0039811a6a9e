"""Cliente HTTP do GoHighLevel (LeadConnector API v2).

Convenção bearer: Authorization + header Version. Status não-2xx vira
envelope {error, status, message, data} em vez de exceção, para que a
rota responda normalmente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from app.errors import NotConfiguredError
from app.infra.http import to_reply

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.infra.http import UpstreamHttpClient, UpstreamReply
    from config.settings import GHLSettings

logger = logging.getLogger(__name__)

_BODY_METHODS = frozenset({"POST", "PUT"})


def path_segment(value: Any) -> str:
    """Escapa um id recebido do browser para uso como segmento de path."""
    return quote(str(value), safe="")


class GHLClient:
    """Cliente GHL com token e location_id vindos de settings."""

    def __init__(self, settings: GHLSettings, upstream: UpstreamHttpClient) -> None:
        self._settings = settings
        self._upstream = upstream

    @property
    def location_id(self) -> str:
        return self._settings.location_id

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Version": self._settings.api_version,
        }

    async def request(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> UpstreamReply:
        """Executa uma chamada GHL.

        Args:
            method: GET, POST, PUT ou DELETE.
            path: Path relativo à base (ex: "/contacts/").
            body: Corpo JSON (enviado só em POST/PUT).
            params: Query params; valores None são omitidos.

        Raises:
            NotConfiguredError: Se GHL_API_KEY estiver vazio.
        """
        if not self._settings.api_key:
            raise NotConfiguredError("GHL_API_KEY")

        method = method.upper()
        json_body = dict(body) if body is not None and method in _BODY_METHODS else None
        query = {k: v for k, v in (params or {}).items() if v is not None} or None

        logger.info("ghl_request", extra={"method": method, "path": path})
        result = await self._upstream.send(
            method,
            f"{self._settings.base_url}{path}",
            headers=self._headers(),
            params=query,
            json=json_body,
        )
        return to_reply(result)

    def with_location(self, body: Mapping[str, Any]) -> dict[str, Any]:
        """Copia o corpo forçando o locationId configurado."""
        return {**body, "locationId": self._settings.location_id}
