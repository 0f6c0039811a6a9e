"""Cliente HTTP upstream compartilhado pelos conectores.

Sem retry nem backoff: uma falha de transporte vira UpstreamError na hora.
O timeout vem de UPSTREAM_TIMEOUT_SECONDS e é aplicado no AsyncClient.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import httpx

from app.errors import UpstreamError
from app.infra.http.result import DispatchResult, Structured, parse_body

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def create_async_http_client(
    timeout_seconds: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Cria o AsyncClient único do processo.

    Args:
        timeout_seconds: Timeout total de cada chamada upstream.
        transport: Transport alternativo (testes usam httpx.MockTransport).
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds), transport=transport)


class UpstreamHttpClient:
    """Executa uma chamada upstream e devolve DispatchResult.

    Uma instância por integração, todas sobre o mesmo httpx.AsyncClient.
    Logs registram apenas método, path e status (nunca query ou corpo).
    """

    def __init__(self, http_client: httpx.AsyncClient, *, integration: str) -> None:
        self._http = http_client
        self.integration = integration

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> DispatchResult:
        target = urlsplit(url).path
        started_at = time.perf_counter()
        try:
            response = await self._http.request(
                method,
                url,
                headers=dict(headers or {}),
                params=params,
                json=json,
                data=data,
                content=content,
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "upstream_transport_error",
                extra={
                    "integration": self.integration,
                    "method": method,
                    "target": target,
                    "error_type": type(exc).__name__,
                },
            )
            raise UpstreamError(
                f"{self.integration} request failed: {type(exc).__name__}",
                integration=self.integration,
            ) from exc

        result = parse_body(response.text, response.status_code)
        latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
        log = logger.info if result.ok else logger.warning
        log(
            "upstream_response" if result.ok else "upstream_error_status",
            extra={
                "integration": self.integration,
                "method": method,
                "target": target,
                "status_code": response.status_code,
                "structured": isinstance(result, Structured),
                "latency_ms": latency_ms,
            },
        )
        return result

    async def get(self, url: str, **kwargs: Any) -> DispatchResult:
        return await self.send("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> DispatchResult:
        return await self.send("POST", url, **kwargs)
