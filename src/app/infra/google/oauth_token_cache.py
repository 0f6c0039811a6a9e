"""Cache de access token OAuth do Google (fluxo refresh_token).

Um único token por processo, renovado quando expira. A renovação não é
serializada: chamadas concorrentes no limite da expiração podem renovar
mais de uma vez. A renovação é idempotente no Google e o último token
gravado vence.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.errors import NotConfiguredError, UpstreamError
from app.infra.http import Structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.infra.http import UpstreamHttpClient
    from config.settings import GoogleDriveSettings

logger = logging.getLogger(__name__)

# Margem para não usar um token prestes a expirar durante o upload
DEFAULT_EXPIRY_MARGIN_SECONDS = 60.0
DEFAULT_EXPIRES_IN_SECONDS = 3600.0


@dataclass(frozen=True, slots=True)
class CachedAccessToken:
    """Access token e instante (relógio monotônico) em que deixa de valer."""

    token: str
    expires_at: float


class GoogleOAuthTokenCache:
    """Fornece access tokens válidos a partir do refresh token configurado."""

    def __init__(
        self,
        settings: GoogleDriveSettings,
        upstream: UpstreamHttpClient,
        *,
        clock: Callable[[], float] = time.monotonic,
        expiry_margin_seconds: float = DEFAULT_EXPIRY_MARGIN_SECONDS,
    ) -> None:
        self._settings = settings
        self._upstream = upstream
        self._clock = clock
        self._margin = expiry_margin_seconds
        self._cached: CachedAccessToken | None = None

    @property
    def cached(self) -> CachedAccessToken | None:
        return self._cached

    def invalidate(self) -> None:
        self._cached = None

    async def get_access_token(self) -> str:
        """Retorna o token em cache ou renova se expirado.

        Raises:
            NotConfiguredError: Credenciais OAuth ausentes.
            UpstreamError: Endpoint de token recusou ou não devolveu access_token.
        """
        cached = self._cached
        if cached is not None and self._clock() < cached.expires_at:
            return cached.token
        return await self._refresh()

    async def _refresh(self) -> str:
        missing = [
            name
            for name in ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN")
            if name in self._settings.missing()
        ]
        if missing:
            raise NotConfiguredError(missing[0])

        result = await self._upstream.post(
            self._settings.token_url,
            data={
                "client_id": self._settings.client_id,
                "client_secret": self._settings.client_secret,
                "refresh_token": self._settings.refresh_token,
                "grant_type": "refresh_token",
            },
        )
        body = result.value if isinstance(result, Structured) else None
        token = body.get("access_token") if isinstance(body, dict) and result.ok else None
        if not token:
            logger.warning("google_token_refresh_failed", extra={"status_code": result.status})
            raise UpstreamError(
                "Google OAuth token refresh failed",
                integration="google_oauth",
                status_code=result.status if not result.ok else None,
            )

        expires_in = float(body.get("expires_in") or DEFAULT_EXPIRES_IN_SECONDS)
        self._cached = CachedAccessToken(
            token=token,
            expires_at=self._clock() + max(expires_in - self._margin, 0.0),
        )
        logger.info("google_token_refreshed", extra={"expires_in": expires_in})
        return token
