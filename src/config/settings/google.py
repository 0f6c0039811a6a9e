"""Settings das integrações Google: Drive (OAuth refresh token) e Vision (API key)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_VISION_URL = "https://vision.googleapis.com/v1/images:annotate"


@dataclass(frozen=True)
class GoogleDriveSettings:
    """Configurações do Google Drive.

    O access token é obtido via refresh token (OAuth de usuário) e
    cacheado até expirar.

    Attributes:
        client_id: OAuth client id
        client_secret: OAuth client secret
        refresh_token: Refresh token de longa duração
        folder_id: Pasta raiz onde os uploads são organizados
        token_url: Endpoint de token OAuth
    """

    client_id: str = ""
    client_secret: str = ""
    refresh_token: str = ""
    folder_id: str = ""
    token_url: str = GOOGLE_TOKEN_URL

    @property
    def configured(self) -> bool:
        return not self.missing()

    def missing(self) -> list[str]:
        """Variáveis obrigatórias ausentes, na ordem de checagem."""
        required = {
            "GOOGLE_CLIENT_ID": self.client_id,
            "GOOGLE_CLIENT_SECRET": self.client_secret,
            "GOOGLE_REFRESH_TOKEN": self.refresh_token,
            "GOOGLE_DRIVE_FOLDER_ID": self.folder_id,
        }
        return [name for name, value in required.items() if not value]

    def validate(self) -> list[str]:
        return [f"{name} não configurado" for name in self.missing()]


@dataclass(frozen=True)
class GoogleVisionSettings:
    """Configurações do Google Cloud Vision (OCR).

    Attributes:
        api_key: API key enviada como query param `key`
        annotate_url: Endpoint images:annotate
    """

    api_key: str = ""
    annotate_url: str = GOOGLE_VISION_URL

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> list[str]:
        if not self.api_key:
            return ["GOOGLE_VISION_API_KEY não configurado"]
        return []


def _load_drive_from_env() -> GoogleDriveSettings:
    """Carrega GoogleDriveSettings de variáveis de ambiente."""
    return GoogleDriveSettings(
        client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        refresh_token=os.getenv("GOOGLE_REFRESH_TOKEN", ""),
        folder_id=os.getenv("GOOGLE_DRIVE_FOLDER_ID", ""),
    )


def _load_vision_from_env() -> GoogleVisionSettings:
    """Carrega GoogleVisionSettings de variáveis de ambiente."""
    return GoogleVisionSettings(api_key=os.getenv("GOOGLE_VISION_API_KEY", ""))


@lru_cache(maxsize=1)
def get_drive_settings() -> GoogleDriveSettings:
    """Retorna instância cacheada de GoogleDriveSettings."""
    return _load_drive_from_env()


@lru_cache(maxsize=1)
def get_vision_settings() -> GoogleVisionSettings:
    """Retorna instância cacheada de GoogleVisionSettings."""
    return _load_vision_from_env()
