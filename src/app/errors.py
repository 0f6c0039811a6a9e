"""Erros do relay mapeados para respostas HTTP.

Toda falha de handler vira resposta; nada derruba o processo.
O mapeamento para JSONResponse fica em api/routes/errors.py.
"""

from __future__ import annotations

from typing import Any


class RelayError(Exception):
    """Base dos erros que viram resposta HTTP com status definido."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def as_payload(self) -> dict[str, Any]:
        return {"error": True, "message": self.message}


class ClientInputError(RelayError):
    """Entrada inválida do cliente (ação desconhecida, campo obrigatório ausente)."""

    status_code = 400

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}

    def as_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.details}


class NotConfiguredError(RelayError):
    """Credencial obrigatória vazia no momento da chamada.

    Checado antes de qualquer IO; a mensagem nomeia a variável ausente.
    """

    status_code = 500

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} not configured")
        self.setting_name = setting_name

    def as_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class UpstreamError(RelayError):
    """Falha de rede ou de transporte ao falar com a API de terceiros."""

    def __init__(
        self,
        message: str,
        *,
        integration: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code)
        self.integration = integration
