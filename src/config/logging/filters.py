"""Filters de logging: contexto da requisição e remoção de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição inbound
- service: Nome do serviço (ex: quoteit_api_hub)

Credenciais do relay viajam em query strings (API key do Vision,
JSON ?COMPULIFE= com o authorization id); SecretRedactionFilter
mascara esses valores em mensagens formatadas por bibliotecas.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

_SECRET_QUERY_PARAMS = re.compile(r"([?&](?:key|COMPULIFE|access_token)=)[^&\s\"']+")
_BEARER_TOKEN = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+")


def redact_secrets(text: str) -> str:
    """Mascara query params sensíveis e bearer tokens em um texto."""
    text = _SECRET_QUERY_PARAMS.sub(rf"\1{REDACTED}", text)
    return _BEARER_TOKEN.sub(rf"\1{REDACTED}", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Se correlation_id já veio via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Reescreve a mensagem do record sem credenciais."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # args incompatíveis: o formatter reporta via Handler.handleError
            return True
        redacted = redact_secrets(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
