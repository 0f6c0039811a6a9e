"""Logging JSON do relay (python-json-logger).

Todo record sai com correlation_id e service injetados por filtro;
query strings com credenciais e bearer tokens são mascarados antes
da formatação.

    from config.logging import get_logger

    logger = get_logger(__name__)
    logger.info("upstream_request", extra={"integration": "ghl"})

configure_logging é chamado uma vez em app.bootstrap.initialize_app.
Nunca logar payloads de cotação ou corpos de resposta.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter, redact_secrets
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_secrets",
]
