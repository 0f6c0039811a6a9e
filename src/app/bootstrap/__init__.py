"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e monta os
conectores de cada integração sobre um único httpx.AsyncClient.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings(settings)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from app.bootstrap.services import RelayServices, build_services
from app.observability import get_correlation_id
from config.logging import configure_logging

if TYPE_CHECKING:
    from config.settings import AppSettings

DEFAULT_SERVICE_NAME = "quoteit-api-hub"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)

__all__ = [
    "RelayServices",
    "build_services",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup.

    LOG_LEVEL e SERVICE_NAME vêm do ambiente, como em BaseSettings.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    service_name = os.getenv("SERVICE_NAME") or DEFAULT_SERVICE_NAME

    configure_logging(
        level=log_level,
        service_name=service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(settings: AppSettings) -> list[str]:
    """Valida settings no startup.

    Erros das settings base em `staging`/`production` impedem o boot.
    Integrações sem credencial só geram alerta: respondem 500
    "not configured" quando chamadas.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Em ambiente estrito com erros nas settings base.
    """
    environment = settings.base.environment
    errors = settings.validate()
    base_errors = settings.base.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base_errors and environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in base_errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
    return errors
