"""Rotas HTTP da API: adapters de entrada por integração.

Responsabilidades:
- Definir endpoints HTTP (health, ações Compulife, proxies)
- Validação inicial de request (corpo JSON, query params)
- Delegação para connectors
- Respostas HTTP com o status upstream propagado

Agregação:
- router.py: registra todos os routers no app principal
- errors.py: mapeamento de RelayError para JSON
"""

from __future__ import annotations

from api.routes.errors import register_error_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_error_handlers"]
