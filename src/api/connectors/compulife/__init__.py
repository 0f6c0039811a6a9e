"""Conector Compulife: cotação de seguro de vida.

Responsabilidades:
- Whitelist declarativo de campos por ação (fields.py)
- Tradução inbound -> parâmetros e injeção de credenciais (params.py)
- Chamadas públicas e privadas (client.py)
- Roteamento do endpoint multiplexado por `action` (actions.py)
"""

from .actions import ACTIONS, DEFAULT_ACTION, dispatch_action, resolve_action
from .client import CompulifeClient
from .fields import ACTION_FIELDS, FieldSpec, full_whitelist
from .params import CREDENTIAL_FIELDS, attach_credentials, build_private_url, translate

__all__ = [
    "ACTIONS",
    "ACTION_FIELDS",
    "CREDENTIAL_FIELDS",
    "DEFAULT_ACTION",
    "CompulifeClient",
    "FieldSpec",
    "attach_credentials",
    "build_private_url",
    "dispatch_action",
    "full_whitelist",
    "resolve_action",
    "translate",
]
