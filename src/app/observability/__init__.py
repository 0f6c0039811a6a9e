"""Observabilidade: correlation_id e contexto por requisição.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.middleware import RequestContextMiddleware

__all__ = [
    "CORRELATION_HEADER",
    "RequestContextMiddleware",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
