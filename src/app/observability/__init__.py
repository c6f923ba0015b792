"""Contexto de requisição consultado pelos filters de logging.

O correlation_id chega no header `X-Correlation-ID` (ou é gerado) e é
devolvido na resposta pelo middleware de `api.routes.middleware`.
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    sanitize_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "sanitize_correlation_id",
    "set_correlation_id",
]
