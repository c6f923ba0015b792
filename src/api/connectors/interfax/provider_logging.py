"""Helpers de logging para a API InterFAX (sem credenciais)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .provider_errors import InterfaxApiError

logger = logging.getLogger(__name__)


def log_provider_error(
    api_error: InterfaxApiError,
    operation: str,
    **context: Any,
) -> None:
    """Loga erro do provider com operação e identificadores do registro."""
    logger.error(
        "interfax_request_failed",
        extra={
            "operation": operation,
            "status_code": api_error.status_code,
            "error_code": api_error.error_code,
            "error_message": api_error.error_message,
            "is_permanent": api_error.is_permanent,
            **context,
        },
    )


def log_transport_error(operation: str, error_type: str, **context: Any) -> None:
    """Loga timeout/falha de conexão."""
    logger.error(
        "interfax_transport_failed",
        extra={"operation": operation, "error_type": error_type, **context},
    )


def log_success(operation: str, status_code: int, **context: Any) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "interfax_request_ok",
        extra={"operation": operation, "status_code": status_code, **context},
    )
