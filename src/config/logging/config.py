"""Instalação do logging estruturado do gateway.

`configure_logging` roda uma vez no bootstrap e deixa o root logger com
um único handler JSON em stdout, já com os filters de contexto e de
mascaramento.

Uso:
    from config.logging import get_logger

    logger = get_logger(__name__)
    logger.info("fax_submitted", extra={"fax_id": "854759652"})
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import CredentialMaskingFilter, RequestContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "fax_gateway"

# httpx/httpcore logam a URL completa (com faxNumber na query) em INFO
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _normalize_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return normalized


def _build_handler(
    level: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RequestContextFilter(service_name, correlation_id_getter))
    handler.addFilter(CredentialMaskingFilter())
    return handler


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Substitui os handlers do root por um handler JSON.

    Raises:
        ValueError: Nível desconhecido.
    """
    normalized = _normalize_level(level)

    root = logging.getLogger()
    root.setLevel(normalized)
    root.handlers = [_build_handler(normalized, service_name, correlation_id_getter)]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    **context: object,
) -> None:
    """Registra uma degradação que não vira erro para o chamador.

    Ex: conversão TIFF → PDF que não concluiu e serve o TIFF original.
    `context` carrega a identificação (fax_id, direction).
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    extra.update(context)
    if reason:
        extra["reason"] = reason
    logger.info("Fallback applied for %s", component, extra=extra)
