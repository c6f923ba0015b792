"""Composition root do gateway de fax.

Startup em dois passos:
    initialize_app()            # logging JSON, antes de qualquer log
    validate_runtime_settings() # no lifespan do FastAPI

A montagem do FaxGateway por requisição fica em
`app.bootstrap.dependencies`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_conversion_settings,
    get_interfax_settings,
    get_upload_settings,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Prefixo da mensagem de erro → getter das settings validadas
_VALIDATED_SETTINGS: tuple[tuple[str, Callable[[], object]], ...] = (
    ("base", get_base_settings),
    ("interfax", get_interfax_settings),
    ("conversion", get_conversion_settings),
    ("upload", get_upload_settings),
)


def initialize_app() -> None:
    """Logging JSON com correlation_id por requisição."""
    base = get_base_settings()
    configure_logging(
        level=base.effective_log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Erros de todas as settings, prefixados pelo grupo (ex: `upload: ...`)."""
    errors: list[str] = []
    for prefix, getter in _VALIDATED_SETTINGS:
        errors.extend(f"{prefix}: {error}" for error in getter().validate())  # type: ignore[attr-defined]
    return errors


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Fora de development, configuração inválida impede o boot.
    tiff2pdf ausente só gera alerta: TIFF passa a ser servido sem conversão.

    Raises:
        RuntimeError: Settings inválidas em staging/production.
    """
    base = get_base_settings()
    errors = collect_settings_errors()
    _warn_if_converter_missing()

    if errors:
        logger.warning(
            "settings_validation_failed",
            extra={
                "component": "bootstrap",
                "environment": base.environment,
                "error_count": len(errors),
                "errors": errors,
            },
        )
        if base.is_strict:
            details = "\n".join(f"- {error}" for error in errors)
            raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
        return

    logger.info(
        "settings_validated",
        extra={"component": "bootstrap", "environment": base.environment},
    )


def _warn_if_converter_missing() -> None:
    from app.infra.converters import create_tiff2pdf_converter

    converter = create_tiff2pdf_converter()
    if not converter.is_available():
        logger.warning(
            "tiff2pdf_unavailable",
            extra={"component": "bootstrap", "binary_path": converter.binary_path},
        )


__all__ = [
    "collect_settings_errors",
    "initialize_app",
    "validate_runtime_settings",
]
