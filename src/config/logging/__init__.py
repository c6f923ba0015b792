"""Logging estruturado JSON do gateway de fax.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="fax-gateway")
    logger = get_logger(__name__)

Credenciais nunca são logadas por completo: use `mask_secret`;
`CredentialMaskingFilter` cobre o que escapar via `extra`.
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    NOISY_LOGGERS,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import (
    SENSITIVE_LOG_FIELDS,
    CredentialMaskingFilter,
    RequestContextFilter,
    mask_secret,
)
from config.logging.formatters import FIELD_RENAME_MAP, REQUIRED_LOG_FIELDS, create_json_formatter

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "NOISY_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_LOG_FIELDS",
    "CredentialMaskingFilter",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_secret",
]
