"""Formatter JSON (python-json-logger) do gateway.

Cada linha sai como um objeto com, no mínimo:
timestamp, level, logger, message, correlation_id e service.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pythonjsonlogger.json import JsonFormatter

# Ordem em que os campos-base aparecem no JSON
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP: dict[str, str] = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def _json_default(value: Any) -> Any:
    # Extras comuns no gateway que o encoder padrão não conhece
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    return str(value)


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com campos-base renomeados.

    Exemplo:
        {"timestamp": "2026-10-19 10:30:00,123", "level": "INFO",
         "logger": "app.services.fax_gateway", "message": "fax_list_fetched",
         "correlation_id": "4f1c...", "service": "fax-gateway",
         "direction": "inbound", "raw_count": 50}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_default=_json_default,
    )
