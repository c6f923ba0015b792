"""Filters aplicados ao handler raiz do gateway.

- RequestContextFilter: carimba `service` e `correlation_id`
- CredentialMaskingFilter: reescreve credenciais que escaparam via `extra`

Nenhum filter descarta records: todos retornam True.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

SENSITIVE_LOG_FIELDS = frozenset({"username", "password", "authorization"})

_MASK = "****"
_VISIBLE_EDGE = 2


def mask_secret(value: str | None) -> str | None:
    """`acme-user` → `ac****er`. Valores curtos viram só `****`."""
    if value is None:
        return None
    if len(value) <= _VISIBLE_EDGE * 2:
        return _MASK
    return f"{value[:_VISIBLE_EDGE]}{_MASK}{value[-_VISIBLE_EDGE:]}"


class RequestContextFilter(logging.Filter):
    """Carimba o record com o serviço e o correlation_id da requisição.

    Um correlation_id explícito no `extra` tem precedência sobre o getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def _current_correlation_id(self) -> str:
        if self._correlation_id_getter is None:
            return ""
        return self._correlation_id_getter()

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._current_correlation_id()
        record.service = self._service_name
        return True


def _mask_value(key: str, value: Any) -> Any:
    if key.lower() in SENSITIVE_LOG_FIELDS and isinstance(value, str):
        return mask_secret(value)
    if isinstance(value, Mapping):
        return {k: _mask_value(str(k), v) for k, v in value.items()}
    return value


class CredentialMaskingFilter(logging.Filter):
    """Mascara `username`/`password`/`authorization` no topo do `extra` e
    dentro de dicionários aninhados (ex: `headers`)."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(vars(record).items()):
            if key.lower() in SENSITIVE_LOG_FIELDS or isinstance(value, Mapping):
                setattr(record, key, _mask_value(key, value))
        return True
