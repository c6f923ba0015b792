"""correlation_id por requisição do gateway de fax.

Cada requisição HTTP recebe um id (reaproveitado do header
`X-Correlation-ID` quando válido) que é injetado em todos os logs
emitidos durante o seu processamento, inclusive nos logs do adapter
InterFAX e do conversor TIFF → PDF.

ContextVar mantém o valor isolado entre requisições concorrentes.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "X-Correlation-ID"

# Ids externos aceitos: alfanumérico, hífen, underscore e ponto
_VALID_EXTERNAL_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("fax_correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" fora de uma requisição)."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def sanitize_correlation_id(raw: str | None) -> str | None:
    """Descarta ids externos vazios, longos ou com caracteres inesperados.

    Evita que valores arbitrários do cliente poluam os logs.
    """
    if not raw:
        return None
    candidate = raw.strip()
    if not _VALID_EXTERNAL_ID.match(candidate):
        return None
    return candidate


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o id do contexto; gera um novo quando ausente ou inválido.

    Returns:
        Token para `reset_correlation_id()`.
    """
    value = sanitize_correlation_id(correlation_id) or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
