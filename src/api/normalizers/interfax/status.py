"""Mapeamento de status InterFAX → FaxStatus."""

from __future__ import annotations

from typing import Any

from app.domain.fax import FaxStatus

# 0 e 2 aparecem ambos em faxes concluídos (com completionTime e páginas)
NUMERIC_STATUS_MAP: dict[int, FaxStatus] = {
    0: FaxStatus.COMPLETED,
    1: FaxStatus.IN_PROGRESS,
    2: FaxStatus.COMPLETED,
    3: FaxStatus.FAILED,
    4: FaxStatus.CANCELLED,
    5: FaxStatus.BUSY,
    6: FaxStatus.NO_ANSWER,
    7: FaxStatus.REJECTED,
    8: FaxStatus.RETRYING,
    9: FaxStatus.PENDING,
}

_KNOWN_TOKENS = {status.value: status for status in FaxStatus}


def _as_number(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        # isdigit aceita "²" e "①", que int() rejeita
        if text.isascii() and text.lstrip("-").isdigit():
            return int(text)
    return None


def map_status(raw: Any) -> FaxStatus:
    """Converte status bruto em FaxStatus, nunca levanta.

    Números (inclusive strings numéricas) usam NUMERIC_STATUS_MAP; códigos
    não mapeados viram UNKNOWN. Tokens textuais passam se já forem
    conhecidos, senão UNKNOWN.
    """
    number = _as_number(raw)
    if number is not None:
        return NUMERIC_STATUS_MAP.get(number, FaxStatus.UNKNOWN)
    if isinstance(raw, str):
        return _KNOWN_TOKENS.get(raw.strip().lower(), FaxStatus.UNKNOWN)
    return FaxStatus.UNKNOWN
