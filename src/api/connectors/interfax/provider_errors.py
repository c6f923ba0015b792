"""Erros e helpers de parsing para a REST API InterFAX."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class InterfaxApiError:
    """Erro retornado pela API InterFAX.

    A API devolve `{"code": -1062, "message": "...", "moreInfo": "..."}`
    na maioria dos erros, mas às vezes apenas texto puro.
    """

    status_code: int
    error_code: int | None
    error_message: str
    more_info: str | None = None

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_permanent(self) -> bool:
        """Erros 4xx (exceto 429) não se resolvem com retry."""
        return 400 <= self.status_code < 500 and self.status_code != 429

    def describe(self) -> str:
        if self.more_info and self.more_info not in self.error_message:
            return f"{self.error_message} ({self.more_info})"
        return self.error_message


def parse_interfax_error(response: httpx.Response) -> InterfaxApiError | None:
    """Extrai erro de uma resposta não-2xx.

    Returns:
        InterfaxApiError se houver erro, None se sucesso
    """
    if response.is_success:
        return None

    error_code: int | None = None
    more_info: str | None = None
    message = ""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        raw_code = body.get("code")
        error_code = raw_code if isinstance(raw_code, int) else None
        message = str(body.get("message") or "")
        more_info = body.get("moreInfo") or None
    if not message:
        message = response.text.strip() or response.reason_phrase or "Unknown InterFAX error"

    return InterfaxApiError(
        status_code=response.status_code,
        error_code=error_code,
        error_message=message,
        more_info=more_info,
    )
