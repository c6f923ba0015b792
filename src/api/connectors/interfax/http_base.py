"""Transporte HTTP (httpx) usado pelo conector InterFAX.

Um `httpx.AsyncClient` é aberto e fechado a cada chamada: as credenciais
mudam por requisição e não há pool compartilhado entre usuários.
Respostas de erro (4xx/5xx) são devolvidas; só falhas de transporte
viram exceção.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass
class HttpClientConfig:
    """Parâmetros do AsyncClient.

    `transport` recebe `httpx.MockTransport` nos testes.
    """

    base_url: str = ""
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Falha de transporte (timeout ou conexão), sem URL nem credenciais.

    Attributes:
        kind: `timeout` | `connection`
    """

    def __init__(self, kind: str) -> None:
        super().__init__(f"http_{kind}_error")
        self.kind = kind


class HttpClient:
    """Requisições sem retry; reenvio de fax fica a critério do usuário."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._auth = auth

    def _open(self, timeout: float | None) -> httpx.AsyncClient:
        cfg = self._config
        return httpx.AsyncClient(
            base_url=cfg.base_url,
            auth=self._auth,
            headers=cfg.default_headers,
            timeout=timeout or cfg.timeout_seconds,
            verify=cfg.verify_ssl,
            transport=cfg.transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Resposta crua, qualquer status.

        Raises:
            HttpError: Timeout ou erro de conexão.
        """
        try:
            async with self._open(timeout) as client:
                return await client.request(method, path, params=params, content=content, headers=headers)
        except httpx.TimeoutException as exc:
            raise HttpError("timeout") from exc
        except httpx.TransportError as exc:
            raise HttpError("connection") from exc
