"""Settings específicas do provider InterFAX.

Somente parâmetros de transporte e janela de listagem. Credenciais NÃO
ficam aqui: cada gateway recebe as credenciais da conta do chamador.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

INTERFAX_API_BASE_URL: str = "https://rest.interfax.net"

# Janela fixa de registros recentes buscada por listagem
DEFAULT_LIST_WINDOW_SIZE: int = 50

# CSID padrão da InterFAX; não identifica o remetente
DEFAULT_PLACEHOLDER_CSID: str = "INTERFAX"


@dataclass(frozen=True)
class InterfaxSettings:
    """Configurações do provider InterFAX.

    Attributes:
        api_base_url: URL base da REST API
        request_timeout_seconds: Timeout para chamadas de metadados
        content_timeout_seconds: Timeout para download de imagens
        list_window_size: Quantidade de registros recentes buscados por listagem
        placeholder_csid: CSID genérico ignorado ao montar nome do remetente
        verify_ssl: Validação TLS
    """

    api_base_url: str = INTERFAX_API_BASE_URL
    request_timeout_seconds: float = 30.0
    content_timeout_seconds: float = 60.0
    list_window_size: int = DEFAULT_LIST_WINDOW_SIZE
    placeholder_csid: str = DEFAULT_PLACEHOLDER_CSID
    verify_ssl: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas do InterFAX.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("INTERFAX_API_BASE_URL deve ser http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("INTERFAX_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.content_timeout_seconds <= 0:
            errors.append("INTERFAX_CONTENT_TIMEOUT_SECONDS deve ser > 0")

        if not 1 <= self.list_window_size <= 1000:
            errors.append("INTERFAX_LIST_WINDOW_SIZE deve estar entre 1 e 1000")

        return errors


def _load_from_env() -> InterfaxSettings:
    """Carrega InterfaxSettings a partir de variáveis de ambiente."""
    return InterfaxSettings(
        api_base_url=os.getenv("INTERFAX_API_BASE_URL", INTERFAX_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(os.getenv("INTERFAX_REQUEST_TIMEOUT_SECONDS", "30")),
        content_timeout_seconds=float(os.getenv("INTERFAX_CONTENT_TIMEOUT_SECONDS", "60")),
        list_window_size=int(
            os.getenv("INTERFAX_LIST_WINDOW_SIZE", str(DEFAULT_LIST_WINDOW_SIZE))
        ),
        placeholder_csid=os.getenv("INTERFAX_PLACEHOLDER_CSID", DEFAULT_PLACEHOLDER_CSID),
        verify_ssl=os.getenv("INTERFAX_VERIFY_SSL", "true").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_interfax_settings() -> InterfaxSettings:
    """Retorna instância cacheada de InterfaxSettings."""
    return _load_from_env()
