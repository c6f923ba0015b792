"""Settings de processo do gateway de fax.

Ambiente, nome do serviço e nível de log. Lidos uma vez por processo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "fax-gateway"

# Aliases aceitos em ENVIRONMENT; qualquer outro valor cai em development
_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

_TRUTHY = frozenset({"true", "1", "yes", "on"})


@dataclass(frozen=True)
class BaseSettings:
    """Configuração de processo.

    Attributes:
        environment: development|staging|production
        service_name: Carimbado em cada linha de log
        debug: Liga logs DEBUG
        log_level: Nível do root logger quando debug está desligado
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Staging e produção não sobem com configuração inválida."""
        return self.environment != "development"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name.strip():
            errors.append("SERVICE_NAME não pode ser vazio")
        return errors


def parse_environment(raw: str | None) -> Environment:
    """`prod` → `production`, `STAGE` → `staging`, resto → `development`."""
    return _ENVIRONMENT_ALIASES.get((raw or "").strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=os.getenv("DEBUG", "").strip().lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    return _load_base_from_env()
