"""Settings de conversão TIFF → PDF."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_TIFF2PDF_PATH: str = "/usr/local/bin/tiff2pdf"


@dataclass(frozen=True)
class ConversionSettings:
    """Configurações do conversor externo.

    Attributes:
        tiff2pdf_path: Caminho absoluto do binário tiff2pdf (libtiff-tools)
        timeout_seconds: Tempo máximo de execução do conversor
    """

    tiff2pdf_path: str = DEFAULT_TIFF2PDF_PATH
    timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.tiff2pdf_path:
            errors.append("TIFF2PDF_PATH não pode ser vazio")
        if self.timeout_seconds <= 0:
            errors.append("TIFF2PDF_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> ConversionSettings:
    return ConversionSettings(
        tiff2pdf_path=os.getenv("TIFF2PDF_PATH", DEFAULT_TIFF2PDF_PATH),
        timeout_seconds=float(os.getenv("TIFF2PDF_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_conversion_settings() -> ConversionSettings:
    """Retorna instância cacheada de ConversionSettings."""
    return _load_from_env()
