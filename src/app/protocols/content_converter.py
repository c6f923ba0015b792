"""Contrato do conversor TIFF → PDF."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Resultado de uma tentativa de conversão.

    `content` só é preenchido quando a saída é um PDF válido; caso
    contrário `reason` descreve a falha (binary_missing, timeout, ...).
    """

    content: bytes | None
    reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.content is not None


class TiffConverterProtocol(Protocol):
    """Converte bytes TIFF em bytes PDF, sem nunca levantar exceção."""

    async def convert(self, tiff_bytes: bytes) -> ConversionResult: ...
