"""Settings de upload de documentos para envio de fax."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_ALLOWED_EXTENSIONS: frozenset[str] = frozenset({"pdf", "tiff", "tif", "doc", "docx"})
DEFAULT_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10MB


@dataclass(frozen=True)
class UploadSettings:
    """Limites aplicados ao arquivo enviado em `send`.

    Attributes:
        max_bytes: Tamanho máximo do arquivo
        allowed_extensions: Extensões aceitas (sem ponto, minúsculas)
    """

    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    allowed_extensions: frozenset[str] = field(default=DEFAULT_ALLOWED_EXTENSIONS)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.max_bytes <= 0:
            errors.append("FAX_UPLOAD_MAX_BYTES deve ser > 0")
        if not self.allowed_extensions:
            errors.append("FAX_UPLOAD_ALLOWED_EXTENSIONS não pode ser vazio")
        return errors


def _parse_extensions(raw: str | None) -> frozenset[str]:
    if not raw:
        return DEFAULT_ALLOWED_EXTENSIONS
    return frozenset(ext.strip().lstrip(".").lower() for ext in raw.split(",") if ext.strip())


def _load_from_env() -> UploadSettings:
    return UploadSettings(
        max_bytes=int(os.getenv("FAX_UPLOAD_MAX_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
        allowed_extensions=_parse_extensions(os.getenv("FAX_UPLOAD_ALLOWED_EXTENSIONS")),
    )


@lru_cache(maxsize=1)
def get_upload_settings() -> UploadSettings:
    """Retorna instância cacheada de UploadSettings."""
    return _load_from_env()
