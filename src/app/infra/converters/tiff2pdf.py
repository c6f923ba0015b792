"""Conversor TIFF → PDF via binário `tiff2pdf` (libtiff-tools).

Implementação concreta de IO: cria um par de arquivos temporários
(entrada TIFF, saída PDF), executa o binário com timeout e remove os
dois arquivos em qualquer caminho de saída. Nunca levanta exceção:
qualquer falha vira ConversionResult com `reason`.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from app.protocols.content_converter import ConversionResult

if TYPE_CHECKING:
    from config.settings import ConversionSettings

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"


class Tiff2PdfConverter:
    """Executa `tiff2pdf -o <saida.pdf> <entrada.tiff>`."""

    def __init__(
        self,
        binary_path: str,
        timeout_seconds: float = 10.0,
        temp_dir: str | Path | None = None,
    ) -> None:
        self._binary_path = binary_path
        self._timeout_seconds = timeout_seconds
        self._temp_dir = str(temp_dir) if temp_dir is not None else None

    @property
    def binary_path(self) -> str:
        return self._binary_path

    def resolved_binary(self) -> str | None:
        """Caminho absoluto ou nome no PATH; None se não for executável."""
        return shutil.which(self._binary_path)

    def is_available(self) -> bool:
        return self.resolved_binary() is not None

    async def convert(self, tiff_bytes: bytes) -> ConversionResult:
        """Converte fora do event loop para não bloquear outras requisições."""
        if not self.is_available():
            return ConversionResult(content=None, reason="binary_missing")
        return await asyncio.to_thread(self._convert_sync, tiff_bytes)

    def _convert_sync(self, tiff_bytes: bytes) -> ConversionResult:
        tiff_path: Path | None = None
        pdf_path: Path | None = None
        try:
            tiff_path = self._reserve_temp_file("tiff_", ".tiff")
            pdf_path = self._reserve_temp_file("pdf_", ".pdf")
            tiff_path.write_bytes(tiff_bytes)
            return self._run(tiff_path, pdf_path)
        except OSError as exc:
            logger.warning(
                "tiff2pdf_io_failed",
                extra={"error_type": type(exc).__name__},
            )
            return ConversionResult(content=None, reason="io_error")
        finally:
            for path in (tiff_path, pdf_path):
                if path is not None:
                    _remove_quietly(path)

    def _run(self, tiff_path: Path, pdf_path: Path) -> ConversionResult:
        cmd = [self.resolved_binary() or self._binary_path, "-o", str(pdf_path), str(tiff_path)]
        try:
            proc = subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                timeout=self._timeout_seconds,
            )
        except FileNotFoundError:
            return ConversionResult(content=None, reason="binary_missing")
        except subprocess.TimeoutExpired:
            logger.warning(
                "tiff2pdf_timeout",
                extra={"timeout_seconds": self._timeout_seconds},
            )
            return ConversionResult(content=None, reason="timeout")

        output = pdf_path.read_bytes() if pdf_path.exists() else b""
        if not output:
            logger.warning(
                "tiff2pdf_empty_output",
                extra={
                    "returncode": proc.returncode,
                    "stderr": proc.stderr.decode("utf-8", errors="replace")[:500],
                },
            )
            return ConversionResult(content=None, reason="empty_output")
        if not output.startswith(PDF_MAGIC):
            logger.warning(
                "tiff2pdf_invalid_output",
                extra={"returncode": proc.returncode, "output_size": len(output)},
            )
            return ConversionResult(content=None, reason="invalid_pdf")
        return ConversionResult(content=output)

    def _reserve_temp_file(self, prefix: str, suffix: str) -> Path:
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=self._temp_dir)
        os.close(fd)
        return Path(name)


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.error(
            "tiff2pdf_cleanup_failed",
            extra={"path": str(path), "error_type": type(exc).__name__},
        )


def create_tiff2pdf_converter(settings: ConversionSettings | None = None) -> Tiff2PdfConverter:
    """Factory com settings do ambiente."""
    from config.settings import get_conversion_settings

    conversion = settings or get_conversion_settings()
    return Tiff2PdfConverter(
        binary_path=conversion.tiff2pdf_path,
        timeout_seconds=conversion.timeout_seconds,
    )
