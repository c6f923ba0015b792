"""Resolução de conteúdo de fax: sniff de formato + conversão condicional.

Fluxo:
1. Busca bytes brutos via provider
2. Detecta formato pelos magic bytes
3. TIFF → tenta PDF via conversor; se falhar, serve o TIFF original
4. Aplica política de disposition (inline/attachment)

Conversão que não conclui é degradação (`conversion_degraded=True`),
nunca erro para o chamador.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from app.domain.fax import ContentBlob, FaxDirection
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.fax import Disposition, MimeType
    from app.protocols import FaxProviderProtocol, TiffConverterProtocol

logger = logging.getLogger(__name__)

PDF_MIME: MimeType = "application/pdf"
TIFF_MIME: MimeType = "image/tiff"
PNG_MIME: MimeType = "image/png"

_PDF_MAGIC = b"%PDF-"
_TIFF_MAGICS = (b"II*", b"MM*", b"TIFF")
_IMAGE_MAGICS = (b"GIF", b"PNG", b"\x89PNG")

_EXTENSIONS: dict[str, str] = {PDF_MIME: "pdf", TIFF_MIME: "tiff", PNG_MIME: "png"}


class SniffedFormat(Enum):
    """Formato detectado pelos primeiros bytes."""

    PDF = "pdf"
    TIFF = "tiff"
    IMAGE = "image"
    UNKNOWN = "unknown"


def sniff_format(content: bytes) -> SniffedFormat:
    """Detecta formato por prefixo. Desconhecido não é erro."""
    if content.startswith(_PDF_MAGIC):
        return SniffedFormat.PDF
    if content.startswith(_TIFF_MAGICS):
        return SniffedFormat.TIFF
    if content.startswith(_IMAGE_MAGICS):
        return SniffedFormat.IMAGE
    return SniffedFormat.UNKNOWN


def choose_disposition(mime_type: MimeType, inline_requested: bool = False) -> Disposition:
    """TIFF sempre download (browsers não renderizam); PDF sempre preview."""
    if mime_type == TIFF_MIME:
        return "attachment"
    if mime_type == PDF_MIME:
        return "inline"
    return "inline" if inline_requested else "attachment"


def _filename_for(fax_id: str, mime_type: MimeType) -> str | None:
    # PNG segue o pedido do chamador, sem filename
    if mime_type in (PDF_MIME, TIFF_MIME):
        return f"fax_{fax_id}.{_EXTENSIONS[mime_type]}"
    return None


class ContentResolver:
    """Busca e prepara o conteúdo binário de um fax para preview/download."""

    def __init__(
        self,
        provider: FaxProviderProtocol,
        converter: TiffConverterProtocol,
    ) -> None:
        self._provider = provider
        self._converter = converter

    async def resolve(
        self,
        direction: FaxDirection,
        fax_id: str,
        inline_requested: bool = False,
    ) -> ContentBlob:
        """Retorna o ContentBlob pronto para resposta.

        Raises:
            ContentUnavailableError: Fax inexistente ou sem conteúdo
            ProviderError: Falha na chamada remota
        """
        logger.info(
            "fax_content_requested",
            extra={"fax_id": fax_id, "direction": direction.value},
        )
        raw = await self._provider.content_bytes(direction, fax_id)
        sniffed = sniff_format(raw)
        logger.info(
            "fax_content_retrieved",
            extra={
                "fax_id": fax_id,
                "direction": direction.value,
                "size_bytes": len(raw),
                "sniffed_format": sniffed.value,
            },
        )

        content = raw
        degraded = False
        if sniffed is SniffedFormat.TIFF:
            content, mime_type, degraded = await self._convert_tiff(raw, direction, fax_id)
        elif sniffed is SniffedFormat.IMAGE:
            mime_type = PNG_MIME
        else:
            # PDF, ou formato desconhecido servido como PDF (best-effort)
            mime_type = PDF_MIME

        disposition = choose_disposition(mime_type, inline_requested)
        return ContentBlob(
            content=content,
            mime_type=mime_type,
            disposition=disposition,
            filename=_filename_for(fax_id, mime_type),
            conversion_degraded=degraded,
        )

    async def _convert_tiff(
        self,
        raw: bytes,
        direction: FaxDirection,
        fax_id: str,
    ) -> tuple[bytes, MimeType, bool]:
        context = {"fax_id": fax_id, "direction": direction.value}
        try:
            result = await self._converter.convert(raw)
        except Exception as exc:
            log_fallback(logger, "tiff_conversion", reason=type(exc).__name__, **context)
            return raw, TIFF_MIME, True

        if result.content is None or not result.content.startswith(_PDF_MAGIC):
            log_fallback(logger, "tiff_conversion", reason=result.reason or "invalid_pdf", **context)
            return raw, TIFF_MIME, True

        logger.info(
            "fax_tiff_converted",
            extra={**context, "original_size": len(raw), "converted_size": len(result.content)},
        )
        return result.content, PDF_MIME, False
