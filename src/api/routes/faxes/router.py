"""Endpoints de fax.

Endpoints:
- GET  /faxes/inbound                      listagem paginada de recebidos
- GET  /faxes/outbound                     listagem paginada de enviados
- GET  /faxes/{direction}/{id}/content     preview/download do documento
- GET  /faxes/{direction}/{id}/status      status atual no provider
- POST /faxes/outbound                     envio (multipart: arquivo OU URL)
- POST /faxes/outbound/{id}/cancel         cancelamento

Toda resposta é montada a partir de consulta ao vivo na InterFAX.
Erros são traduzidos pelos handlers registrados em `api.routes.errors`.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, Path, Query, Response, UploadFile, status

from api.routes.faxes.dependencies import get_fax_gateway
from api.routes.faxes.presenters import (
    present_cancelled,
    present_page,
    present_receipt,
    present_status,
)
from app.domain.fax import FaxDirection
from app.services.fax_gateway import FaxGateway
from app.services.pagination import DEFAULT_PER_PAGE
from config.settings import get_interfax_settings, get_upload_settings

logger = logging.getLogger(__name__)

router = APIRouter()

FaxId = Annotated[str, Path(pattern=r"^[0-9]+$", description="ID numérico InterFAX")]
Gateway = Annotated[FaxGateway, Depends(get_fax_gateway)]
PageParam = Annotated[int, Query(description="Página (>= 1)")]
PerPageParam = Annotated[int, Query(description="Itens por página (1 a 50)")]


@router.get("/inbound")
async def list_inbound_faxes(
    gateway: Gateway,
    page: PageParam = 1,
    per_page: PerPageParam = DEFAULT_PER_PAGE,
) -> dict[str, Any]:
    result = await gateway.list_inbound(page, per_page)
    return present_page(result, get_interfax_settings().placeholder_csid)


@router.get("/outbound")
async def list_outbound_faxes(
    gateway: Gateway,
    page: PageParam = 1,
    per_page: PerPageParam = DEFAULT_PER_PAGE,
) -> dict[str, Any]:
    result = await gateway.list_outbound(page, per_page)
    return present_page(result)


@router.get("/{direction}/{fax_id}/content")
async def get_fax_content(
    direction: FaxDirection,
    fax_id: FaxId,
    gateway: Gateway,
    inline: bool = False,
) -> Response:
    """Documento do fax.

    TIFF é convertido para PDF quando possível; se a conversão não
    concluir, o TIFF original é servido para download e o header
    `X-Conversion-Degraded` sinaliza a degradação.
    """
    blob = await gateway.get_content(direction, fax_id, inline=inline)
    headers = {
        "Content-Disposition": blob.content_disposition,
        "Cache-Control": "no-cache, must-revalidate",
        "Content-Length": str(blob.size_bytes),
    }
    if blob.conversion_degraded:
        headers["X-Conversion-Degraded"] = "true"
    logger.info(
        "fax_content_served",
        extra={
            "fax_id": fax_id,
            "direction": direction.value,
            "mime_type": blob.mime_type,
            "size_bytes": blob.size_bytes,
            "conversion_degraded": blob.conversion_degraded,
        },
    )
    return Response(content=blob.content, media_type=blob.mime_type, headers=headers)


@router.get("/{direction}/{fax_id}/status")
async def get_fax_status(
    direction: FaxDirection,
    fax_id: FaxId,
    gateway: Gateway,
) -> dict[str, Any]:
    record = await gateway.get_status(direction, fax_id)
    return present_status(record)


@router.post("/outbound", status_code=status.HTTP_201_CREATED)
async def send_fax(
    gateway: Gateway,
    fax_number: Annotated[str | None, Form()] = None,
    file: Annotated[UploadFile | None, File()] = None,
    file_url: Annotated[str | None, Form()] = None,
    subject: Annotated[str | None, Form()] = None,
    reply_email: Annotated[str | None, Form(alias="replyEmail")] = None,
    recipient_name: Annotated[str | None, Form()] = None,
) -> dict[str, Any]:
    """Envia um fax. Exatamente um entre `file` e `file_url`."""
    file_content: bytes | None = None
    file_name: str | None = None
    if file is not None and file.filename:
        # Lê no máximo 1 byte além do limite: suficiente para rejeitar
        file_content = await file.read(get_upload_settings().max_bytes + 1)
        file_name = file.filename
        await file.close()

    receipt = await gateway.send(
        fax_number=fax_number,
        file_content=file_content,
        file_name=file_name,
        file_url=file_url or None,
        subject=subject,
        reply_email=reply_email,
        recipient_name=recipient_name,
    )
    return present_receipt(
        receipt,
        fax_number=(fax_number or "").strip(),
        subject=subject,
        reply_email=reply_email,
        recipient_name=recipient_name,
    )


@router.post("/outbound/{fax_id}/cancel")
async def cancel_fax(fax_id: FaxId, gateway: Gateway) -> dict[str, Any]:
    await gateway.cancel(fax_id)
    return present_cancelled(fax_id)
