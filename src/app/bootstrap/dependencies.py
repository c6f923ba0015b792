"""Montagem do FaxGateway por requisição.

Cada requisição monta seu próprio FaxGateway com as credenciais do
chamador. Settings são cacheadas; clientes HTTP não.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.interfax import create_interfax_client
from app.infra.converters import create_tiff2pdf_converter
from app.services.content_resolver import ContentResolver
from app.services.fax_gateway import FaxGateway, resolve_credentials
from config.settings import get_interfax_settings, get_upload_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols import TiffConverterProtocol
    from app.services.fax_gateway import CallerIdentity

logger = logging.getLogger(__name__)


def create_fax_gateway(
    caller: CallerIdentity | None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    converter: TiffConverterProtocol | None = None,
) -> FaxGateway:
    """Monta o gateway vinculado às credenciais do chamador.

    Raises:
        UnauthenticatedError: Sem chamador
        NotConfiguredError: Chamador sem credenciais InterFAX
    """
    credentials = resolve_credentials(caller)
    interfax = get_interfax_settings()
    provider = create_interfax_client(credentials, interfax, transport=transport)
    resolver = ContentResolver(provider, converter or create_tiff2pdf_converter())
    logger.debug(
        "fax_gateway_created",
        extra={"account": credentials.masked_username},
    )
    return FaxGateway(
        credentials=credentials,
        provider=provider,
        resolver=resolver,
        upload_settings=get_upload_settings(),
        window_size=interfax.list_window_size,
    )
