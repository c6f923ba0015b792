"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/ e api/connectors/.
"""

from app.services.content_resolver import ContentResolver, SniffedFormat, sniff_format
from app.services.fax_gateway import FaxGateway, friendly_send_error, resolve_credentials
from app.services.pagination import paginate, sort_newest_first

__all__ = [
    "ContentResolver",
    "FaxGateway",
    "SniffedFormat",
    "friendly_send_error",
    "paginate",
    "resolve_credentials",
    "sniff_format",
    "sort_newest_first",
]
