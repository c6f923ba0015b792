"""Tradução da taxonomia de erros do gateway para respostas JSON.

Status code vem da classe (`http_status`); o corpo segue o formato
`{error, message}` consumido pelo frontend.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import Request
from fastapi.responses import JSONResponse

from utils.errors import (
    ContentUnavailableError,
    FaxGatewayError,
    FaxValidationError,
    NotConfiguredError,
    ProviderError,
    UnauthenticatedError,
)

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Rótulo de erro por operação do provider
PROVIDER_ERROR_LABELS: dict[str, str] = {
    "list_inbound": "Failed to fetch inbound faxes",
    "list_outbound": "Failed to fetch outbound faxes",
    "find_inbound": "Failed to get fax status",
    "find_outbound": "Failed to get fax status",
    "content_inbound": "Failed to retrieve fax content",
    "content_outbound": "Failed to retrieve fax content",
    "deliver": "Failed to send fax",
    "send": "Failed to send fax",
    "cancel": "Failed to cancel fax",
    "get_balance": "Failed to get account balance",
}


def error_body(exc: FaxGatewayError) -> dict[str, Any]:
    """Corpo JSON para uma exceção do gateway."""
    if isinstance(exc, NotConfiguredError | UnauthenticatedError):
        return {"error": exc.error_label}

    body: dict[str, Any] = {"error": exc.error_label, "message": str(exc)}
    if isinstance(exc, ProviderError):
        body["error"] = PROVIDER_ERROR_LABELS.get(exc.operation or "", exc.error_label)
    elif isinstance(exc, FaxValidationError) and exc.field:
        body["field"] = exc.field
    elif isinstance(exc, ContentUnavailableError):
        body["fax_id"] = exc.fax_id
        body["type"] = exc.direction
    return body


async def handle_fax_gateway_error(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, FaxGatewayError):
        raise exc

    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        "fax_request_failed",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "status_code": exc.http_status,
            "operation": getattr(exc, "operation", None),
        },
    )
    return JSONResponse(status_code=exc.http_status, content=error_body(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FaxGatewayError, handle_fax_gateway_error)
