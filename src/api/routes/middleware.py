"""Middleware de correlation_id.

Reaproveita `X-Correlation-ID` do cliente (quando válido) ou gera um
novo, e devolve o valor no header da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
