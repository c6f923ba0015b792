"""Montagem das rotas HTTP do gateway.

    /health     liveness
    /faxes      listagem, conteúdo, status, envio e cancelamento
    /account    saldo da conta InterFAX do chamador
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.account.router import router as account_router
from api.routes.faxes.router import router as faxes_router
from api.routes.health.router import router as health_router

# (router, prefixo, tag)
_ROUTERS: tuple[tuple[APIRouter, str, str], ...] = (
    (health_router, "", "health"),
    (faxes_router, "/faxes", "faxes"),
    (account_router, "/account", "account"),
)


def create_api_router() -> APIRouter:
    api_router = APIRouter()
    for sub_router, prefix, tag in _ROUTERS:
        api_router.include_router(sub_router, prefix=prefix, tags=[tag])
    return api_router
