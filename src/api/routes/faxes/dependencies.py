"""Dependências FastAPI das rotas de fax.

A autenticação acontece antes deste serviço: o middleware de auth do
host coloca a identidade em `request.state.caller`. Aqui só lemos.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from app.bootstrap.dependencies import create_fax_gateway
from app.services.fax_gateway import FaxGateway


def get_caller(request: Request) -> Any | None:
    return getattr(request.state, "caller", None)


def get_fax_gateway(caller: Any | None = Depends(get_caller)) -> FaxGateway:
    """Gateway por requisição, vinculado às credenciais do chamador.

    Levanta UnauthenticatedError / NotConfiguredError, traduzidos em
    401 / 503 pelos handlers de erro.
    """
    return create_fax_gateway(caller)
