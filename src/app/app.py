"""Aplicação ASGI do gateway de fax.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

A autenticação é feita antes deste serviço: um middleware do host
popula `request.state.caller` com o usuário e suas credenciais InterFAX.
Sem isso, toda rota de fax responde 401.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import correlation_id_middleware, create_api_router, register_error_handlers
from api.routes.health.router import SERVICE_VERSION
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import CORRELATION_HEADER
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from config.settings import BaseSettings

# Logging precisa existir antes do primeiro logger.info
initialize_app()

logger = get_logger(__name__)

# Headers de resposta que o frontend precisa ler
EXPOSED_HEADERS = ["Content-Disposition", CORRELATION_HEADER, "X-Conversion-Degraded"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Sem recursos compartilhados: clientes HTTP vivem por requisição
    validate_runtime_settings()
    logger.info("app_started", extra={"environment": get_base_settings().environment})
    yield
    logger.info("app_stopped")


def _docs_kwargs(base: BaseSettings) -> dict[str, Any]:
    if base.is_production:
        return {"docs_url": None, "redoc_url": None, "openapi_url": None}
    return {}


def create_app() -> FastAPI:
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Fax Gateway",
        description="Envio e consulta de faxes InterFAX em nome do usuário autenticado",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        **_docs_kwargs(base),
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=EXPOSED_HEADERS,
    )
    fastapi_app.middleware("http")(correlation_id_middleware)
    register_error_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())
    return fastapi_app


app = create_app()


def main() -> None:
    """`fax-gateway`: servidor local com reload."""
    import uvicorn

    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()
