"""GET /health: liveness do gateway.

A InterFAX não é consultada aqui; credenciais pertencem a cada chamador.
Só o conversor local (tiff2pdf) é inspecionado, e sua ausência não
torna o serviço unhealthy.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.infra.converters import create_tiff2pdf_converter
from config.settings import get_base_settings

SERVICE_VERSION = "1.0.0"

router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    timestamp: str
    tiff2pdf_available: bool = Field(description="False: TIFF servido sem conversão para PDF")
    version: str = SERVICE_VERSION


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
        tiff2pdf_available=create_tiff2pdf_converter().is_available(),
    )
