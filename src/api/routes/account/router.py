"""Endpoints da conta InterFAX do chamador."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.routes.faxes.dependencies import get_fax_gateway
from app.services.fax_gateway import FaxGateway

router = APIRouter()


@router.get("/balance")
async def get_account_balance(
    gateway: Annotated[FaxGateway, Depends(get_fax_gateway)],
) -> dict[str, Any]:
    """Saldo pré-pago da conta."""
    balance = await gateway.get_balance()
    return {"balance": float(balance)}
