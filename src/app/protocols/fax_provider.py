"""Contrato do adapter de provider de fax.

O gateway, o normalizer e o resolver de conteúdo dependem apenas deste
protocolo, de modo que o SDK/cliente concreto é substituível.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.fax import FaxDirection, FaxDocument, SendReceipt


class FaxProviderProtocol(Protocol):
    """Seis operações lógicas do provider + acessor de conteúdo."""

    async def list_inbound(self, limit: int, offset: int = 0) -> list[Any]:
        """Janela bruta de recebidos, inclusive itens corrompidos."""
        ...

    async def list_outbound(self, limit: int, offset: int = 0) -> list[Any]:
        """Registros brutos enviados."""
        ...

    async def find(self, direction: FaxDirection, fax_id: str) -> dict[str, Any]:
        """Registro bruto único. Levanta ContentUnavailableError se não existir."""
        ...

    async def content_bytes(self, direction: FaxDirection, fax_id: str) -> bytes:
        """Bytes da imagem do fax. Levanta ContentUnavailableError se ausente."""
        ...

    async def deliver(
        self,
        fax_number: str,
        document: FaxDocument,
        reference_params: dict[str, str],
    ) -> SendReceipt: ...

    async def cancel(self, fax_id: str) -> None: ...

    async def get_balance(self) -> Decimal: ...
