"""Fachada do gateway de fax, única porta de entrada da camada HTTP.

Compõe adapter (provider), normalizer, paginação e resolver de conteúdo
nas operações: listar inbound/outbound, conteúdo, status, enviar,
cancelar e saldo.

Cada instância é vinculada às credenciais de UMA conta e vive apenas
durante a requisição. Nada é cacheado entre requisições.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Protocol

from api.normalizers.interfax import normalize_fax, normalize_faxes
from api.validators.fax import build_send_request
from app.domain.fax import AccountCredentials, FaxDirection
from app.services.pagination import DEFAULT_PER_PAGE, paginate, sort_newest_first
from utils.errors import NotConfiguredError, ProviderError, UnauthenticatedError

if TYPE_CHECKING:
    from decimal import Decimal

    from app.domain.fax import ContentBlob, FaxRecord, Page, SendReceipt
    from app.protocols import FaxProviderProtocol
    from app.services.content_resolver import ContentResolver
    from config.settings import UploadSettings

logger = logging.getLogger(__name__)

# Substring do erro do provider → mensagem amigável. Ordem importa.
SEND_ERROR_REWRITES: tuple[tuple[str, str], ...] = (
    (
        "designated fax number",
        "Developer account restriction: You can only send faxes to designated numbers. "
        "Please contact InterFAX support or upgrade your account.",
    ),
    (
        "Invalid recipient",
        "Invalid fax number format. Please use international format (e.g., +1555123456).",
    ),
    (
        "balance",
        "Insufficient account balance. Please add credits to your InterFAX account.",
    ),
)


class CallerIdentity(Protocol):
    """Identidade autenticada entregue pela camada de auth (fora deste serviço)."""

    id: Any
    interfax_username: str | None
    interfax_password: str | None


def resolve_credentials(caller: CallerIdentity | None) -> AccountCredentials:
    """Extrai as credenciais InterFAX vinculadas ao chamador.

    Raises:
        UnauthenticatedError: Sem chamador autenticado
        NotConfiguredError: Chamador sem usuário/senha InterFAX
    """
    if caller is None:
        raise UnauthenticatedError("Authentication required")
    username = getattr(caller, "interfax_username", None)
    password = getattr(caller, "interfax_password", None)
    if not username or not password:
        raise NotConfiguredError("interfax credentials not configured")
    return AccountCredentials(username=username, password=password)


def friendly_send_error(message: str) -> str:
    """Reescreve erros conhecidos do provider; desconhecidos passam inalterados."""
    for needle, friendly in SEND_ERROR_REWRITES:
        if needle in message:
            return friendly
    return message


class FaxGateway:
    """Operações de fax de uma conta sobre o provider remoto."""

    def __init__(
        self,
        credentials: AccountCredentials,
        provider: FaxProviderProtocol,
        resolver: ContentResolver,
        upload_settings: UploadSettings,
        window_size: int = 50,
    ) -> None:
        self._credentials = credentials
        self._provider = provider
        self._resolver = resolver
        self._upload_settings = upload_settings
        self._window_size = window_size

    @property
    def account(self) -> str | None:
        """Usuário mascarado, seguro para logs."""
        return self._credentials.masked_username

    # ── Listagens ───────────────────────────────────────────────────────────

    async def list_inbound(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page:
        """Faxes recebidos, ordenados por conclusão (mais recente primeiro)."""
        raw = await self._provider.list_inbound(self._window_size, 0)
        return self._page(FaxDirection.INBOUND, raw, page, per_page)

    async def list_outbound(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page:
        """Faxes enviados, ordenados por submissão (mais recente primeiro)."""
        raw = await self._provider.list_outbound(self._window_size, 0)
        return self._page(FaxDirection.OUTBOUND, raw, page, per_page)

    def _page(
        self,
        direction: FaxDirection,
        raw: Any,
        page: int,
        per_page: int,
    ) -> Page:
        records = normalize_faxes(raw, direction)
        ordered = sort_newest_first(records, key=lambda record: record.sort_timestamp)
        result = paginate(ordered, page, per_page)
        window_limited = len(raw) >= self._window_size if isinstance(raw, list) else False
        logger.info(
            "fax_list_fetched",
            extra={
                "direction": direction.value,
                "raw_count": len(raw) if isinstance(raw, list) else 0,
                "normalized_count": len(records),
                "page": result.current_page,
                "per_page": result.per_page,
                "window_limited": window_limited,
            },
        )
        return dataclasses.replace(result, window_limited=window_limited)

    # ── Registro único ──────────────────────────────────────────────────────

    async def get_status(self, direction: FaxDirection, fax_id: str) -> FaxRecord:
        """Status atual, sempre consultado no provider."""
        raw = await self._provider.find(direction, fax_id)
        return normalize_fax(raw, direction)

    async def get_content(
        self,
        direction: FaxDirection,
        fax_id: str,
        inline: bool = False,
    ) -> ContentBlob:
        """Conteúdo binário com formato detectado e conversão TIFF → PDF."""
        return await self._resolver.resolve(direction, fax_id, inline_requested=inline)

    # ── Envio e cancelamento ────────────────────────────────────────────────

    async def send(
        self,
        *,
        fax_number: str | None,
        file_content: bytes | None = None,
        file_name: str | None = None,
        file_url: str | None = None,
        subject: str | None = None,
        reply_email: str | None = None,
        recipient_name: str | None = None,
    ) -> SendReceipt:
        """Valida e envia um fax.

        Raises:
            FaxValidationError: Entrada inválida (provider não é chamado)
            ProviderError: Envio recusado; mensagem reescrita quando conhecida
        """
        request = build_send_request(
            fax_number=fax_number,
            settings=self._upload_settings,
            file_content=file_content,
            file_name=file_name,
            file_url=file_url,
            subject=subject,
            reply_email=reply_email,
            recipient_name=recipient_name,
        )
        try:
            receipt = await self._provider.deliver(
                request.fax_number,
                request.document,
                request.reference_params(),
            )
        except ProviderError as exc:
            friendly = friendly_send_error(exc.provider_message)
            logger.error(
                "fax_send_failed",
                extra={
                    "operation": "send",
                    "by_url": request.document.is_url,
                    "rewritten": friendly != exc.provider_message,
                    "error_message": exc.provider_message,
                },
            )
            raise ProviderError(
                friendly,
                operation="send",
                status_code=exc.status_code,
                provider_message=exc.provider_message,
            ) from exc

        logger.info(
            "fax_submitted",
            extra={
                "fax_id": receipt.id,
                "status": receipt.status.value,
                "by_url": request.document.is_url,
            },
        )
        return receipt

    async def cancel(self, fax_id: str) -> None:
        """Cancela um fax enviado."""
        await self._provider.cancel(fax_id)
        logger.info("fax_cancelled", extra={"fax_id": fax_id})

    async def get_balance(self) -> Decimal:
        return await self._provider.get_balance()
