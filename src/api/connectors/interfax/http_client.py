"""Cliente HTTP especializado para a REST API InterFAX.

Implementa FaxProviderProtocol sobre httpx:
- Autenticação HTTP Basic com as credenciais da conta (por instância)
- Listagens tolerantes: payload não-lista vira lista vazia, registros
  não-mapeáveis são pulados e logados
- Acesso direto aos bytes da imagem via `/faxes/{id}/image`
- Erros do provider viram ProviderError / ContentUnavailableError
- Logging estruturado sem credenciais
"""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from api.connectors.interfax.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.interfax.provider_errors import parse_interfax_error
from api.connectors.interfax.provider_logging import (
    log_provider_error,
    log_success,
    log_transport_error,
)
from app.domain.fax import FaxDirection, FaxStatus, SendReceipt
from utils.errors import ContentUnavailableError, ProviderError

if TYPE_CHECKING:
    import httpx

    from app.domain.fax import AccountCredentials, FaxDocument
    from config.settings import InterfaxSettings

logger: logging.Logger = logging.getLogger(__name__)

_DEFAULT_DOCUMENT_TYPE = "application/octet-stream"


class InterfaxHttpClient(HttpClient):
    """Adapter da REST API InterFAX.

    Cada instância é vinculada a UMA conta. Não há estado global de
    credenciais: gateways de contas diferentes nunca compartilham cliente.
    """

    def __init__(
        self,
        credentials: AccountCredentials,
        settings: InterfaxSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = HttpClientConfig(
            base_url=settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            default_headers={"Accept": "application/json"},
            verify_ssl=settings.verify_ssl,
            transport=transport,
        )
        super().__init__(config, auth=(credentials.username, credentials.password))
        self._settings = settings
        self._account = credentials.masked_username
        logger.debug(
            "interfax_client_created",
            extra={"account": self._account, "base_url": settings.api_base_url},
        )

    # ── Listagens ───────────────────────────────────────────────────────────

    async def list_inbound(self, limit: int, offset: int = 0) -> list[Any]:
        """Lista faxes recebidos mais recentes."""
        return await self._list(FaxDirection.INBOUND, limit, offset)

    async def list_outbound(self, limit: int, offset: int = 0) -> list[Any]:
        """Lista faxes enviados mais recentes."""
        return await self._list(FaxDirection.OUTBOUND, limit, offset)

    async def _list(
        self,
        direction: FaxDirection,
        limit: int,
        offset: int,
    ) -> list[Any]:
        operation = f"list_{direction.value}"
        params = {"limit": limit, "offset": offset}
        logger.info(
            "interfax_list_requested",
            extra={"operation": operation, "limit": limit, "offset": offset},
        )
        response = await self._send(
            operation,
            "GET",
            f"/{direction.value}/faxes",
            params=params,
            direction=direction.value,
        )
        payload = self._decode_json(response, operation, direction=direction.value)
        return _as_record_list(payload, operation)

    # ── Registro único e conteúdo ───────────────────────────────────────────

    async def find(self, direction: FaxDirection, fax_id: str) -> dict[str, Any]:
        """Busca um fax pelo id. 404 vira ContentUnavailableError."""
        operation = f"find_{direction.value}"
        response = await self._send(
            operation,
            "GET",
            f"/{direction.value}/faxes/{fax_id}",
            not_found=(fax_id, direction),
            fax_id=fax_id,
            direction=direction.value,
        )
        payload = self._decode_json(response, operation, fax_id=fax_id)
        if not isinstance(payload, Mapping):
            logger.error(
                "interfax_unexpected_payload",
                extra={
                    "operation": operation,
                    "fax_id": fax_id,
                    "payload_type": type(payload).__name__,
                },
            )
            raise ProviderError(
                f"Fax with ID {fax_id} returned an unexpected payload",
                operation=operation,
                status_code=response.status_code,
            )
        return dict(payload)

    async def content_bytes(self, direction: FaxDirection, fax_id: str) -> bytes:
        """Baixa a imagem do fax (TIFF ou PDF, conforme a conta)."""
        operation = f"content_{direction.value}"
        response = await self._send(
            operation,
            "GET",
            f"/{direction.value}/faxes/{fax_id}/image",
            headers={"Accept": "*/*"},
            timeout=self._settings.content_timeout_seconds,
            not_found=(fax_id, direction),
            fax_id=fax_id,
            direction=direction.value,
        )
        if not response.content:
            logger.error(
                "interfax_content_empty",
                extra={"operation": operation, "fax_id": fax_id, "direction": direction.value},
            )
            raise ContentUnavailableError(fax_id, direction.value, "no content attached")
        return response.content

    # ── Envio, cancelamento e saldo ─────────────────────────────────────────

    async def deliver(
        self,
        fax_number: str,
        document: FaxDocument,
        reference_params: dict[str, str],
    ) -> SendReceipt:
        """Envia um fax por upload direto ou por URL (Content-Location)."""
        operation = "deliver"
        params: dict[str, Any] = {"faxNumber": fax_number}
        params.update({k: v for k, v in reference_params.items() if v})

        if document.is_url:
            headers = {"Content-Location": document.url or ""}
            body = b""
        else:
            headers = {"Content-Type": _guess_content_type(document.filename)}
            body = document.content or b""

        logger.info(
            "interfax_deliver_requested",
            extra={
                "operation": operation,
                "by_url": document.is_url,
                "size_bytes": len(body),
                "reference_fields": sorted(params.keys()),
            },
        )
        response = await self._send(
            operation,
            "POST",
            "/outbound/faxes",
            params=params,
            content=body,
            headers=headers,
        )
        location = response.headers.get("location")
        fax_id = _id_from_location(location)
        if not fax_id:
            raise ProviderError(
                "InterFAX accepted the fax but returned no Location header",
                operation=operation,
                status_code=response.status_code,
            )
        return SendReceipt(id=fax_id, status=FaxStatus.PENDING, location=location)

    async def cancel(self, fax_id: str) -> None:
        """Cancela um fax enviado ainda em andamento."""
        await self._send(
            "cancel",
            "POST",
            f"/outbound/faxes/{fax_id}/cancel",
            fax_id=fax_id,
            direction=FaxDirection.OUTBOUND.value,
        )

    async def get_balance(self) -> Decimal:
        """Saldo pré-pago da conta."""
        operation = "get_balance"
        response = await self._send(operation, "GET", "/accounts/self/ppcards/balance")
        raw = response.text.strip().strip('"')
        try:
            return Decimal(raw)
        except (InvalidOperation, ValueError) as exc:
            logger.error(
                "interfax_balance_unparseable",
                extra={"operation": operation, "body_length": len(raw)},
            )
            raise ProviderError(
                "Failed to get account balance: unexpected response",
                operation=operation,
                status_code=response.status_code,
            ) from exc

    # ── Internos ────────────────────────────────────────────────────────────

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        not_found: tuple[str, FaxDirection] | None = None,
        **context: Any,
    ) -> httpx.Response:
        """Executa requisição e traduz falhas para a taxonomia do gateway."""
        try:
            response = await self.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
                timeout=timeout,
            )
        except HttpError as exc:
            log_transport_error(operation, str(exc), account=self._account, **context)
            raise ProviderError(
                f"InterFAX {operation} failed: {exc}",
                operation=operation,
            ) from exc

        api_error = parse_interfax_error(response)
        if api_error is None:
            log_success(operation, response.status_code, **context)
            return response

        log_provider_error(api_error, operation, account=self._account, **context)
        if api_error.is_not_found and not_found is not None:
            fax_id, direction = not_found
            raise ContentUnavailableError(fax_id, direction.value, "not found")
        raise ProviderError(
            api_error.describe(),
            operation=operation,
            status_code=api_error.status_code,
        )

    def _decode_json(self, response: httpx.Response, operation: str, **context: Any) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "interfax_invalid_json",
                extra={"operation": operation, **context},
            )
            raise ProviderError(
                "InterFAX returned invalid JSON",
                operation=operation,
                status_code=response.status_code,
            ) from exc


def _as_record_list(payload: Any, operation: str) -> list[Any]:
    """Janela como veio do provider; payload não-lista vira [].

    Itens não mapeáveis são logados mas mantidos: contam para o tamanho da
    janela e são descartados depois, pelo normalizer.
    """
    if not isinstance(payload, list):
        logger.error(
            "interfax_non_iterable_list",
            extra={"operation": operation, "payload_type": type(payload).__name__},
        )
        return []

    for position, item in enumerate(payload):
        if isinstance(item, Mapping):
            continue
        logger.warning(
            "interfax_non_mapping_record",
            extra={
                "operation": operation,
                "position": position,
                "payload_type": type(item).__name__,
            },
        )
    return payload


def _guess_content_type(filename: str | None) -> str:
    if not filename:
        return _DEFAULT_DOCUMENT_TYPE
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or _DEFAULT_DOCUMENT_TYPE


def _id_from_location(location: str | None) -> str | None:
    """`https://rest.interfax.net/outbound/faxes/854759652` → `854759652`."""
    if not location:
        return None
    tail = location.rstrip("/").rsplit("/", 1)[-1]
    return tail or None


def create_interfax_client(
    credentials: AccountCredentials,
    settings: InterfaxSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> InterfaxHttpClient:
    """Factory para criar cliente InterFAX com config padrão.

    Args:
        credentials: Credenciais da conta do chamador
        settings: InterfaxSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)
    """
    # Import local para evitar dependência circular
    from config.settings import get_interfax_settings

    return InterfaxHttpClient(
        credentials=credentials,
        settings=settings or get_interfax_settings(),
        transport=transport,
    )
