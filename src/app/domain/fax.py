"""Modelos de domínio do gateway de fax.

Todos são value objects com escopo de requisição: nenhum é persistido
nem compartilhado entre requisições.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from config.logging import mask_secret


class FaxDirection(str, Enum):
    """Sentido do fax (seleciona endpoints e regras de mapeamento)."""

    INBOUND = "inbound"
    OUTBOUND = "outbound"


class FaxStatus(str, Enum):
    """Status normalizado. `UNKNOWN` substitui qualquer valor não reconhecido."""

    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    CANCELLED = "cancelled"
    BUSY = "busy"
    NO_ANSWER = "no_answer"
    REJECTED = "rejected"
    RETRYING = "retrying"
    PENDING = "pending"
    UNKNOWN = "unknown"


MimeType = Literal["application/pdf", "image/tiff", "image/png"]
Disposition = Literal["inline", "attachment"]


@dataclass(frozen=True, slots=True)
class AccountCredentials:
    """Credenciais InterFAX de uma conta.

    O `repr` mascara os valores para que nunca apareçam completos em logs
    ou tracebacks.
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"AccountCredentials(username={mask_secret(self.username)!r}, password='****')"

    @property
    def masked_username(self) -> str | None:
        return mask_secret(self.username)


@dataclass(frozen=True, slots=True)
class FaxRecord:
    """Registro de fax normalizado.

    Atributos:
        id: ID opaco atribuído pelo provider (nunca vazio)
        direction: inbound|outbound
        status: Status normalizado
        counterparty_number: Número remoto (remetente no inbound, destino no outbound)
        page_count: Páginas (None = desconhecido)
        duration_seconds: Duração da transmissão (None = desconhecido)
        submit_time / completion_time: Timestamps do provider (ISO 8601)
        cost_per_unit: Custo unitário
        csid: Station identifier remoto
        subject: Referência do envio
        reply_email: E-mail de resposta reconciliado
        raw_metadata: Metadados originais + `replyEmail` resolvido
    """

    id: str
    direction: FaxDirection
    status: FaxStatus = FaxStatus.UNKNOWN
    counterparty_number: str | None = None
    page_count: int | None = None
    duration_seconds: int | None = None
    submit_time: str | None = None
    completion_time: str | None = None
    cost_per_unit: Decimal | None = None
    csid: str | None = None
    subject: str | None = None
    reply_email: str | None = None
    page_size: str | None = None
    resolution: str | None = None
    rendering: str | None = None
    page_header: str | None = None
    retries_to_perform: int | None = None
    attempts_made: int | None = None
    location: str | None = None
    raw_metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def sort_timestamp(self) -> str | None:
        """Timestamp usado para ordenar a janela de listagem."""
        if self.direction is FaxDirection.INBOUND:
            return self.completion_time
        return self.submit_time

    def to_dict(self) -> dict[str, Any]:
        """Serializa com as chaves camelCase usadas pelos consumidores legados."""
        return {
            "id": self.id,
            "direction": self.direction.value,
            "status": self.status.value,
            "faxNumber": self.counterparty_number,
            "pages": self.page_count,
            "duration": self.duration_seconds,
            "submitTime": self.submit_time,
            "completionTime": self.completion_time,
            "cost": str(self.cost_per_unit) if self.cost_per_unit is not None else None,
            "csid": self.csid,
            "subject": self.subject,
            "replyEmail": self.reply_email,
            "pageSize": self.page_size,
            "resolution": self.resolution,
            "rendering": self.rendering,
            "pageHeader": self.page_header,
            "retriesToPerform": self.retries_to_perform,
            "attemptsMade": self.attempts_made,
            "location": self.location,
            "metadata": dict(self.raw_metadata),
        }


@dataclass(frozen=True, slots=True)
class Page:
    """Página calculada sobre a janela buscada do provider."""

    items: tuple[Any, ...]
    current_page: int
    per_page: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool
    next_page: int | None
    previous_page: int | None
    from_index: int
    to_index: int
    window_limited: bool = False

    def pagination_dict(self) -> dict[str, Any]:
        return {
            "current_page": self.current_page,
            "per_page": self.per_page,
            "total": self.total,
            "total_pages": self.total_pages,
            "has_next_page": self.has_next,
            "has_previous_page": self.has_previous,
            "next_page": self.next_page,
            "previous_page": self.previous_page,
            "from": self.from_index,
            "to": self.to_index,
            "window_limited": self.window_limited,
        }


@dataclass(frozen=True, slots=True)
class ContentBlob:
    """Conteúdo binário pronto para a resposta HTTP.

    `conversion_degraded` indica que a conversão TIFF → PDF não concluiu e
    o TIFF original está sendo servido. Não é erro.
    """

    content: bytes
    mime_type: MimeType
    disposition: Disposition
    filename: str | None = None
    conversion_degraded: bool = False

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def content_disposition(self) -> str:
        """Valor do header Content-Disposition."""
        if self.filename:
            return f'{self.disposition}; filename="{self.filename}"'
        return self.disposition


@dataclass(frozen=True, slots=True)
class FaxDocument:
    """Documento a enviar: upload local OU URL pública (nunca ambos)."""

    content: bytes | None = None
    filename: str | None = None
    url: str | None = None

    @property
    def is_url(self) -> bool:
        return self.url is not None


@dataclass(frozen=True, slots=True)
class SendRequest:
    """Parâmetros locais de envio, já validados."""

    fax_number: str
    document: FaxDocument
    subject: str | None = None
    reply_email: str | None = None
    recipient_name: str | None = None

    def reference_params(self) -> dict[str, str]:
        """Mapeia nomes locais para os parâmetros reconhecidos pelo provider."""
        params: dict[str, str] = {}
        if self.subject:
            params["reference"] = self.subject
        if self.reply_email:
            params["replyAddress"] = self.reply_email
        if self.recipient_name:
            params["contact"] = self.recipient_name
        return params


@dataclass(frozen=True, slots=True)
class SendReceipt:
    """Resultado do envio aceito pelo provider."""

    id: str
    status: FaxStatus
    location: str | None = None


__all__ = [
    "AccountCredentials",
    "ContentBlob",
    "Disposition",
    "FaxDirection",
    "FaxDocument",
    "FaxRecord",
    "FaxStatus",
    "MimeType",
    "Page",
    "SendReceipt",
    "SendRequest",
]
