"""Serialização de registros de fax para as respostas HTTP.

Consumidores existentes esperam um formato achatado diferente por
direção (`from_number`/`received_at` no inbound, `fax_number`/`sent_at`
no outbound) e um bloco de "quem é a outra ponta" montado a partir dos
campos disponíveis, já que a InterFAX não fornece nomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.fax import FaxDirection
from config.settings.interfax import DEFAULT_PLACEHOLDER_CSID

if TYPE_CHECKING:
    from decimal import Decimal

    from app.domain.fax import FaxRecord, Page, SendReceipt

UNKNOWN_SENDER = "Unknown Sender"
UNKNOWN_RECIPIENT = "Unknown Recipient"
DETAILS_SEPARATOR = " | "


@dataclass(frozen=True, slots=True)
class PartyInfo:
    """Identificação da outra ponta do fax."""

    name: str
    email: str | None
    details: str


def sender_info(record: FaxRecord, placeholder_csid: str = DEFAULT_PLACEHOLDER_CSID) -> PartyInfo:
    """Remetente de um fax recebido.

    Nome: CSID real quando presente; senão o número, desde que exista
    algum detalhe; senão "Unknown Sender".
    """
    name: str | None = None
    details: list[str] = []

    if record.csid and record.csid != placeholder_csid:
        name = record.csid
        details.append(f"CSID: {record.csid}")
    if record.reply_email:
        details.append(f"Reply Email: {record.reply_email}")
    if record.subject:
        details.append(f"Subject: {record.subject}")
    if record.counterparty_number:
        details.append(f"From: {record.counterparty_number}")

    if name is None:
        name = (record.counterparty_number if details else None) or UNKNOWN_SENDER

    return PartyInfo(name=name, email=record.reply_email or None, details=DETAILS_SEPARATOR.join(details))


def recipient_info(record: FaxRecord) -> PartyInfo:
    """Destinatário de um fax enviado."""
    details: list[str] = []
    if record.reply_email:
        details.append(f"Reply Email: {record.reply_email}")
    if record.subject:
        details.append(f"Subject: {record.subject}")
    if record.counterparty_number:
        details.append(f"To: {record.counterparty_number}")
    if record.csid:
        details.append(f"CSID: {record.csid}")

    return PartyInfo(
        name=record.counterparty_number or UNKNOWN_RECIPIENT,
        email=record.reply_email or None,
        details=DETAILS_SEPARATOR.join(details),
    )


def _cost(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


def present_inbound(record: FaxRecord, placeholder_csid: str = DEFAULT_PLACEHOLDER_CSID) -> dict[str, Any]:
    sender = sender_info(record, placeholder_csid)
    return {
        "id": record.id,
        "from_number": record.counterparty_number,
        "status": record.status.value,
        "pages": record.page_count,
        "received_at": record.completion_time,
        "duration": record.duration_seconds,
        "csid": record.csid,
        "sender_name": sender.name,
        "sender_email": sender.email,
        "sender_details": sender.details,
        # Registro normalizado completo, útil para debug no cliente
        "metadata": record.to_dict(),
        "type": FaxDirection.INBOUND.value,
        "created_at": record.completion_time,
        "updated_at": record.completion_time,
    }


def present_outbound(record: FaxRecord) -> dict[str, Any]:
    recipient = recipient_info(record)
    return {
        "id": record.id,
        "fax_number": record.counterparty_number,
        "status": record.status.value,
        "pages": record.page_count,
        "sent_at": record.submit_time,
        "completion_time": record.completion_time,
        "duration": record.duration_seconds,
        "cost": _cost(record.cost_per_unit),
        "subject": record.subject,
        "replyEmail": record.reply_email,
        "csid": record.csid,
        "recipient_name": recipient.name,
        "recipient_email": recipient.email,
        "recipient_details": recipient.details,
        "metadata": dict(record.raw_metadata),
        "type": FaxDirection.OUTBOUND.value,
        "created_at": record.submit_time,
        "updated_at": record.completion_time or record.submit_time,
    }


def present_record(record: FaxRecord, placeholder_csid: str = DEFAULT_PLACEHOLDER_CSID) -> dict[str, Any]:
    if record.direction is FaxDirection.INBOUND:
        return present_inbound(record, placeholder_csid)
    return present_outbound(record)


def present_page(page: Page, placeholder_csid: str = DEFAULT_PLACEHOLDER_CSID) -> dict[str, Any]:
    """`{data: [...], pagination: {...}}`."""
    return {
        "data": [present_record(record, placeholder_csid) for record in page.items],
        "pagination": page.pagination_dict(),
    }


def present_status(record: FaxRecord) -> dict[str, Any]:
    """Status atual: registro normalizado completo."""
    return record.to_dict()


def present_receipt(
    receipt: SendReceipt,
    *,
    fax_number: str,
    subject: str | None = None,
    reply_email: str | None = None,
    recipient_name: str | None = None,
) -> dict[str, Any]:
    """Recibo do envio + eco dos parâmetros da requisição."""
    return {
        "id": receipt.id,
        "status": receipt.status.value,
        "location": receipt.location,
        "fax_number": fax_number,
        "subject": subject,
        "replyEmail": reply_email,
        "recipient_name": recipient_name,
        "sent_at": _now_iso(),
    }


def present_cancelled(fax_id: str) -> dict[str, Any]:
    return {
        "id": fax_id,
        "status": "cancelled",
        "cancelled_at": _now_iso(),
        "message": "Fax cancelled successfully",
    }


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()
