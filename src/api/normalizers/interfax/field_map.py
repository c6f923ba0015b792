"""Mapa de reconciliação de campos InterFAX → FaxRecord.

Cada campo alvo tem uma lista ordenada de candidatos. O primeiro
candidato não-vazio vence. Caminhos com ponto (`metadata.replyEmail`)
leem do dicionário `metadata` já coerido.

Manter como dado puro: a precedência fica auditável e testável sem
passar pelo normalizer.
"""

from __future__ import annotations

from typing import Any

from app.domain.fax import FaxDirection

FieldCandidates = tuple[str, ...]

REPLY_EMAIL_FIELDS: FieldCandidates = (
    "replyEmail",
    "replyAddress",
    "reply_email",
    "replyTo",
    "metadata.replyEmail",
    "metadata.replyAddress",
)

SUBJECT_FIELDS: FieldCandidates = (
    "reference",
    "subject",
    "metadata.reference",
    "metadata.subject",
)

PAGE_COUNT_FIELDS: FieldCandidates = ("pagesSent", "pagesSubmitted", "pages")

CSID_FIELDS: FieldCandidates = ("senderCSID", "remoteCSID")

ID_FIELDS: FieldCandidates = ("id", "messageId")

STATUS_FIELDS: FieldCandidates = ("status", "messageStatus")

DURATION_FIELDS: FieldCandidates = ("duration", "recordingDuration")

SUBMIT_TIME_FIELDS: FieldCandidates = ("submitTime",)

COMPLETION_TIME_FIELDS: FieldCandidates = ("completionTime", "receiveTime")

COST_FIELDS: FieldCandidates = ("costPerUnit",)

# No inbound, `phoneNumber` é a linha que recebeu; quem enviou vem em `callerId`.
COUNTERPARTY_FIELDS: dict[FaxDirection, FieldCandidates] = {
    FaxDirection.OUTBOUND: ("destinationFax", "phoneNumber"),
    FaxDirection.INBOUND: ("callerId", "phoneNumber"),
}

# Campos suplementares sem sinônimos
PAGE_SIZE_FIELDS: FieldCandidates = ("pageSize",)
RESOLUTION_FIELDS: FieldCandidates = ("pageResolution",)
RENDERING_FIELDS: FieldCandidates = ("rendering",)
PAGE_HEADER_FIELDS: FieldCandidates = ("pageHeader",)
RETRIES_FIELDS: FieldCandidates = ("attemptsToPerform",)
ATTEMPTS_MADE_FIELDS: FieldCandidates = ("attemptsMade",)
LOCATION_FIELDS: FieldCandidates = ("uri",)


def is_empty(value: Any) -> bool:
    """None, string vazia/espaços e coleções vazias contam como ausentes."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (dict, list, tuple)):
        return not value
    return False


def lookup(attributes: dict[str, Any], path: str) -> Any:
    """Lê um caminho simples ou `pai.filho` de um dicionário."""
    if "." not in path:
        return attributes.get(path)
    head, _, tail = path.partition(".")
    nested = attributes.get(head)
    if not isinstance(nested, dict):
        return None
    return nested.get(tail)


def first_present(attributes: dict[str, Any], candidates: FieldCandidates) -> Any:
    """Retorna o primeiro candidato não-vazio, ou None."""
    for path in candidates:
        value = lookup(attributes, path)
        if not is_empty(value):
            return value
    return None
