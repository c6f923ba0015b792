"""Normalizer InterFAX: registro bruto para FaxRecord.

Responsabilidades:
- Coagir o registro (dict, objeto do SDK, modelo pydantic) para dicionário
- Coagir `metadata` para dicionário em qualquer formato recebido
- Resolver campos ambíguos via `field_map` (primeiro não-vazio vence)
- Degradar cada campo para None em vez de falhar o registro

A única falha de registro é ausência de id ou payload não-mapeável
(MalformedRecordError); o chamador decide se pula ou propaga.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from app.domain.fax import FaxDirection, FaxRecord
from utils.errors import MalformedRecordError

from . import field_map as fm
from .status import map_status

logger = logging.getLogger(__name__)


def to_plain_dict(value: Any) -> dict[str, Any] | None:
    """Serializa objeto para dicionário chave-valor simples.

    Suporta Mapping, modelos pydantic (`model_dump`), objetos com
    `attributes()` (estilo SDK) e objetos com `__dict__`. Retorna None
    quando o valor é primitivo.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (str, bytes, int, float, bool)) or value is None:
        return None
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump):
        dumped = model_dump()
        return dict(dumped) if isinstance(dumped, Mapping) else None
    attributes = getattr(value, "attributes", None)
    if callable(attributes):
        try:
            dumped = attributes()
        except Exception as exc:
            logger.warning(
                "interfax_record_attributes_failed",
                extra={"error_type": type(exc).__name__},
            )
        else:
            if isinstance(dumped, Mapping):
                return dict(dumped)
    if hasattr(value, "__dict__"):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    return None


def coerce_metadata(raw: Any) -> dict[str, Any]:
    """Garante que `metadata` seja sempre um dicionário."""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return {}
    plain = to_plain_dict(raw)
    if plain is None:
        return {}
    # Round-trip JSON para achatar objetos aninhados em tipos simples
    try:
        return json.loads(json.dumps(plain, default=str))
    except (TypeError, ValueError):
        return plain


def _as_text(value: Any) -> str | None:
    if fm.is_empty(value):
        return None
    return str(value).strip()


def _as_non_negative_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(float(value)) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if number >= 0 else None


def _as_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def normalize_fax(raw: Any, direction: FaxDirection) -> FaxRecord:
    """Normaliza um registro bruto do provider.

    Args:
        raw: Registro como retornado pelo provider
        direction: Sentido solicitado (define o campo de contraparte)

    Returns:
        FaxRecord com todos os campos resolvidos ou None

    Raises:
        MalformedRecordError: Se o registro não é mapeável ou não tem id
    """
    attributes = to_plain_dict(raw)
    if attributes is None:
        raise MalformedRecordError(
            f"InterFAX record is not an object (got {type(raw).__name__})"
        )

    metadata = coerce_metadata(attributes.get("metadata"))
    resolved = {**attributes, "metadata": metadata}

    fax_id = _as_text(fm.first_present(resolved, fm.ID_FIELDS))
    if not fax_id:
        raise MalformedRecordError("InterFAX record has no id")

    reply_email = _as_text(fm.first_present(resolved, fm.REPLY_EMAIL_FIELDS))

    return FaxRecord(
        id=fax_id,
        direction=direction,
        status=map_status(fm.first_present(resolved, fm.STATUS_FIELDS)),
        counterparty_number=_as_text(
            fm.first_present(resolved, fm.COUNTERPARTY_FIELDS[direction])
        ),
        page_count=_as_non_negative_int(fm.first_present(resolved, fm.PAGE_COUNT_FIELDS)),
        duration_seconds=_as_non_negative_int(fm.first_present(resolved, fm.DURATION_FIELDS)),
        submit_time=_as_text(fm.first_present(resolved, fm.SUBMIT_TIME_FIELDS)),
        completion_time=_as_text(fm.first_present(resolved, fm.COMPLETION_TIME_FIELDS)),
        cost_per_unit=_as_decimal(fm.first_present(resolved, fm.COST_FIELDS)),
        csid=_as_text(fm.first_present(resolved, fm.CSID_FIELDS)),
        subject=_as_text(fm.first_present(resolved, fm.SUBJECT_FIELDS)),
        reply_email=reply_email,
        page_size=_as_text(fm.first_present(resolved, fm.PAGE_SIZE_FIELDS)),
        resolution=_as_text(fm.first_present(resolved, fm.RESOLUTION_FIELDS)),
        rendering=_as_text(fm.first_present(resolved, fm.RENDERING_FIELDS)),
        page_header=_as_text(fm.first_present(resolved, fm.PAGE_HEADER_FIELDS)),
        retries_to_perform=_as_non_negative_int(fm.first_present(resolved, fm.RETRIES_FIELDS)),
        attempts_made=_as_non_negative_int(fm.first_present(resolved, fm.ATTEMPTS_MADE_FIELDS)),
        location=_as_text(fm.first_present(resolved, fm.LOCATION_FIELDS)),
        raw_metadata={**metadata, "replyEmail": reply_email},
    )


def normalize_faxes(raw_records: Any, direction: FaxDirection) -> list[FaxRecord]:
    """Normaliza uma lista, pulando registros malformados.

    Política de sucesso parcial: um registro ruim é logado e descartado,
    nunca derruba a listagem inteira.
    """
    if raw_records is None or isinstance(raw_records, (str, bytes, Mapping)):
        if raw_records is not None:
            logger.error(
                "interfax_non_iterable_list",
                extra={"direction": direction.value, "payload_type": type(raw_records).__name__},
            )
        return []
    try:
        iterator = iter(raw_records)
    except TypeError:
        logger.error(
            "interfax_non_iterable_list",
            extra={"direction": direction.value, "payload_type": type(raw_records).__name__},
        )
        return []

    records: list[FaxRecord] = []
    for position, raw in enumerate(iterator):
        try:
            records.append(normalize_fax(raw, direction))
        except MalformedRecordError as exc:
            logger.error(
                "interfax_record_skipped",
                extra={
                    "direction": direction.value,
                    "position": position,
                    "reason": str(exc),
                },
            )
        except Exception as exc:
            logger.exception(
                "interfax_record_skipped",
                extra={
                    "direction": direction.value,
                    "position": position,
                    "reason": type(exc).__name__,
                },
            )
    return records
