"""Validação de entrada do envio de fax.

Roda ANTES de qualquer chamada ao provider. Regras:
- fax_number: `+` opcional seguido de 2 a 15 dígitos (sem zero inicial)
- exatamente um entre `file` (upload) e `file_url`
- upload: extensão permitida e tamanho máximo
- file_url: http(s) absoluto
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from app.domain.fax import FaxDocument, SendRequest
from utils.errors import FaxValidationError

if TYPE_CHECKING:
    from config.settings import UploadSettings

FAX_NUMBER_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def validate_fax_number(fax_number: str | None) -> str:
    number = _clean(fax_number)
    if not number:
        raise FaxValidationError("The fax number field is required.", field="fax_number")
    if not FAX_NUMBER_PATTERN.match(number):
        raise FaxValidationError(
            "Invalid fax number format. Use international format (e.g., +1555123456).",
            field="fax_number",
        )
    return number


def validate_upload(
    content: bytes,
    filename: str | None,
    settings: UploadSettings,
) -> FaxDocument:
    extension = PurePath(filename or "").suffix.lstrip(".").lower()
    if extension not in settings.allowed_extensions:
        allowed = ", ".join(sorted(settings.allowed_extensions))
        raise FaxValidationError(f"The file must be a file of type: {allowed}.", field="file")
    if not content:
        raise FaxValidationError("The uploaded file is empty.", field="file")
    if len(content) > settings.max_bytes:
        raise FaxValidationError(
            f"The file may not be greater than {settings.max_bytes // 1024} kilobytes.",
            field="file",
        )
    return FaxDocument(content=content, filename=PurePath(filename or "").name)


def validate_file_url(file_url: str) -> FaxDocument:
    parsed = urlparse(file_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FaxValidationError("The file url must be a valid URL.", field="file_url")
    return FaxDocument(url=file_url)


def build_send_request(
    *,
    fax_number: str | None,
    settings: UploadSettings,
    file_content: bytes | None = None,
    file_name: str | None = None,
    file_url: str | None = None,
    subject: str | None = None,
    reply_email: str | None = None,
    recipient_name: str | None = None,
) -> SendRequest:
    """Valida a entrada e monta um SendRequest.

    Raises:
        FaxValidationError: Qualquer regra violada
    """
    number = validate_fax_number(fax_number)
    url = _clean(file_url)
    has_file = file_content is not None

    if has_file and url:
        raise FaxValidationError(
            "Provide either a file or a file url, not both.", field="file"
        )
    if not has_file and not url:
        raise FaxValidationError(
            "The file field is required when file url is not present.", field="file"
        )

    document = (
        validate_upload(file_content or b"", file_name, settings)
        if has_file
        else validate_file_url(url or "")
    )
    return SendRequest(
        fax_number=number,
        document=document,
        subject=_clean(subject),
        reply_email=_clean(reply_email),
        recipient_name=_clean(recipient_name),
    )
