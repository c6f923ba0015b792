"""Validadores de entrada das operações de fax."""

from api.validators.fax.send import (
    FAX_NUMBER_PATTERN,
    build_send_request,
    validate_fax_number,
)

__all__ = [
    "FAX_NUMBER_PATTERN",
    "build_send_request",
    "validate_fax_number",
]
