"""Normalizers por provider — conversão de payloads externos para modelos internos.

Estrutura:
- interfax/: normalizer da REST API InterFAX (inbound e outbound)
"""

from .interfax import map_status, normalize_fax, normalize_faxes

__all__ = [
    "map_status",
    "normalize_fax",
    "normalize_faxes",
]
