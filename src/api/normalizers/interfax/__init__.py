"""Normalizer InterFAX — reconciliação de respostas do provider.

Responsabilidades:
- Mapear formatos variantes de registros InterFAX para FaxRecord
- Resolver sinônimos de campos por precedência fixa (ver field_map)
- Converter códigos numéricos de status
"""

from .field_map import first_present
from .normalizer import coerce_metadata, normalize_fax, normalize_faxes, to_plain_dict
from .status import NUMERIC_STATUS_MAP, map_status

__all__ = [
    "NUMERIC_STATUS_MAP",
    "coerce_metadata",
    "first_present",
    "map_status",
    "normalize_fax",
    "normalize_faxes",
    "to_plain_dict",
]
