"""Protocolos e contratos do core da aplicação."""

from .content_converter import ConversionResult, TiffConverterProtocol
from .fax_provider import FaxProviderProtocol

__all__ = [
    "ConversionResult",
    "FaxProviderProtocol",
    "TiffConverterProtocol",
]
