"""Conector InterFAX — adapter da REST API do provider."""

from .http_client import InterfaxHttpClient, create_interfax_client
from .provider_errors import InterfaxApiError, parse_interfax_error

__all__ = [
    "InterfaxApiError",
    "InterfaxHttpClient",
    "create_interfax_client",
    "parse_interfax_error",
]
