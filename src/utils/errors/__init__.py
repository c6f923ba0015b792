"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContentUnavailableError,
    FaxGatewayError,
    FaxValidationError,
    MalformedRecordError,
    NotConfiguredError,
    ProviderError,
    UnauthenticatedError,
)

__all__ = [
    "ContentUnavailableError",
    "FaxGatewayError",
    "FaxValidationError",
    "MalformedRecordError",
    "NotConfiguredError",
    "ProviderError",
    "UnauthenticatedError",
]
