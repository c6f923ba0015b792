"""Exceções do gateway de fax.

Taxonomia única para todas as camadas. A camada HTTP traduz cada classe
para um status code (ver `http_status`), sem inspecionar mensagens.
"""

from __future__ import annotations


class FaxGatewayError(RuntimeError):
    """Base para falhas do gateway de fax."""

    http_status: int = 500
    error_label: str = "fax_gateway_error"


class NotConfiguredError(FaxGatewayError):
    """Conta sem credenciais InterFAX vinculadas (requer ação de admin)."""

    http_status = 503
    error_label = "interfax credentials not configured"


class UnauthenticatedError(FaxGatewayError):
    """Nenhuma identidade de chamador presente na requisição."""

    http_status = 401
    error_label = "Authentication required"


class FaxValidationError(FaxGatewayError):
    """Entrada malformada. Nunca chega ao provider."""

    http_status = 422
    error_label = "Validation failed"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ProviderError(FaxGatewayError):
    """Chamada ao provider remoto falhou.

    `provider_message` preserva o texto original do provider mesmo quando
    a mensagem principal foi reescrita para o usuário.
    """

    http_status = 500
    error_label = "Provider request failed"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        status_code: int | None = None,
        provider_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.provider_message = provider_message if provider_message is not None else message


class ContentUnavailableError(FaxGatewayError):
    """Fax inexistente ou sem conteúdo binário anexado."""

    http_status = 404
    error_label = "Failed to retrieve fax content"

    def __init__(self, fax_id: str, direction: str, reason: str = "not found") -> None:
        super().__init__(f"Fax {fax_id} ({direction}) content unavailable: {reason}")
        self.fax_id = fax_id
        self.direction = direction
        self.reason = reason


class MalformedRecordError(FaxGatewayError):
    """Registro do provider que não pode ser normalizado (ex: sem id)."""
