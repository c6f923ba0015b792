"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (faxes, conta, health)
- Validação inicial de request (path/query params, multipart)
- Delegação para o FaxGateway
- Tradução de erros do gateway em respostas JSON

Estrutura:
- routes/faxes/: listagens, conteúdo, status, envio e cancelamento
- routes/account/: saldo da conta
- routes/health/: liveness
- errors.py: handlers de FaxGatewayError
- middleware.py: correlation_id por requisição
"""

from __future__ import annotations

from api.routes.errors import register_error_handlers
from api.routes.middleware import correlation_id_middleware
from api.routes.router import create_api_router

__all__ = ["correlation_id_middleware", "create_api_router", "register_error_handlers"]
