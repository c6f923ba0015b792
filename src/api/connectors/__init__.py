"""Connectors por provider — adapters de borda para APIs externas.

Estrutura:
- interfax/: REST API InterFAX (listagens, conteúdo, envio, cancelamento, saldo)

Cada instância de connector é vinculada às credenciais de uma conta.
"""

__all__: list[str] = []
