"""API — camada de borda.

Responsabilidades:
- Expor endpoints HTTP do gateway (routes/)
- Falar com a REST API InterFAX (connectors/)
- Reconciliar registros do provider em modelos internos (normalizers/)
- Validar entrada antes de qualquer chamada externa (validators/)

NÃO PODE conter: composição do gateway ou regras de paginação.
"""
