"""Validators — validação de entrada antes de qualquer chamada externa.

Estrutura:
- fax/: envio de fax (número, documento por upload ou URL)
"""

__all__: list[str] = []
