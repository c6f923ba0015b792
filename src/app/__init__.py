"""App — orquestração do gateway de fax e infraestrutura.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, wiring)
- domain/: value objects de fax
- services/: fachada do gateway, resolver de conteúdo, paginação
- infra/: implementações concretas de IO (conversor tiff2pdf)
- protocols/: contratos do provider e do conversor
- observability/: correlation_id por requisição

Padrão: app executa; api adapta; config parametriza; utils apoia.
"""
