"""App — contratos, casos de uso e inicialização.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- constants/: enums e chaves do documento push
- domain/: schema declarativo dos campos e modelos de domínio
- protocols/: contrato do colaborador de entrega
- use_cases/: orquestração build → envio
- observability/: correlation_id nos logs

Padrão: api monta; app orquestra; config configura; utils apoia.
"""
