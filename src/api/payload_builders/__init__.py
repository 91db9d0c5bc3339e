"""Payload builders — construção de documentos para serviços externos.

Estrutura:
- push/: documento de requisição de push notification (message, target,
  settings por plataforma)
"""

__all__: list[str] = []
