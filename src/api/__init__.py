"""API — construção de payloads para serviços externos.

Subpastas:
- payload_builders/: montagem de documentos prontos para envio

NÃO PODE conter: transporte HTTP, autenticação, retry.
"""
