"""Exceções do montador de notificações push."""

from __future__ import annotations


class PushNotificationError(Exception):
    """Base para erros do montador de notificações."""


class ValidationError(PushNotificationError, ValueError):
    """Campo obrigatório ausente ou inválido (ex: alert nulo)."""


class BuilderConsumedError(ValidationError):
    """Builder já consumido por build(); não aceita novas chamadas."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"builder already consumed: {operation}() chamado após build()")
        self.operation = operation


class UnknownFieldError(PushNotificationError, KeyError):
    """Campo não pertence ao schema da plataforma."""

    def __init__(self, platform: str, field: str) -> None:
        super().__init__(f"Campo desconhecido para {platform}: {field}")
        self.platform = platform
        self.field = field

    def __str__(self) -> str:
        return str(self.args[0])
