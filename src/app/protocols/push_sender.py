"""Protocolo do colaborador de entrega de push."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class PushDeliveryResult:
    """Resultado reportado pelo serviço de entrega.

    Attributes:
        success: True se o serviço aceitou a notificação.
        message_id: Identificador atribuído pelo serviço (quando houver).
        error_code: Código curto de falha (ex: VALIDATION_ERROR).
        error_message: Detalhe da falha, sem PII.
    """

    success: bool
    message_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None


class PushSenderProtocol(Protocol):
    """Contrato mínimo para entregar um documento de notificação montado."""

    async def send(self, notification: dict[str, Any]) -> PushDeliveryResult: ...
