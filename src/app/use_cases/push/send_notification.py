"""Use case para entregar uma notificação montada."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.push_sender import PushDeliveryResult
from config.logging import get_logger
from utils.errors import ValidationError

if TYPE_CHECKING:
    from api.payload_builders.push.notification import NotificationBuilder
    from app.protocols.push_sender import PushSenderProtocol

logger = get_logger(__name__)


class SendPushNotificationUseCase:
    """Consome o builder e entrega o documento ao sender."""

    def __init__(self, sender: PushSenderProtocol) -> None:
        self._sender = sender

    async def execute(self, builder: NotificationBuilder) -> PushDeliveryResult:
        """Executa build() e envio.

        Builder já consumido vira resultado de falha, sem chamar o sender.
        Erros do sender propagam.
        """
        try:
            notification = builder.build()
        except ValidationError as exc:
            logger.warning(
                "push_send_rejected",
                extra={"component": "push_send", "error_type": type(exc).__name__},
            )
            return PushDeliveryResult(
                success=False,
                error_code="VALIDATION_ERROR",
                error_message=str(exc),
            )

        result = await self._sender.send(notification)
        logger.info(
            "push_send_completed",
            extra={
                "component": "push_send",
                "success": result.success,
                "error_code": result.error_code,
            },
        )
        return result
