"""Protocolos e contratos do core da aplicação."""

from .push_sender import PushDeliveryResult, PushSenderProtocol

__all__ = [
    "PushDeliveryResult",
    "PushSenderProtocol",
]
