"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BuilderConsumedError,
    PushNotificationError,
    UnknownFieldError,
    ValidationError,
)

__all__ = [
    "BuilderConsumedError",
    "PushNotificationError",
    "UnknownFieldError",
    "ValidationError",
]
