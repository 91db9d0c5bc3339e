"""Builders do documento de requisição de push notification.

Componentes:
- projector: campos opcionais → fragmento mínimo (omit-if-absent)
- payload: parsing best-effort de payload/style opacos
- settings / factory: builder genérico por plataforma
- target / message: seções target e message
- merge: merge raso last-write-wins
- notification: NotificationBuilder (estado BUILDING → CONSUMED)
"""

from api.payload_builders.push.factory import SUPPORTED_PLATFORMS, get_settings_builder
from api.payload_builders.push.merge import attach_section, merge_shallow
from api.payload_builders.push.message import build_message, validate_alert
from api.payload_builders.push.notification import BuilderState, NotificationBuilder
from api.payload_builders.push.projector import is_set, project_fields
from api.payload_builders.push.settings import SettingsBuilder
from api.payload_builders.push.target import TargetBuilder

__all__ = [
    "SUPPORTED_PLATFORMS",
    "BuilderState",
    "NotificationBuilder",
    "SettingsBuilder",
    "TargetBuilder",
    "attach_section",
    "build_message",
    "get_settings_builder",
    "is_set",
    "merge_shallow",
    "project_fields",
    "validate_alert",
]
