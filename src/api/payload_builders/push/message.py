"""Message core: alert obrigatório e URL opcional."""

from __future__ import annotations

from typing import Any

from api.payload_builders.push.projector import project_fields
from app.domain.push_schema import MESSAGE_SCHEMA
from config.logging import get_logger
from utils.errors import ValidationError

logger = get_logger(__name__)


def validate_alert(alert: Any) -> str:
    """Valida o texto do alert.

    String vazia é aceita (com warning); apenas None ou tipo errado falham.

    Raises:
        ValidationError: Se alert é None ou não é string.
    """
    if alert is None:
        raise ValidationError("alert é obrigatório e não pode ser None")
    if not isinstance(alert, str):
        raise ValidationError(f"alert deve ser str, recebido {type(alert).__name__}")
    if not alert:
        logger.warning("push_alert_empty", extra={"component": "push_message"})
    return alert


def build_url_fragment(url: str | None) -> dict[str, Any]:
    """Fragmento {"url": ...} ou {} se a URL é None/vazia."""
    return project_fields(MESSAGE_SCHEMA, {"url": url})


def build_message(alert: Any, url: str | None = None) -> dict[str, Any]:
    """Fragmento da seção message.

    O alert sempre é incluído, mesmo vazio; a URL segue a regra de omissão.
    """
    fragment: dict[str, Any] = {"alert": validate_alert(alert)}
    fragment.update(build_url_fragment(url))
    return fragment
