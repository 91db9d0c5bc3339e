"""Formatter JSON dos logs do montador de notificações."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Campos passados via `extra` (ex: platform, component) são anexados
    ao objeto JSON pelo próprio JsonFormatter.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "ERROR",
            "logger": "api.payload_builders.push.payload",
            "message": "push_payload_parse_failed",
            "correlation_id": "abc-123",
            "service": "push_notifications",
            "platform": "gcm"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
