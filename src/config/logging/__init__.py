"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app.bootstrap)
    configure_logging(level="INFO", service_name="push_notifications")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("push_notification_built", extra={"sections": ["message"]})

Payloads opacos de notificação nunca são logados, apenas tipo e tamanho.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
