"""Bootstrap — inicialização do processo que monta notificações.

Configura logging estruturado a partir das settings e valida a
configuração no startup.

Uso:
    from app.bootstrap import initialize_app

    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging e valida settings.

    DEBUG=true força nível DEBUG independente de LOG_LEVEL.

    Deve ser chamada uma vez no início do processo.
    """
    settings = get_base_settings()

    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Logging DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido; em `development` apenas loga.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
