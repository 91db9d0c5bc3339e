"""Parsing best-effort de dados opacos fornecidos pelo chamador.

O payload customizado é um blob JSON não interpretado: só a boa formação é
verificada. Falhas de parsing nunca abortam a montagem da notificação; o
erro é logado e o campo fica sem valor.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from app.domain.push_style import GcmStyle
from config.logging import get_logger, log_fallback

logger = get_logger(__name__)


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"Constante JSON não suportada: {constant}")


def parse_payload(
    value: Any,
    *,
    platform: str,
) -> dict[str, Any] | None:
    """Valida e copia um payload JSON customizado.

    Aceita texto JSON (str/bytes) ou um mapping serializável. O resultado
    precisa ser um objeto JSON.

    Args:
        value: Payload informado pelo chamador.
        platform: Plataforma dona do campo (apenas para log).

    Returns:
        Cópia independente do objeto, ou None se ausente ou malformado.
    """
    if value is None or (isinstance(value, (str, bytes, bytearray)) and not value):
        return None

    try:
        if isinstance(value, (str, bytes, bytearray)):
            parsed = json.loads(value, parse_constant=_reject_constant)
        elif isinstance(value, Mapping):
            # round-trip valida serializabilidade e desacopla do objeto original
            parsed = json.loads(json.dumps(dict(value), allow_nan=False))
        else:
            raise TypeError(f"Tipo de payload não suportado: {type(value).__name__}")

        if not isinstance(parsed, dict):
            raise TypeError("Payload deve ser um objeto JSON")
    except (TypeError, ValueError, RecursionError) as exc:
        logger.error(
            "push_payload_parse_failed",
            extra={
                "platform": platform,
                "error_type": type(exc).__name__,
                "payload_type": type(value).__name__,
            },
        )
        log_fallback(logger, "push_payload", reason="parse_error", platform=platform)
        return None

    return parsed


def parse_style(value: Any, *, platform: str) -> GcmStyle | None:
    """Converte o style de notificação expansível.

    Aceita GcmStyle, mapping ou texto JSON. Style inválido é logado e
    omitido, como o payload.
    """
    if value is None:
        return None

    try:
        if isinstance(value, GcmStyle):
            return value.model_copy(deep=True)
        if isinstance(value, (str, bytes, bytearray)):
            return GcmStyle.model_validate_json(value)
        if isinstance(value, Mapping):
            return GcmStyle.model_validate(dict(value))
        raise TypeError(f"Tipo de style não suportado: {type(value).__name__}")
    except (TypeError, PydanticValidationError) as exc:
        logger.error(
            "push_style_parse_failed",
            extra={
                "platform": platform,
                "error_type": type(exc).__name__,
            },
        )
        log_fallback(logger, "push_style", reason="parse_error", platform=platform)
        return None
