"""Projector: campos opcionais esparsos → fragmento JSON mínimo.

Regras de omissão:
- None nunca entra no fragmento
- strings, listas e objetos vazios contam como "não definido"
- inteiros e booleanos entram sempre que não forem None (0 e False são
  valores intencionais)

Cada campo é validado isoladamente pelo modelo pydantic estrito gerado do
schema. Um campo inválido é logado e omitido; os demais campos da seção
seguem no fragmento. Quem chama nunca recebe exceção.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from app.domain.push_schema import FieldKind, record_model
from config.logging import get_logger, log_fallback

if TYPE_CHECKING:
    from pydantic import BaseModel

    from app.domain.push_schema import FieldSpec, RecordSchema

logger = get_logger(__name__)


def is_set(value: Any) -> bool:
    """Indica se o valor foi explicitamente definido."""
    if value is None:
        return False
    if isinstance(value, (str, bytes, list, tuple, set, frozenset, Mapping)):
        return len(value) > 0
    return True


def project_fields(schema: RecordSchema, values: Mapping[str, Any]) -> dict[str, Any]:
    """Projeta os valores definidos de uma seção em um fragmento JSON.

    Args:
        schema: Schema da seção (target, message ou plataforma).
        values: Valores por nome Python do campo.

    Returns:
        Fragmento com chaves JSON, apenas campos definidos e válidos.
        {} se nada foi definido.
    """
    model = record_model(schema)
    fragment: dict[str, Any] = {}
    for spec in schema.fields:
        value = values.get(spec.name)
        if not is_set(value):
            continue
        projected = _project_field(model, schema, spec, value)
        if is_set(projected):
            fragment[spec.key] = projected
    return fragment


def _project_field(
    model: type[BaseModel],
    schema: RecordSchema,
    spec: FieldSpec,
    value: Any,
) -> Any:
    try:
        record = model.model_validate({spec.name: value})
        dumped = record.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            include={spec.name},
        )
    except (PydanticValidationError, PydanticSerializationError) as exc:
        logger.error(
            "push_field_serialization_failed",
            extra={
                "platform": schema.name,
                "field": spec.name,
                "error_type": type(exc).__name__,
                "value_type": type(value).__name__,
            },
        )
        log_fallback(logger, "push_field", reason="serialization_error", platform=schema.name)
        return None

    projected = dumped.get(spec.key)
    if spec.kind is FieldKind.STYLE and isinstance(projected, dict):
        projected = {k: v for k, v in projected.items() if is_set(v)}
    return projected
