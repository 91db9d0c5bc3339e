"""Builder da seção target (destinatários da notificação)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from api.payload_builders.push.projector import project_fields
from app.constants.push import Platform
from app.domain.push_schema import TARGET_SCHEMA


class TargetBuilder:
    """Acumula device ids, user ids, plataformas e tags.

    Plataformas aceitam o membro de Platform, o nome ("GOOGLE") ou o código
    ("G"); são serializadas pelo código do protocolo. Valor desconhecido é
    logado e só o campo platforms é omitido.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set_device_ids(self, device_ids: Iterable[str] | None) -> TargetBuilder:
        return self._set("device_ids", device_ids)

    def set_user_ids(self, user_ids: Iterable[str] | None) -> TargetBuilder:
        return self._set("user_ids", user_ids)

    def set_platforms(self, platforms: Iterable[Platform | str] | None) -> TargetBuilder:
        return self._set("platforms", platforms)

    def set_tag_names(self, tag_names: Iterable[str] | None) -> TargetBuilder:
        return self._set("tag_names", tag_names)

    def build(self) -> dict[str, Any]:
        """Fragmento target ({} se nenhuma lista não vazia foi definida)."""
        return project_fields(TARGET_SCHEMA, self._values)

    def _set(self, name: str, value: Any) -> TargetBuilder:
        normalized = TARGET_SCHEMA.field(name).normalize(value)
        if normalized is None:
            self._values.pop(name, None)
        else:
            self._values[name] = normalized
        return self
