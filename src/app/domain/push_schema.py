"""Schema declarativo dos campos opcionais de cada seção do documento.

Uma única tabela descreve os campos de target, message e de cada plataforma
de settings. Builders e projector são genéricos e leem apenas esta tabela;
não existe um tipo por plataforma.

Cada campo tem:
- name: nome Python (keyword do setter)
- key: chave JSON no documento
- kind: tipo semântico (texto, lista, inteiro, booleano, enum, payload, style)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, create_model

from app.constants.push import (
    APNSNotificationType,
    GCMPriority,
    Platform,
    SettingsPlatform,
    Visibility,
)
from app.domain.push_style import GcmStyle
from utils.errors import UnknownFieldError


class FieldKind(StrEnum):
    """Tipos semânticos suportados pelo projector."""

    TEXT = "text"
    TEXT_LIST = "text_list"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    CHOICE = "choice"
    CHOICE_LIST = "choice_list"
    PAYLOAD = "payload"
    STYLE = "style"


_LIST_KINDS = frozenset({FieldKind.TEXT_LIST, FieldKind.CHOICE_LIST})


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Descrição de um campo opcional."""

    name: str
    key: str
    kind: FieldKind = FieldKind.TEXT
    choices: type[StrEnum] | None = None

    @property
    def annotation(self) -> Any:
        """Tipo usado na validação pydantic."""
        if self.kind is FieldKind.TEXT:
            return str
        if self.kind is FieldKind.TEXT_LIST:
            return list[str]
        if self.kind is FieldKind.INTEGER:
            return int
        if self.kind is FieldKind.BOOLEAN:
            return bool
        if self.kind is FieldKind.CHOICE:
            return self.choices
        if self.kind is FieldKind.CHOICE_LIST:
            return list[self.choices]  # type: ignore[name-defined]
        if self.kind is FieldKind.PAYLOAD:
            return dict[str, Any]
        return GcmStyle

    def normalize(self, value: Any) -> Any:
        """Prepara o valor informado para a validação estrita.

        - coleções são copiadas em listas (o builder não compartilha listas
          do chamador); strings e mappings não viram listas
        - enums aceitam o membro, o nome ("GOOGLE") ou o valor ("G")

        Valores que não correspondem a nenhum membro seguem como estão e
        são rejeitados pela validação do campo.
        """
        if value is None:
            return value
        if self.kind is FieldKind.CHOICE:
            return self._coerce_choice(value)
        if self.kind not in _LIST_KINDS:
            return value
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            return value
        if self.kind is FieldKind.CHOICE_LIST:
            return [self._coerce_choice(item) for item in value]
        return list(value)

    def _coerce_choice(self, value: Any) -> Any:
        if self.choices is None or isinstance(value, self.choices):
            return value
        if not isinstance(value, str):
            return value
        try:
            return self.choices(value)
        except ValueError:
            pass
        try:
            return self.choices[value]
        except KeyError:
            return value


@dataclass(frozen=True, slots=True)
class RecordSchema:
    """Conjunto ordenado de campos de uma seção."""

    name: str
    fields: tuple[FieldSpec, ...]

    def field(self, name: str) -> FieldSpec:
        """Retorna o campo pelo nome Python.

        Raises:
            UnknownFieldError: Se o campo não existe nesta seção.
        """
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise UnknownFieldError(self.name, name)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)


@lru_cache(maxsize=None)
def record_model(schema: RecordSchema) -> type[BaseModel]:
    """Gera (e cacheia) o modelo pydantic estrito de uma seção.

    Todos os campos são opcionais; a serialização usa a chave JSON do
    schema como alias.
    """
    definitions: dict[str, Any] = {
        spec.name: (
            spec.annotation | None,
            Field(default=None, serialization_alias=spec.key),
        )
        for spec in schema.fields
    }
    model_name = f"{schema.name[:1].upper()}{schema.name[1:]}Fragment"
    return create_model(
        model_name,
        __config__=ConfigDict(strict=True, extra="forbid"),
        **definitions,
    )


def _text(name: str, key: str) -> FieldSpec:
    return FieldSpec(name, key, FieldKind.TEXT)


MESSAGE_SCHEMA = RecordSchema(
    "message",
    (_text("url", "url"),),
)

TARGET_SCHEMA = RecordSchema(
    "target",
    (
        FieldSpec("device_ids", "deviceIds", FieldKind.TEXT_LIST),
        FieldSpec("user_ids", "userIds", FieldKind.TEXT_LIST),
        FieldSpec("platforms", "platforms", FieldKind.CHOICE_LIST, Platform),
        FieldSpec("tag_names", "tagNames", FieldKind.TEXT_LIST),
    ),
)

_PAYLOAD = FieldSpec("payload", "payload", FieldKind.PAYLOAD)
_TIME_TO_LIVE = FieldSpec("time_to_live", "timeToLive", FieldKind.INTEGER)
_DELAY_WHILE_IDLE = FieldSpec("delay_while_idle", "delayWhileIdle", FieldKind.BOOLEAN)

_WEB_PUSH_FIELDS = (
    _text("title", "title"),
    _text("icon_url", "iconUrl"),
    _TIME_TO_LIVE,
    _PAYLOAD,
)

PLATFORM_SCHEMAS: dict[SettingsPlatform, RecordSchema] = {
    SettingsPlatform.APNS: RecordSchema(
        SettingsPlatform.APNS.value,
        (
            FieldSpec("badge", "badge", FieldKind.INTEGER),
            _text("category", "category"),
            _text("action_key", "actionKey"),
            _PAYLOAD,
            _text("sound", "sound"),
            FieldSpec("type", "type", FieldKind.CHOICE, APNSNotificationType),
            _text("title_loc_key", "titleLocKey"),
            _text("loc_key", "locKey"),
            _text("launch_image", "launchImage"),
            FieldSpec("title_loc_args", "titleLocArgs", FieldKind.TEXT_LIST),
            FieldSpec("loc_args", "locArgs", FieldKind.TEXT_LIST),
            _text("title", "title"),
            _text("subtitle", "subtitle"),
            _text("attachment_url", "attachmentUrl"),
        ),
    ),
    SettingsPlatform.GCM: RecordSchema(
        SettingsPlatform.GCM.value,
        (
            _text("collapse_key", "collapseKey"),
            _DELAY_WHILE_IDLE,
            _PAYLOAD,
            FieldSpec("priority", "priority", FieldKind.CHOICE, GCMPriority),
            _text("sound", "sound"),
            _TIME_TO_LIVE,
            _text("icon", "icon"),
            FieldSpec("visibility", "visibility", FieldKind.CHOICE, Visibility),
            FieldSpec("sync", "sync", FieldKind.BOOLEAN),
            FieldSpec("style", "style", FieldKind.STYLE),
        ),
    ),
    SettingsPlatform.CHROME_WEB: RecordSchema(
        SettingsPlatform.CHROME_WEB.value,
        _WEB_PUSH_FIELDS,
    ),
    SettingsPlatform.FIREFOX_WEB: RecordSchema(
        SettingsPlatform.FIREFOX_WEB.value,
        _WEB_PUSH_FIELDS,
    ),
    SettingsPlatform.CHROME_APP_EXT: RecordSchema(
        SettingsPlatform.CHROME_APP_EXT.value,
        (
            _text("collapse_key", "collapseKey"),
            _DELAY_WHILE_IDLE,
            _text("title", "title"),
            _text("icon_url", "iconUrl"),
            _TIME_TO_LIVE,
            _PAYLOAD,
        ),
    ),
    SettingsPlatform.SAFARI_WEB: RecordSchema(
        SettingsPlatform.SAFARI_WEB.value,
        (
            _text("title", "title"),
            FieldSpec("url_args", "urlArgs", FieldKind.TEXT_LIST),
            _text("action", "action"),
        ),
    ),
}


def get_platform_schema(platform: SettingsPlatform | str) -> RecordSchema:
    """Retorna o schema da plataforma (aceita o enum ou a chave JSON)."""
    return PLATFORM_SCHEMAS[SettingsPlatform(platform)]
