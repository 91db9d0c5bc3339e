"""Builder genérico de settings por plataforma.

Um único tipo atende as seis plataformas; o conjunto de campos de cada uma
vem de PLATFORM_SCHEMAS. Setters devolvem o próprio builder para
encadeamento:

    builder = SettingsBuilder(SettingsPlatform.GCM)
    builder.set("priority", GCMPriority.HIGH).set_payload('{"k": "v"}')
    builder.build()  # {"gcm": {"priority": "HIGH", "payload": {"k": "v"}}}
"""

from __future__ import annotations

from typing import Any

from api.payload_builders.push.payload import parse_payload, parse_style
from api.payload_builders.push.projector import project_fields
from app.constants.push import SettingsPlatform
from app.domain.push_schema import FieldKind, RecordSchema, get_platform_schema


class SettingsBuilder:
    """Acumula campos opcionais de uma plataforma e gera seu fragmento."""

    __slots__ = ("_platform", "_schema", "_values")

    def __init__(self, platform: SettingsPlatform | str) -> None:
        """
        Args:
            platform: Plataforma (enum ou chave JSON, ex: "chromeWeb").
        """
        self._platform = SettingsPlatform(platform)
        self._schema = get_platform_schema(self._platform)
        self._values: dict[str, Any] = {}

    @property
    def platform(self) -> SettingsPlatform:
        return self._platform

    @property
    def schema(self) -> RecordSchema:
        return self._schema

    @property
    def is_empty(self) -> bool:
        """True se nenhum campo foi definido."""
        return not self.build_fragment()

    def set(self, name: str, value: Any) -> SettingsBuilder:
        """Define um campo pelo nome Python; None remove o valor.

        Raises:
            UnknownFieldError: Se a plataforma não possui o campo.
        """
        spec = self._schema.field(name)
        if spec.kind is FieldKind.PAYLOAD:
            return self.set_payload(value)
        if spec.kind is FieldKind.STYLE:
            return self.set_style(value)
        self._store(name, spec.normalize(value))
        return self

    def update(self, **fields: Any) -> SettingsBuilder:
        """Define vários campos de uma vez (mesma semântica de set)."""
        for name, value in fields.items():
            self.set(name, value)
        return self

    def set_payload(self, payload: Any) -> SettingsBuilder:
        """Define o payload customizado.

        JSON malformado é logado e o campo fica sem valor; o builder
        continua utilizável.
        """
        spec = self._schema.field("payload")
        parsed = parse_payload(payload, platform=self._platform.value)
        self._store(spec.name, parsed)
        return self

    def set_style(self, style: Any) -> SettingsBuilder:
        """Define o style expansível (apenas gcm)."""
        spec = self._schema.field("style")
        self._store(spec.name, parse_style(style, platform=self._platform.value))
        return self

    def reset(self) -> SettingsBuilder:
        """Remove todos os campos definidos."""
        self._values.clear()
        return self

    def build_fragment(self) -> dict[str, Any]:
        """Fragmento da plataforma, sem a chave da plataforma."""
        return project_fields(self._schema, self._values)

    def build(self) -> dict[str, Any]:
        """Fragmento indexado pela chave da plataforma.

        Returns:
            {"<plataforma>": {...}} ou {} se nada foi definido.
        """
        fragment = self.build_fragment()
        if not fragment:
            return {}
        return {self._platform.value: fragment}

    def _store(self, name: str, value: Any) -> None:
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def __repr__(self) -> str:
        return f"SettingsBuilder(platform={self._platform.value!r}, fields={sorted(self._values)!r})"
