"""Factory de builders de settings por plataforma."""

from __future__ import annotations

from api.payload_builders.push.settings import SettingsBuilder
from app.constants.push import SettingsPlatform

SUPPORTED_PLATFORMS: tuple[SettingsPlatform, ...] = tuple(SettingsPlatform)


def get_settings_builder(platform: SettingsPlatform | str) -> SettingsBuilder:
    """Retorna um builder novo (vazio) para a plataforma.

    Builders guardam estado, então cada chamada cria uma instância.

    Raises:
        ValueError: Se a plataforma não é suportada.
    """
    return SettingsBuilder(platform)
