"""Enums e chaves do documento de notificação push."""

from __future__ import annotations

from enum import StrEnum

# Chaves de topo do documento
MESSAGE_KEY = "message"
TARGET_KEY = "target"
SETTINGS_KEY = "settings"


class Platform(StrEnum):
    """Plataformas de destino, serializadas pelo código do protocolo."""

    APPLE = "A"
    GOOGLE = "G"
    WEBCHROME = "WEB_CHROME"
    WEBFIREFOX = "WEB_FIREFOX"
    WEBSAFARI = "WEB_SAFARI"
    APPEXTCHROME = "APPEXT_CHROME"


class SettingsPlatform(StrEnum):
    """Chaves de plataforma dentro de `settings`."""

    APNS = "apns"
    GCM = "gcm"
    CHROME_WEB = "chromeWeb"
    FIREFOX_WEB = "firefoxWeb"
    CHROME_APP_EXT = "chromeAppExt"
    SAFARI_WEB = "safariWeb"


class APNSNotificationType(StrEnum):
    """Modo de exibição da notificação iOS."""

    DEFAULT = "DEFAULT"
    MIXED = "MIXED"
    SILENT = "SILENT"


class GCMPriority(StrEnum):
    """Prioridade da mensagem Android."""

    DEFAULT = "DEFAULT"
    MIN = "MIN"
    LOW = "LOW"
    HIGH = "HIGH"
    MAX = "MAX"


class Visibility(StrEnum):
    """Visibilidade da notificação na tela bloqueada (Android)."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    SECRET = "SECRET"

