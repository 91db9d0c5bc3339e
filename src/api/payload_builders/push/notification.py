"""NotificationBuilder: monta o documento de requisição de push.

Ciclo de vida:
    BUILDING  → estado inicial, com message já validada
    CONSUMED  → terminal, após build()

Em BUILDING cada operação de configuração gera um fragmento (builder +
projector) e o anexa ao documento via merge raso. Fragmento vazio não
altera nada. Em CONSUMED qualquer chamada falha com BuilderConsumedError.

Uso:
    notification = (
        NotificationBuilder("Hi")
        .set_target(device_ids=["d1"], platforms=[Platform.GOOGLE])
        .set_gcm_settings(priority=GCMPriority.HIGH)
        .build()
    )

Não é thread-safe: um dono, configuração sequencial e um único build().
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from api.payload_builders.push.factory import get_settings_builder
from api.payload_builders.push.merge import attach_section
from api.payload_builders.push.message import build_message, build_url_fragment
from api.payload_builders.push.settings import SettingsBuilder
from api.payload_builders.push.target import TargetBuilder
from app.constants.push import (
    MESSAGE_KEY,
    SETTINGS_KEY,
    TARGET_KEY,
    APNSNotificationType,
    GCMPriority,
    Platform,
    SettingsPlatform,
    Visibility,
)
from app.domain.push_style import GcmStyle
from config.logging import get_logger
from utils.errors import BuilderConsumedError

logger = get_logger(__name__)


class BuilderState(StrEnum):
    """Estados do NotificationBuilder."""

    BUILDING = "building"
    CONSUMED = "consumed"


class NotificationBuilder:
    """Monta uma notificação push a partir de seções opcionais.

    O alert passado no construtor é obrigatório; todo o resto é opcional.
    """

    __slots__ = ("_document", "_state")

    def __init__(self, alert: str, url: str | None = None) -> None:
        """
        Args:
            alert: Texto da notificação (None falha com ValidationError).
            url: URL opcional da mensagem.

        Raises:
            ValidationError: Se alert é None.
        """
        self._document: dict[str, Any] | None = {MESSAGE_KEY: build_message(alert, url)}
        self._state = BuilderState.BUILDING

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def is_consumed(self) -> bool:
        return self._state is BuilderState.CONSUMED

    def snapshot(self) -> dict[str, Any]:
        """Cópia profunda do documento em construção."""
        return copy.deepcopy(self._require_document("snapshot"))

    def set_message_url(self, url: str | None) -> NotificationBuilder:
        """Define a URL opcional incluída na mensagem."""
        document = self._require_document("set_message_url")
        self._attach(document, MESSAGE_KEY, build_url_fragment(url))
        return self

    def set_target(
        self,
        device_ids: Iterable[str] | None = None,
        user_ids: Iterable[str] | None = None,
        platforms: Iterable[Platform | str] | None = None,
        tag_names: Iterable[str] | None = None,
    ) -> NotificationBuilder:
        """Define quem recebe a notificação.

        Args:
            device_ids: Device ids de destino.
            user_ids: User ids cujos devices recebem a notificação.
            platforms: Plataformas de destino (membro, nome ou código).
            tag_names: Tags cujos inscritos recebem a notificação.
        """
        document = self._require_document("set_target")
        fragment = (
            TargetBuilder()
            .set_device_ids(device_ids)
            .set_user_ids(user_ids)
            .set_platforms(platforms)
            .set_tag_names(tag_names)
            .build()
        )
        self._attach(document, TARGET_KEY, fragment)
        return self

    def set_safari_web_settings(
        self,
        title: str | None = None,
        url_args: Iterable[str] | None = None,
        action: str | None = None,
    ) -> NotificationBuilder:
        """Settings do Safari (título, argumentos de URL e label do botão)."""
        return self._apply_platform(
            SettingsPlatform.SAFARI_WEB,
            "set_safari_web_settings",
            title=title,
            url_args=url_args,
            action=action,
        )

    def set_firefox_web_settings(
        self,
        title: str | None = None,
        icon_url: str | None = None,
        time_to_live: int | None = None,
        payload: Any = None,
    ) -> NotificationBuilder:
        """Settings do Firefox WebPush.

        Args:
            title: Título da notificação.
            icon_url: URL do ícone.
            time_to_live: Segundos que a mensagem fica armazenada se o
                device estiver offline.
            payload: JSON customizado (texto ou mapping).
        """
        return self._apply_platform(
            SettingsPlatform.FIREFOX_WEB,
            "set_firefox_web_settings",
            title=title,
            icon_url=icon_url,
            time_to_live=time_to_live,
            payload=payload,
        )

    def set_chrome_app_ext_settings(
        self,
        collapse_key: str | None = None,
        delay_while_idle: bool | None = None,
        title: str | None = None,
        icon_url: str | None = None,
        time_to_live: int | None = None,
        payload: Any = None,
    ) -> NotificationBuilder:
        """Settings de Chrome App Extension."""
        return self._apply_platform(
            SettingsPlatform.CHROME_APP_EXT,
            "set_chrome_app_ext_settings",
            collapse_key=collapse_key,
            delay_while_idle=delay_while_idle,
            title=title,
            icon_url=icon_url,
            time_to_live=time_to_live,
            payload=payload,
        )

    def set_chrome_settings(
        self,
        title: str | None = None,
        icon_url: str | None = None,
        time_to_live: int | None = None,
        payload: Any = None,
    ) -> NotificationBuilder:
        """Settings do Chrome WebPush."""
        return self._apply_platform(
            SettingsPlatform.CHROME_WEB,
            "set_chrome_settings",
            title=title,
            icon_url=icon_url,
            time_to_live=time_to_live,
            payload=payload,
        )

    def set_apns_settings(
        self,
        badge: int | None = None,
        category: str | None = None,
        action_key: str | None = None,
        payload: Any = None,
        sound: str | None = None,
        type: APNSNotificationType | str | None = None,  # noqa: A002
        title_loc_key: str | None = None,
        loc_key: str | None = None,
        launch_image: str | None = None,
        title_loc_args: Iterable[str] | None = None,
        loc_args: Iterable[str] | None = None,
        title: str | None = None,
        subtitle: str | None = None,
        attachment_url: str | None = None,
    ) -> NotificationBuilder:
        """Settings do APNS (iOS).

        Args:
            badge: Número exibido no ícone do app.
            category: Categoria para notificações interativas.
            action_key: Título do botão de ação.
            payload: JSON customizado (texto ou mapping).
            sound: Arquivo de som do bundle.
            type: DEFAULT, MIXED ou SILENT.
            title_loc_key: Chave do título em Localizable.strings.
            loc_key: Chave do alert em Localizable.strings.
            launch_image: Imagem de launch do bundle.
            title_loc_args: Valores para os especificadores de title_loc_key.
            loc_args: Valores para os especificadores de loc_key.
            title: Título de rich push (iOS 10+).
            subtitle: Subtítulo de rich push (iOS 10+).
            attachment_url: Mídia anexada (iOS 10+).
        """
        return self._apply_platform(
            SettingsPlatform.APNS,
            "set_apns_settings",
            badge=badge,
            category=category,
            action_key=action_key,
            payload=payload,
            sound=sound,
            type=type,
            title_loc_key=title_loc_key,
            loc_key=loc_key,
            launch_image=launch_image,
            title_loc_args=title_loc_args,
            loc_args=loc_args,
            title=title,
            subtitle=subtitle,
            attachment_url=attachment_url,
        )

    def set_gcm_settings(
        self,
        collapse_key: str | None = None,
        delay_while_idle: bool | None = None,
        payload: Any = None,
        priority: GCMPriority | str | None = None,
        sound: str | None = None,
        time_to_live: int | None = None,
        icon: str | None = None,
        visibility: Visibility | str | None = None,
        sync: bool | None = None,
        style: GcmStyle | dict[str, Any] | str | None = None,
    ) -> NotificationBuilder:
        """Settings do GCM (Android).

        Args:
            collapse_key: Agrupa mensagens substituíveis pela mais recente.
            delay_while_idle: Só entrega quando o device ficar ativo.
            payload: JSON customizado (texto ou mapping).
            priority: Prioridade (DEFAULT, MIN, LOW, HIGH, MAX).
            sound: Som tocado na chegada.
            time_to_live: Segundos armazenada se o device estiver offline.
            icon: Nome do ícone empacotado no app.
            visibility: PUBLIC, PRIVATE ou SECRET.
            sync: Mensageria de grupo de devices.
            style: Notificação expansível {type, url, title, text, lines}.
        """
        return self._apply_platform(
            SettingsPlatform.GCM,
            "set_gcm_settings",
            collapse_key=collapse_key,
            delay_while_idle=delay_while_idle,
            payload=payload,
            priority=priority,
            sound=sound,
            time_to_live=time_to_live,
            icon=icon,
            visibility=visibility,
            sync=sync,
            style=style,
        )

    def apply_settings(self, builder: SettingsBuilder) -> NotificationBuilder:
        """Anexa o fragmento de um SettingsBuilder montado à parte.

        Mesma regra de merge: substitui a plataforma se ela já existia.
        """
        document = self._require_document("apply_settings")
        self._attach(document, SETTINGS_KEY, builder.build())
        return self

    def build(self) -> dict[str, Any]:
        """Entrega o documento e encerra o builder.

        Returns:
            Documento pronto para o colaborador de envio.

        Raises:
            BuilderConsumedError: Se build() já foi chamado.
        """
        document = self._require_document("build")
        self._document = None
        self._state = BuilderState.CONSUMED
        logger.debug(
            "push_notification_built",
            extra={"component": "push_builder", "sections": list(document)},
        )
        return document

    def _apply_platform(
        self,
        platform: SettingsPlatform,
        operation: str,
        **fields: Any,
    ) -> NotificationBuilder:
        document = self._require_document(operation)
        fragment = get_settings_builder(platform).update(**fields).build()
        self._attach(document, SETTINGS_KEY, fragment)
        return self

    def _attach(self, document: dict[str, Any], section: str, fragment: dict[str, Any]) -> None:
        changed = attach_section(document, section, fragment)
        logger.debug(
            "push_section_attached" if changed else "push_section_skipped",
            extra={"component": "push_builder", "section": section},
        )

    def _require_document(self, operation: str) -> dict[str, Any]:
        if self._state is BuilderState.CONSUMED or self._document is None:
            raise BuilderConsumedError(operation)
        return self._document

    def __repr__(self) -> str:
        sections = list(self._document) if self._document is not None else []
        return f"NotificationBuilder(state={self._state.value!r}, sections={sections!r})"
