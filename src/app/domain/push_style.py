"""Estilo de notificação expansível Android (gcm.style)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GcmStyle(BaseModel):
    """Opções de notificação expansível.

    `type` costuma ser picture_notification, bigtext_notification ou
    inbox_notification; o valor não é interpretado aqui. Chaves fora
    deste conjunto são rejeitadas.
    """

    model_config = ConfigDict(extra="forbid")

    type: str | None = None
    url: str | None = None
    title: str | None = None
    text: str | None = None
    lines: list[str] | None = None
