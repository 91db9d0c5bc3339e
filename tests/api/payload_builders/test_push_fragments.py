"""Testes para projector, parsing de payload e builders de seção.

Cobre: project_fields, parse_payload, parse_style, SettingsBuilder,
get_settings_builder, TargetBuilder e message core.
"""

from __future__ import annotations

import logging

import pytest

from api.payload_builders.push import (
    SUPPORTED_PLATFORMS,
    SettingsBuilder,
    TargetBuilder,
    build_message,
    get_settings_builder,
    is_set,
    project_fields,
    validate_alert,
)
from api.payload_builders.push.payload import parse_payload, parse_style
from app.constants.push import (
    APNSNotificationType,
    GCMPriority,
    Platform,
    SettingsPlatform,
    Visibility,
)
from app.domain.push_schema import PLATFORM_SCHEMAS, TARGET_SCHEMA, get_platform_schema
from app.domain.push_style import GcmStyle
from utils.errors import UnknownFieldError, ValidationError

GCM = PLATFORM_SCHEMAS[SettingsPlatform.GCM]
APNS = PLATFORM_SCHEMAS[SettingsPlatform.APNS]


class TestIsSet:
    """Regra de omissão: None e coleções vazias não contam."""

    @pytest.mark.parametrize("value", [None, "", [], (), {}])
    def test_unset_values(self, value: object) -> None:
        assert is_set(value) is False

    @pytest.mark.parametrize("value", [0, False, "x", ["a"], {"k": 1}])
    def test_set_values(self, value: object) -> None:
        assert is_set(value) is True


class TestProjectFields:
    """Testes para project_fields."""

    def test_only_set_fields_are_projected(self) -> None:
        fragment = project_fields(
            APNS,
            {"badge": 3, "category": "", "sound": None, "title_loc_args": [], "title": "T"},
        )
        assert fragment == {"badge": 3, "title": "T"}

    def test_zero_and_false_are_kept(self) -> None:
        """0 e False são valores intencionais, não ausência."""
        fragment = project_fields(GCM, {"time_to_live": 0, "delay_while_idle": False, "sync": False})
        assert fragment == {"timeToLive": 0, "delayWhileIdle": False, "sync": False}

    def test_json_keys_and_enum_values(self) -> None:
        fragment = project_fields(
            GCM,
            {
                "collapse_key": "grp",
                "priority": GCMPriority.MAX,
                "visibility": Visibility.SECRET,
            },
        )
        assert fragment == {"collapseKey": "grp", "priority": "MAX", "visibility": "SECRET"}

    def test_empty_values_return_empty_fragment(self) -> None:
        assert project_fields(APNS, {}) == {}
        assert project_fields(APNS, {"title": "", "badge": None}) == {}

    def test_invalid_field_is_dropped_siblings_kept(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Campo inválido é logado e omitido; os demais permanecem."""
        with caplog.at_level(logging.INFO):
            fragment = project_fields(APNS, {"badge": "três", "title": "T", "sound": "a.aiff"})
        assert fragment == {"title": "T", "sound": "a.aiff"}
        assert "push_field_serialization_failed" in caplog.messages

    def test_invalid_platform_keeps_other_target_fields(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Plataforma desconhecida não descarta os destinatários."""
        with caplog.at_level(logging.INFO):
            fragment = project_fields(
                TARGET_SCHEMA,
                {"device_ids": ["d1"], "platforms": ["BLACKBERRY"], "tag_names": ["news"]},
            )
        assert fragment == {"deviceIds": ["d1"], "tagNames": ["news"]}
        assert "push_field_serialization_failed" in caplog.messages

    def test_style_is_compacted(self) -> None:
        style = GcmStyle(type="inbox_notification", title="", lines=["a", "b"])
        assert project_fields(GCM, {"style": style}) == {
            "style": {"type": "inbox_notification", "lines": ["a", "b"]}
        }

    def test_empty_style_is_omitted(self) -> None:
        assert project_fields(GCM, {"style": GcmStyle()}) == {}


class TestParsePayload:
    """Testes para parse_payload (best-effort, nunca levanta)."""

    def test_json_text_is_parsed(self) -> None:
        assert parse_payload('{"a": [1, 2]}', platform="gcm") == {"a": [1, 2]}

    def test_mapping_is_copied(self) -> None:
        source = {"nested": {"k": "v"}}
        parsed = parse_payload(source, platform="gcm")
        assert parsed == source
        assert parsed is not source
        source["nested"]["k"] = "changed"
        assert parsed["nested"]["k"] == "v"

    @pytest.mark.parametrize(
        "value",
        [
            "{not json",
            "[1, 2]",
            "42",
            '{"n": NaN}',
            {"s": {1, 2}},
            {"n": float("nan")},
            object(),
        ],
    )
    def test_malformed_payload_returns_none(
        self, value: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            assert parse_payload(value, platform="apns") is None
        assert "push_payload_parse_failed" in caplog.messages

    def test_large_payload_passes_through(self) -> None:
        """Sem limite de tamanho: só a boa formação é verificada."""
        payload = {"k": "x" * 10_000}
        assert parse_payload(payload, platform="chromeWeb") == payload

    def test_none_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            assert parse_payload(None, platform="gcm") is None
        assert caplog.messages == []


class TestParseStyle:
    """Testes para parse_style."""

    def test_mapping(self) -> None:
        style = parse_style({"type": "bigtext_notification", "text": "long"}, platform="gcm")
        assert style == GcmStyle(type="bigtext_notification", text="long")

    def test_json_text(self) -> None:
        style = parse_style('{"type": "picture_notification", "url": "http://x/p.png"}', platform="gcm")
        assert style is not None
        assert style.url == "http://x/p.png"

    @pytest.mark.parametrize("value", ['{"unknown": 1}', "{bad", {"lines": "not-a-list"}, 7])
    def test_invalid_style_returns_none(
        self, value: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            assert parse_style(value, platform="gcm") is None
        assert "push_style_parse_failed" in caplog.messages


class TestSettingsBuilder:
    """Testes para SettingsBuilder e factory."""

    def test_build_keys_fragment_by_platform(self) -> None:
        builder = SettingsBuilder(SettingsPlatform.CHROME_WEB)
        builder.set("title", "Promo").set("icon_url", "http://i/icon.png").set("time_to_live", 60)
        assert builder.build() == {
            "chromeWeb": {"title": "Promo", "iconUrl": "http://i/icon.png", "timeToLive": 60}
        }

    def test_empty_builder_builds_empty(self) -> None:
        builder = get_settings_builder("safariWeb")
        assert builder.is_empty
        assert builder.build() == {}

    def test_update_routes_payload_and_style(self) -> None:
        builder = get_settings_builder(SettingsPlatform.GCM).update(
            payload='{"order": 1}',
            style={"type": "inbox_notification", "lines": ["l1"]},
            sync=True,
        )
        assert builder.build() == {
            "gcm": {
                "payload": {"order": 1},
                "sync": True,
                "style": {"type": "inbox_notification", "lines": ["l1"]},
            }
        }

    def test_malformed_payload_keeps_other_fields(self) -> None:
        builder = get_settings_builder(SettingsPlatform.FIREFOX_WEB)
        builder.update(title="T", payload="{oops")
        assert builder.build() == {"firefoxWeb": {"title": "T"}}

    def test_malformed_payload_unsets_previous_payload(self) -> None:
        builder = get_settings_builder(SettingsPlatform.CHROME_APP_EXT).set_payload({"a": 1})
        builder.set_payload("not json")
        assert builder.build() == {}

    def test_none_unsets_field(self) -> None:
        builder = get_settings_builder(SettingsPlatform.APNS).set("badge", 5)
        builder.set("badge", None)
        assert builder.build() == {}

    def test_iterables_are_copied_into_lists(self) -> None:
        args = ("a", "b")
        builder = get_settings_builder(SettingsPlatform.SAFARI_WEB).set("url_args", args)
        assert builder.build() == {"safariWeb": {"urlArgs": ["a", "b"]}}

    def test_unknown_field_raises(self) -> None:
        builder = get_settings_builder(SettingsPlatform.SAFARI_WEB)
        with pytest.raises(UnknownFieldError, match="safariWeb"):
            builder.set("badge", 1)
        with pytest.raises(KeyError):
            builder.set_payload("{}")

    def test_style_only_on_gcm(self) -> None:
        with pytest.raises(UnknownFieldError):
            get_settings_builder(SettingsPlatform.APNS).set_style({"type": "x"})

    def test_reset_clears_fields(self) -> None:
        builder = get_settings_builder(SettingsPlatform.APNS).update(badge=1, title="T")
        assert builder.reset().build() == {}

    def test_apns_full_field_set(self) -> None:
        builder = get_settings_builder(SettingsPlatform.APNS).update(
            badge=1,
            category="cat",
            action_key="Abrir",
            payload={"k": "v"},
            sound="ding.aiff",
            type=APNSNotificationType.MIXED,
            title_loc_key="TK",
            loc_key="LK",
            launch_image="launch.png",
            title_loc_args=["t1"],
            loc_args=["l1", "l2"],
            title="Title",
            subtitle="Sub",
            attachment_url="http://m/v.mp4",
        )
        assert builder.build() == {
            "apns": {
                "badge": 1,
                "category": "cat",
                "actionKey": "Abrir",
                "payload": {"k": "v"},
                "sound": "ding.aiff",
                "type": "MIXED",
                "titleLocKey": "TK",
                "locKey": "LK",
                "launchImage": "launch.png",
                "titleLocArgs": ["t1"],
                "locArgs": ["l1", "l2"],
                "title": "Title",
                "subtitle": "Sub",
                "attachmentUrl": "http://m/v.mp4",
            }
        }

    @pytest.mark.parametrize("priority", ["HIGH", GCMPriority.HIGH])
    def test_choice_accepts_name_or_member(self, priority: object) -> None:
        builder = get_settings_builder(SettingsPlatform.GCM).update(priority=priority, sound="ding")
        assert builder.build() == {"gcm": {"priority": "HIGH", "sound": "ding"}}

    def test_unknown_choice_drops_only_that_field(self) -> None:
        builder = get_settings_builder(SettingsPlatform.GCM).update(
            priority="URGENT", sound="ding", payload={"k": "v"}
        )
        assert builder.build() == {"gcm": {"sound": "ding", "payload": {"k": "v"}}}

    def test_factory_rejects_unknown_platform(self) -> None:
        with pytest.raises(ValueError):
            get_settings_builder("blackberry")

    @pytest.mark.parametrize("platform", SUPPORTED_PLATFORMS)
    def test_every_platform_has_schema(self, platform: SettingsPlatform) -> None:
        builder = get_settings_builder(platform)
        assert builder.schema is get_platform_schema(platform)
        assert builder.schema.name == platform.value


class TestTargetBuilder:
    """Testes para TargetBuilder."""

    def test_platform_codes(self) -> None:
        fragment = TargetBuilder().set_platforms(list(Platform)).build()
        assert fragment == {
            "platforms": ["A", "G", "WEB_CHROME", "WEB_FIREFOX", "WEB_SAFARI", "APPEXT_CHROME"]
        }

    @pytest.mark.parametrize(
        "platforms",
        [["GOOGLE", "APPLE"], ["G", "A"], [Platform.GOOGLE, "A"]],
    )
    def test_platforms_accept_name_code_or_member(self, platforms: list) -> None:
        fragment = TargetBuilder().set_platforms(platforms).build()
        assert fragment == {"platforms": ["G", "A"]}

    def test_unknown_platform_keeps_device_ids(self) -> None:
        fragment = (
            TargetBuilder()
            .set_device_ids(["d1"])
            .set_user_ids(["u1"])
            .set_platforms(["WINDOWS_PHONE"])
            .build()
        )
        assert fragment == {"deviceIds": ["d1"], "userIds": ["u1"]}

    def test_all_fields(self) -> None:
        fragment = (
            TargetBuilder()
            .set_device_ids(["d1", "d2"])
            .set_user_ids(["u1"])
            .set_platforms([Platform.APPLE])
            .set_tag_names(["news"])
            .build()
        )
        assert fragment == {
            "deviceIds": ["d1", "d2"],
            "userIds": ["u1"],
            "platforms": ["A"],
            "tagNames": ["news"],
        }

    def test_empty_lists_are_omitted(self) -> None:
        assert TargetBuilder().set_device_ids([]).set_tag_names(None).build() == {}

    def test_caller_list_is_not_shared(self) -> None:
        ids = ["d1"]
        builder = TargetBuilder().set_device_ids(ids)
        ids.append("d2")
        assert builder.build() == {"deviceIds": ["d1"]}


class TestMessageCore:
    """Testes para build_message e validate_alert."""

    def test_alert_only(self) -> None:
        assert build_message("Olá") == {"alert": "Olá"}

    def test_alert_and_url(self) -> None:
        assert build_message("Olá", "http://x") == {"alert": "Olá", "url": "http://x"}

    def test_empty_url_is_omitted(self) -> None:
        assert build_message("Olá", "") == {"alert": "Olá"}

    def test_empty_alert_is_kept_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            assert build_message("") == {"alert": ""}
        assert "push_alert_empty" in caplog.messages

    def test_none_alert_raises(self) -> None:
        with pytest.raises(ValidationError, match="alert"):
            validate_alert(None)

    def test_non_string_alert_raises(self) -> None:
        with pytest.raises(ValidationError):
            validate_alert(123)
