"""
Tests for the field component: editor init data, settings form, values.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tinymce_field.adapters.config_files import FileSystemConfigStore
from tinymce_field.adapters.memory import InMemoryHost, PermissionSetActor
from tinymce_field.adapters.translations import YamlTranslator
from tinymce_field.components.field import (
    TRANSLATABLE_MESSAGES,
    EditorConfigInput,
    SerializeValueInput,
    SerializeValueOutput,
    SettingsFormInput,
    StaticHtmlInput,
    StaticHtmlOutput,
    display_name,
    merge_editor_config,
    orientation,
    run,
    run_editor_config,
    run_serialize,
    run_settings_form,
    run_static_html,
)
from tinymce_field.domain.entities import ContentItem, FieldSettings
from tinymce_field.rules.models import EditorRules, PluginRules


@pytest.fixture
def field() -> FieldSettings:
    return FieldSettings(handle="body")


@pytest.fixture
def config_files(config_dir: Path) -> FileSystemConfigStore:
    return FileSystemConfigStore(config_dir)


@pytest.fixture
def render(host, actor, config_files, translator):
    """Render the editor with the default host and ports."""

    def _render(inp: EditorConfigInput, rules: PluginRules | None = None):
        return run_editor_config(
            inp,
            host=host,
            actor=actor,
            config_files=config_files,
            translator=translator,
            rules=rules,
        )

    return _render


# --- Editor config ---


def test_editor_config_keys(render, field):
    output = render(EditorConfigInput(field=field, element=ContentItem(id=1, site_id=1)))

    assert set(output.settings) == {
        "id",
        "linkOptions",
        "volumes",
        "editorConfig",
        "transforms",
        "defaultTransform",
        "elementSiteId",
        "allSites",
        "direction",
        "language",
        "translations",
    }


def test_editor_config_values(render, field):
    output = render(EditorConfigInput(field=field, element=ContentItem(id=1, site_id=1)))
    settings = output.settings

    assert settings["id"] == "body"
    assert [o["refHandle"] for o in settings["linkOptions"]] == [
        "entry",
        "category",
        "asset",
        "product",
        "variant",
    ]
    assert settings["volumes"] == ["volume:images", "volume:private"]
    assert settings["editorConfig"] == {"skin": "craft", "menubar": False}
    assert settings["transforms"] == [
        {"value": "thumb", "text": "Thumbnail"},
        {"value": "wide", "text": "Wide"},
    ]
    assert settings["defaultTransform"] == ""
    assert settings["elementSiteId"] == "1"
    assert settings["allSites"] == [
        {"value": "1", "text": "English"},
        {"value": "2", "text": "Arabic"},
    ]
    assert settings["direction"] == "ltr"
    assert settings["language"] == "en-US"


def test_editor_config_translations(render, field):
    output = render(EditorConfigInput(field=field))

    translations = output.settings["translations"]
    assert list(translations) == list(TRANSLATABLE_MESSAGES)
    assert len(translations) == 18
    assert translations["Heading 6"] == "Heading 6"


def test_editor_config_without_element_uses_current_site(render, field, host: InMemoryHost):
    host.current_site_id = 2

    output = render(EditorConfigInput(field=field))

    assert output.settings["elementSiteId"] == "2"
    assert output.settings["direction"] == "rtl"
    # Category sources need an element
    assert [o["refHandle"] for o in output.settings["linkOptions"]] == ["entry", "asset"]


def test_editor_config_rtl_element_site(render, field):
    output = render(EditorConfigInput(field=field, element=ContentItem(site_id=2)))

    assert output.settings["elementSiteId"] == "2"
    assert output.settings["direction"] == "rtl"


def test_editor_config_reports_element_site_outside_host(render, field):
    output = render(EditorConfigInput(field=field, element=ContentItem(site_id=7)))

    assert output.settings["elementSiteId"] == "7"


def test_editor_config_named_config_file(render):
    field = FieldSettings(handle="body", tinymce_config="Simple.json")

    output = render(EditorConfigInput(field=field))

    # Base skin wins over the file's skin
    assert output.settings["editorConfig"] == {"skin": "craft", "toolbar": "bold italic"}


def test_editor_config_missing_config_file(render):
    field = FieldSettings(handle="body", tinymce_config="Gone.json")

    output = render(EditorConfigInput(field=field))

    assert output.settings["editorConfig"] == {"skin": "craft"}


def test_editor_config_invalid_config_file(render, config_dir: Path):
    (config_dir / "tinymce" / "Broken.json").write_text("{not json")
    field = FieldSettings(handle="body", tinymce_config="Broken.json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        render(EditorConfigInput(field=field))


def test_editor_config_cloud_api_key(render, field):
    rules = PluginRules(editor=EditorRules(cloud_api_key="abc123"))

    output = render(EditorConfigInput(field=field), rules=rules)

    assert output.settings["editorConfig"]["skin"] == "oxide"
    assert output.script_url == "https://cdn.tiny.cloud/1/abc123/tinymce/6/tinymce.min.js"


def test_editor_config_local_bundle(render, field):
    output = render(EditorConfigInput(field=field))

    assert output.script_url == "/static/tinymce/tinymce.min.js"


def test_editor_config_transform_settings(render):
    field = FieldSettings(
        handle="body",
        available_transforms=["t-wide"],
        default_transform="t-thumb",
    )

    output = render(EditorConfigInput(field=field))

    assert output.settings["transforms"] == [{"value": "wide", "text": "Wide"}]
    assert output.settings["defaultTransform"] == "thumb"


def test_editor_config_volumes_disabled(render):
    field = FieldSettings(handle="body", available_volumes=[])

    output = render(EditorConfigInput(field=field))

    assert output.settings["volumes"] == []
    assert "asset" not in [o["refHandle"] for o in output.settings["linkOptions"]]


def test_editor_config_volume_permissions(host, config_files, translator, field):
    output = run_editor_config(
        EditorConfigInput(field=field),
        host=host,
        actor=PermissionSetActor(),
        config_files=config_files,
        translator=translator,
    )

    assert output.settings["volumes"] == []


def test_editor_config_namespaced_id(render):
    field = FieldSettings(handle="my field!")

    output = render(EditorConfigInput(field=field, namespace="fields"))

    assert output.settings["id"] == "fields-my-field"
    assert 'id="fields-my-field"' in output.input_html
    assert 'name="fields[my field!]"' in output.input_html


def test_editor_config_input_html_escapes_value(render, field):
    output = render(EditorConfigInput(field=field, value='<p>"Hi" & bye</p>'))

    assert output.input_html == (
        '<textarea id="body" name="body" '
        'style="visibility: hidden; position: fixed; top: -9999px">'
        '&lt;p&gt;"Hi" &amp; bye&lt;/p&gt;'
        "</textarea>"
    )


def test_editor_config_init_js(render, field, host: InMemoryHost):
    host.sites[0] = host.sites[0].model_copy(update={"name": "</script>"})

    output = render(EditorConfigInput(field=field))

    assert output.init_js.startswith("TinyMCE.init(")
    assert output.init_js.endswith(");")
    assert "</" not in output.init_js
    payload = output.init_js[len("TinyMCE.init(") : -2]
    assert json.loads(payload) == output.settings


def test_editor_config_language(host, actor, config_files, tmp_path: Path, field):
    catalog = tmp_path / "translations" / "de"
    catalog.mkdir(parents=True)
    (catalog / "tinymce.yaml").write_text(
        "Bold: Fett\nLink to an entry: Link zu einem Eintrag\n", encoding="utf-8"
    )
    translator = YamlTranslator(tmp_path / "translations")

    output = run_editor_config(
        EditorConfigInput(field=field, element=ContentItem(site_id=1), language="de-DE"),
        host=host,
        actor=actor,
        config_files=config_files,
        translator=translator,
    )

    assert output.settings["language"] == "de-DE"
    assert output.settings["translations"]["Bold"] == "Fett"
    assert output.settings["translations"]["Italic"] == "Italic"
    assert output.settings["linkOptions"][0]["optionTitle"] == "Link zu einem Eintrag"


def test_merge_editor_config_keeps_base_keys():
    merged = merge_editor_config({"skin": "craft"}, {"skin": "dark", "menubar": True})

    assert merged == {"skin": "craft", "menubar": True}
    assert merge_editor_config({"skin": "craft"}, None) == {"skin": "craft"}


@pytest.mark.parametrize(
    ("language", "expected"),
    [("en-US", "ltr"), ("ar", "rtl"), ("he-IL", "rtl"), ("fa_IR", "rtl"), ("fr", "ltr")],
)
def test_orientation(language, expected):
    assert orientation(language, PluginRules().i18n.rtl_languages) == expected


# --- Settings form ---


def test_settings_form(host, config_files, translator):
    field = FieldSettings(
        handle="body",
        tinymce_config="Simple.json",
        available_volumes=["images"],
        available_transforms="",
        default_transform="t-thumb",
    )

    output = run_settings_form(
        SettingsFormInput(field=field),
        host=host,
        config_files=config_files,
        translator=translator,
    )

    assert output.settings == {
        "tinymceConfig": "Simple.json",
        "purifierConfig": None,
        "availableVolumes": ["images"],
        "availableTransforms": "",
        "defaultTransform": "t-thumb",
        "removeEmptyTags": True,
    }
    assert output.tinymce_config_options == [
        {"label": "Default", "value": ""},
        {"label": "Simple", "value": "Simple.json"},
    ]
    assert output.purifier_config_options == [
        {"label": "Default", "value": ""},
        {"label": "Strict", "value": "Strict.json"},
    ]
    assert output.volume_options == [{"label": "Images", "value": "images"}]
    assert output.transform_options == [
        {"label": "Thumbnail", "value": "t-thumb"},
        {"label": "Wide", "value": "t-wide"},
    ]
    assert output.default_transform_options[0] == {"label": "No transform", "value": None}


def test_settings_form_language(host, config_files, translator):
    run_settings_form(
        SettingsFormInput(field=FieldSettings(handle="body"), language="de"),
        host=host,
        config_files=config_files,
        translator=translator,
    )

    assert ("app", "Default", "de") in translator.calls
    assert ("tinymce", "No transform", "de") in translator.calls


def test_display_name(translator):
    assert display_name() == "TinyMCE"
    assert display_name(translator) == "TinyMCE"


# --- Values ---


def test_serialize_removes_empty_figures(field):
    value = "<p>Hi</p><figure></figure><figure  ></figure><figure><img src=x></figure>"

    output = run_serialize(SerializeValueInput(field=field, value=value))

    assert output.value == "<p>Hi</p><figure><img src=x></figure>"


def test_serialize_is_idempotent(field):
    once = run_serialize(SerializeValueInput(field=field, value="<figure></figure><p>a</p>"))
    twice = run_serialize(SerializeValueInput(field=field, value=once.value))

    assert twice.value == once.value == "<p>a</p>"


def test_serialize_nested_empty_figures_idempotent(field):
    value = "<p>a</p><figure><figure></figure></figure><p>b</p><figure><figure></figure><figure ></figure></figure>"

    once = run_serialize(SerializeValueInput(field=field, value=value))
    twice = run_serialize(SerializeValueInput(field=field, value=once.value))

    assert once.value == "<p>a</p><p>b</p>"
    assert twice.value == once.value


def test_serialize_keeps_figures_when_disabled():
    field = FieldSettings(handle="body", remove_empty_tags=False)

    output = run_serialize(SerializeValueInput(field=field, value="<figure></figure>"))

    assert output.value == "<figure></figure>"


def test_serialize_none(field):
    assert run_serialize(SerializeValueInput(field=field, value=None)).value is None


def test_static_html():
    assert run_static_html(StaticHtmlInput(value="<p>Hi</p>")).html == (
        '<div class="text"><p>Hi</p></div>'
    )
    assert run_static_html(StaticHtmlInput(value="")).html == '<div class="text">&nbsp;</div>'
    assert run_static_html(StaticHtmlInput(value=None)).html == '<div class="text">&nbsp;</div>'


def test_run_dispatch(field):
    assert run(SerializeValueInput(field=field, value="x")) == SerializeValueOutput(value="x")
    assert run(StaticHtmlInput(value="x")) == StaticHtmlOutput(html='<div class="text">x</div>')

    with pytest.raises(ValueError, match="Unknown input type"):
        run(object())  # type: ignore[arg-type]
