"""
Field component - the TinyMCE field type.

Turns field settings and host state into the editor's client init object,
the data for the field settings form, and the stored form of a value.

Editor init object keys (consumed by the browser widget verbatim):
id, linkOptions, volumes, editorConfig, transforms, defaultTransform,
elementSiteId, allSites, direction, language, translations
"""

from __future__ import annotations

import html
import json
from typing import Any

from tinymce_field.components.link_sources import (
    ResolveLinkSourcesInput,
    run_resolve,
)
from tinymce_field.components.options import (
    build_default_transform_options,
    build_transform_options,
    build_volume_options,
    filter_allowed_transforms,
    resolve_default_transform,
)
from tinymce_field.domain.entities import ContentItem, Direction, Site
from tinymce_field.domain.html import (
    escape_text,
    html_id,
    namespace_id,
    remove_empty_figures,
)
from tinymce_field.domain.selection import selection_to_setting
from tinymce_field.rules.models import PluginRules

from .models import (
    TRANSLATABLE_MESSAGES,
    EditorConfigInput,
    EditorConfigOutput,
    SerializeValueInput,
    SerializeValueOutput,
    SettingsFormInput,
    SettingsFormOutput,
    StaticHtmlInput,
    StaticHtmlOutput,
)
from .ports import ActorPort, ConfigFilesPort, FieldHostPort, TranslatorPort

TRANSLATION_CATEGORY = "tinymce"
EDITOR_CONFIG_KIND = "tinymce"
PURIFIER_CONFIG_KIND = "htmlpurifier"

_TEXTAREA_STYLE = "visibility: hidden; position: fixed; top: -9999px"


class _LanguageTranslator:
    """Pins a translator to one language."""

    def __init__(self, translator: TranslatorPort, language: str) -> None:
        self._translator = translator
        self._language = language

    def translate(self, category: str, message: str, language: str | None = None) -> str:
        return self._translator.translate(category, message, language or self._language)


def display_name(translator: TranslatorPort | None = None) -> str:
    if translator is None:
        return "TinyMCE"
    return translator.translate(TRANSLATION_CATEGORY, "TinyMCE")


# --- Helpers ---


def load_translations(translator: TranslatorPort, language: str) -> dict[str, str]:
    """Editor UI labels in the active language."""
    return {
        message: translator.translate(TRANSLATION_CATEGORY, message, language)
        for message in TRANSLATABLE_MESSAGES
    }


def site_options(sites: list[Site]) -> list[dict[str, str]]:
    return [{"value": str(site.id), "text": site.name} for site in sites]


def orientation(language: str, rtl_languages: list[str]) -> Direction:
    primary = language.replace("_", "-").split("-")[0].lower()
    return "rtl" if primary in rtl_languages else "ltr"


def _element_site(element: ContentItem | None, host: FieldHostPort) -> Site:
    if element is not None:
        site = host.get_site_by_id(element.site_id)
        if site is not None:
            return site
    return host.get_current_site()


def merge_editor_config(base: dict[str, Any], named: dict[str, Any] | None) -> dict[str, Any]:
    """Base options win over the named config file."""
    merged = dict(base)
    for key, value in (named or {}).items():
        merged.setdefault(key, value)
    return merged


def input_html(input_id: str, name: str, value: str | None) -> str:
    return "".join(
        [
            f'<textarea id="{html.escape(input_id)}" name="{html.escape(name)}" '
            f'style="{_TEXTAREA_STYLE}">',
            escape_text(value or ""),
            "</textarea>",
        ]
    )


def init_js(settings: dict[str, Any]) -> str:
    # "<" escaped so the JSON can't close the surrounding <script> tag.
    encoded = json.dumps(settings, ensure_ascii=False).replace("<", "\\u003c")
    return f"TinyMCE.init({encoded});"


# --- Component Entry Points ---


def run_editor_config(
    inp: EditorConfigInput,
    *,
    host: FieldHostPort,
    actor: ActorPort,
    config_files: ConfigFilesPort,
    translator: TranslatorPort,
    rules: PluginRules | None = None,
) -> EditorConfigOutput:
    """
    Build everything needed to render the editor for one field.

    Args:
        inp: Field settings, the element being edited (or None), its value,
            the active language and an optional input namespace.
        host: Host catalogs, sites and plugins.
        actor: Current user, for volume permissions.
        config_files: Named editor config files.
        translator: Static message translation.
        rules: Plugin configuration; defaults apply when omitted.

    Returns:
        EditorConfigOutput with the client init object and page snippets.

    Raises:
        ValueError: If the named editor config file is not valid JSON.
    """
    rules = rules or PluginRules()
    field = inp.field
    language = inp.language or rules.i18n.default_language
    bound = _LanguageTranslator(translator, language)

    input_id = namespace_id(html_id(field.handle), inp.namespace)
    element_site = _element_site(inp.element, host)
    element_site_id = inp.element.site_id if inp.element is not None else element_site.id

    links = run_resolve(
        ResolveLinkSourcesInput(
            current_item=inp.element,
            available_volumes=field.volume_selection(),
        ),
        catalogs=host,
        sites=host,
        actor=actor,
        plugins=host,
        translator=bound,
        commerce_handle=rules.commerce.plugin_handle,
    )

    editor_config = merge_editor_config(
        {"skin": rules.editor.skin()},
        config_files.load_config(EDITOR_CONFIG_KIND, field.tinymce_config),
    )

    settings: dict[str, Any] = {
        "id": input_id,
        "linkOptions": links.to_list(),
        "volumes": links.volume_keys,
        "editorConfig": editor_config,
        "transforms": filter_allowed_transforms(field.transform_selection(), host),
        "defaultTransform": resolve_default_transform(field.default_transform, host),
        "elementSiteId": str(element_site_id),
        "allSites": site_options(host.get_all_sites()),
        "direction": orientation(element_site.language, rules.i18n.rtl_languages),
        "language": language,
        "translations": load_translations(translator, language),
    }

    name = f"{inp.namespace}[{field.handle}]" if inp.namespace else field.handle

    return EditorConfigOutput(
        settings=settings,
        script_url=rules.editor.script_url(),
        input_html=input_html(input_id, name, inp.value),
        init_js=init_js(settings),
    )


def run_settings_form(
    inp: SettingsFormInput,
    *,
    host: FieldHostPort,
    config_files: ConfigFilesPort,
    translator: TranslatorPort,
) -> SettingsFormOutput:
    """Data for the field settings form."""
    field = inp.field
    bound: TranslatorPort = (
        _LanguageTranslator(translator, inp.language) if inp.language else translator
    )
    default_label = bound.translate("app", "Default")

    return SettingsFormOutput(
        settings={
            "tinymceConfig": field.tinymce_config,
            "purifierConfig": field.purifier_config,
            "availableVolumes": selection_to_setting(field.volume_selection()),
            "availableTransforms": selection_to_setting(field.transform_selection()),
            "defaultTransform": field.default_transform,
            "removeEmptyTags": field.remove_empty_tags,
        },
        tinymce_config_options=config_files.config_options(EDITOR_CONFIG_KIND, default_label),
        purifier_config_options=config_files.config_options(PURIFIER_CONFIG_KIND, default_label),
        volume_options=build_volume_options(host),
        transform_options=build_transform_options(host),
        default_transform_options=build_default_transform_options(host, bound),
    )


def run_serialize(inp: SerializeValueInput) -> SerializeValueOutput:
    """
    Prepare a value for storage.

    Empty figures are removed when the field removes empty tags; applying
    this twice gives the same result as applying it once.
    """
    value = inp.value
    if value is not None and inp.field.remove_empty_tags:
        value = remove_empty_figures(value)
    return SerializeValueOutput(value=value)


def run_static_html(inp: StaticHtmlInput) -> StaticHtmlOutput:
    """Read-only rendering of a value."""
    return StaticHtmlOutput(html=f'<div class="text">{inp.value or "&nbsp;"}</div>')


def run(
    inp: SerializeValueInput | StaticHtmlInput,
) -> SerializeValueOutput | StaticHtmlOutput:
    """
    Entry point for the host-independent field operations.

    Editor and settings-form rendering need host ports and are called
    through run_editor_config and run_settings_form directly.
    """
    if isinstance(inp, SerializeValueInput):
        return run_serialize(inp)
    elif isinstance(inp, StaticHtmlInput):
        return run_static_html(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
