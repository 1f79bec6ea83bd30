"""
Field component - the TinyMCE field type.
"""

from .component import (
    EDITOR_CONFIG_KIND,
    PURIFIER_CONFIG_KIND,
    display_name,
    load_translations,
    merge_editor_config,
    orientation,
    run,
    run_editor_config,
    run_serialize,
    run_settings_form,
    run_static_html,
)
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

__all__ = [
    # Entry points
    "run",
    "run_editor_config",
    "run_settings_form",
    "run_serialize",
    "run_static_html",
    # Helpers
    "display_name",
    "load_translations",
    "merge_editor_config",
    "orientation",
    # Constants
    "EDITOR_CONFIG_KIND",
    "PURIFIER_CONFIG_KIND",
    "TRANSLATABLE_MESSAGES",
    # Models
    "EditorConfigInput",
    "EditorConfigOutput",
    "SettingsFormInput",
    "SettingsFormOutput",
    "SerializeValueInput",
    "SerializeValueOutput",
    "StaticHtmlInput",
    "StaticHtmlOutput",
    # Ports
    "FieldHostPort",
    "ConfigFilesPort",
    "ActorPort",
    "TranslatorPort",
]
