"""
Field component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tinymce_field.domain.entities import ContentItem, FieldSettings

# Labels the editor UI shows, translated into the active language.
TRANSLATABLE_MESSAGES: tuple[str, ...] = (
    "Undo",
    "Redo",
    "Blocks",
    "Paragraph",
    "Heading 1",
    "Heading 2",
    "Heading 3",
    "Heading 4",
    "Heading 5",
    "Heading 6",
    "Preformatted",
    "Bold",
    "Italic",
    "Strikethrough",
    "Bullet list",
    "Numbered list",
    "Horizontal line",
    "Source code",
)


# --- Editor ---


@dataclass(frozen=True)
class EditorConfigInput:
    """Input for rendering the editor for one field."""

    field: FieldSettings
    element: ContentItem | None = None
    value: str | None = None
    language: str | None = None
    namespace: str | None = None


@dataclass(frozen=True)
class EditorConfigOutput:
    """Client init object plus what the page needs to boot the editor."""

    settings: dict[str, Any]
    script_url: str
    input_html: str
    init_js: str


# --- Settings form ---


@dataclass(frozen=True)
class SettingsFormInput:
    field: FieldSettings
    language: str | None = None


@dataclass(frozen=True)
class SettingsFormOutput:
    settings: dict[str, Any]
    tinymce_config_options: list[dict[str, Any]] = field(default_factory=list)
    purifier_config_options: list[dict[str, Any]] = field(default_factory=list)
    volume_options: list[dict[str, Any]] = field(default_factory=list)
    transform_options: list[dict[str, Any]] = field(default_factory=list)
    default_transform_options: list[dict[str, Any]] = field(default_factory=list)


# --- Values ---


@dataclass(frozen=True)
class SerializeValueInput:
    """Input for preparing a value for storage."""

    field: FieldSettings
    value: str | None


@dataclass(frozen=True)
class SerializeValueOutput:
    value: str | None


@dataclass(frozen=True)
class StaticHtmlInput:
    """Input for the read-only rendering of a value."""

    value: str | None


@dataclass(frozen=True)
class StaticHtmlOutput:
    html: str
