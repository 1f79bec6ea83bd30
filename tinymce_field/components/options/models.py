"""
Options component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tinymce_field.domain.selection import AllSelected, Selection

# Settings-time options are {label, value}; editor-time transforms are {value, text}.
Option = dict[str, Any]


@dataclass(frozen=True)
class OptionListsInput:
    """Input for building the settings form dropdowns."""

    pass


@dataclass(frozen=True)
class OptionListsOutput:
    volume_options: list[Option] = field(default_factory=list)
    transform_options: list[Option] = field(default_factory=list)
    default_transform_options: list[Option] = field(default_factory=list)


@dataclass(frozen=True)
class AllowedTransformsInput:
    """Input for filtering transforms by the field's selection."""

    available_transforms: Selection = field(default_factory=AllSelected)
    default_transform: str = ""


@dataclass(frozen=True)
class AllowedTransformsOutput:
    transforms: list[Option] = field(default_factory=list)
    default_transform: str = ""
