"""
Link-sources component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tinymce_field.domain.entities import ContentItem
from tinymce_field.domain.selection import AllSelected, Selection

# --- Element kinds ---


@dataclass(frozen=True)
class ElementKind:
    """A linkable element type as the editor's link dialog knows it."""

    element_type: str
    ref_handle: str
    option_title: str


ENTRY = ElementKind("Entry", "entry", "Link to an entry")
CATEGORY = ElementKind("Category", "category", "Link to a category")
ASSET = ElementKind("Asset", "asset", "Link to an asset")
PRODUCT = ElementKind("Product", "product", "Link to a product")
VARIANT = ElementKind("Variant", "variant", "Link to a variant")


# --- Descriptor ---


@dataclass(frozen=True)
class SourceDescriptor:
    """One entry of the editor's link menu."""

    option_title: str
    element_type: str
    ref_handle: str
    sources: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "optionTitle": self.option_title,
            "elementType": self.element_type,
            "refHandle": self.ref_handle,
            "sources": list(self.sources),
        }


# --- Input / Output ---


@dataclass(frozen=True)
class ResolveLinkSourcesInput:
    """Input for resolving link sources."""

    current_item: ContentItem | None = None
    available_volumes: Selection = field(default_factory=AllSelected)


@dataclass(frozen=True)
class ResolveLinkSourcesOutput:
    """Output of link-source resolution."""

    descriptors: list[SourceDescriptor] = field(default_factory=list)
    volume_keys: list[str] = field(default_factory=list)

    def to_list(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in self.descriptors]
