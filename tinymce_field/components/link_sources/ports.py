"""
Link-sources component port definitions.

The host CMS provides these; the component never reaches for globals.
"""

from __future__ import annotations

from typing import Protocol

from tinymce_field.domain.entities import (
    CategoryGroup,
    ProductType,
    Section,
    Site,
    Volume,
)


class LinkCatalogsPort(Protocol):
    """Read-only view over the host's linkable catalogs."""

    def get_all_sections(self) -> list[Section]:
        """Get every section, singles included."""
        ...

    def get_all_category_groups(self) -> list[CategoryGroup]:
        """Get every category group."""
        ...

    def get_all_product_types(self) -> list[ProductType]:
        """Get every commerce product type."""
        ...

    def get_all_volumes(self) -> list[Volume]:
        """Get every asset volume."""
        ...


class SitesPort(Protocol):
    """Port for the host's site list."""

    def get_all_sites(self) -> list[Site]:
        """Get all enabled sites."""
        ...


class ActorPort(Protocol):
    """The user the editor is being rendered for."""

    def check_permission(self, permission: str) -> bool:
        """Check whether the actor holds a permission, e.g. viewAssets:<uid>."""
        ...


class PluginsPort(Protocol):
    """Port for the host's plugin registry."""

    def is_plugin_installed(self, handle: str) -> bool:
        ...

    def is_plugin_enabled(self, handle: str) -> bool:
        ...


class TranslatorPort(Protocol):
    """Static message translation."""

    def translate(self, category: str, message: str, language: str | None = None) -> str:
        """Translate a source message, returning it unchanged when unknown."""
        ...
