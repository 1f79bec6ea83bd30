"""
Field component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol

from tinymce_field.components.link_sources.ports import (
    ActorPort,
    LinkCatalogsPort,
    PluginsPort,
    TranslatorPort,
)
from tinymce_field.components.options.ports import AssetCatalogsPort
from tinymce_field.domain.entities import Site


class FieldHostPort(LinkCatalogsPort, AssetCatalogsPort, PluginsPort, Protocol):
    """Everything the field reads from the host CMS."""

    def get_all_sites(self) -> list[Site]:
        """Get all enabled sites."""
        ...

    def get_site_by_id(self, site_id: int) -> Site | None:
        ...

    def get_current_site(self) -> Site:
        """Get the site of the current request."""
        ...


class ConfigFilesPort(Protocol):
    """Named JSON config files (editor and HTML Purifier)."""

    def config_options(self, kind: str, default_label: str = "Default") -> list[dict[str, str]]:
        ...

    def load_config(self, kind: str, name: str | None) -> dict[str, Any] | None:
        ...


__all__ = [
    "ActorPort",
    "ConfigFilesPort",
    "FieldHostPort",
    "TranslatorPort",
]
