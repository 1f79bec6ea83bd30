"""
In-memory host adapters.

A host that cannot be called back into posts a snapshot of its catalogs;
these adapters serve the component ports from that snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from tinymce_field.domain.entities import (
    CategoryGroup,
    ImageTransform,
    ProductType,
    Section,
    Site,
    Volume,
)


@dataclass
class PluginState:
    installed: bool = False
    enabled: bool = False


@dataclass
class InMemoryHost:
    """Catalogs, sites and plugins from a snapshot."""

    sites: list[Site] = field(default_factory=list)
    current_site_id: int | None = None
    sections: list[Section] = field(default_factory=list)
    category_groups: list[CategoryGroup] = field(default_factory=list)
    product_types: list[ProductType] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    transforms: list[ImageTransform] = field(default_factory=list)
    plugins: dict[str, PluginState] = field(default_factory=dict)

    # --- Catalogs ---

    def get_all_sections(self) -> list[Section]:
        return list(self.sections)

    def get_all_category_groups(self) -> list[CategoryGroup]:
        return list(self.category_groups)

    def get_all_product_types(self) -> list[ProductType]:
        return list(self.product_types)

    def get_all_volumes(self) -> list[Volume]:
        return list(self.volumes)

    def get_all_transforms(self) -> list[ImageTransform]:
        return list(self.transforms)

    def get_transform_by_uid(self, uid: str) -> ImageTransform | None:
        for transform in self.transforms:
            if transform.uid == uid:
                return transform
        return None

    # --- Sites ---

    def get_all_sites(self) -> list[Site]:
        return [site for site in self.sites if site.enabled]

    def get_site_by_id(self, site_id: int) -> Site | None:
        for site in self.sites:
            if site.id == site_id:
                return site
        return None

    def get_current_site(self) -> Site:
        """The request's site; the first site when none is set."""
        if self.current_site_id is not None:
            site = self.get_site_by_id(self.current_site_id)
            if site is not None:
                return site
        if not self.sites:
            raise ValueError("Host snapshot has no sites")
        return self.sites[0]

    # --- Plugins ---

    def is_plugin_installed(self, handle: str) -> bool:
        state = self.plugins.get(handle)
        return state is not None and state.installed

    def is_plugin_enabled(self, handle: str) -> bool:
        state = self.plugins.get(handle)
        return state is not None and state.enabled


class PermissionSetActor:
    """Actor whose permissions are a fixed set of names."""

    def __init__(self, permissions: Iterable[str] = (), *, admin: bool = False) -> None:
        self._permissions = frozenset(permissions)
        self._admin = admin

    def check_permission(self, permission: str) -> bool:
        return self._admin or permission in self._permissions
