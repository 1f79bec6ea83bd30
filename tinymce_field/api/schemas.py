"""
Request/response models for the field API.

The host posts a snapshot of the catalogs it would otherwise be called
back for; the snapshot is served to the components through the in-memory
adapters.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from tinymce_field.adapters.memory import InMemoryHost, PermissionSetActor, PluginState
from tinymce_field.domain.entities import (
    CategoryGroup,
    ContentItem,
    FieldSettings,
    ImageTransform,
    ProductType,
    Section,
    Site,
    Volume,
)

# --- Host snapshot ---


class PluginStateModel(BaseModel):
    installed: bool = False
    enabled: bool = False


class HostSnapshot(BaseModel):
    """Host state for one request."""

    sites: list[Site] = Field(min_length=1)
    current_site_id: int | None = None
    sections: list[Section] = Field(default_factory=list)
    category_groups: list[CategoryGroup] = Field(default_factory=list)
    product_types: list[ProductType] = Field(default_factory=list)
    volumes: list[Volume] = Field(default_factory=list)
    transforms: list[ImageTransform] = Field(default_factory=list)
    plugins: dict[str, PluginStateModel] = Field(default_factory=dict)

    # Actor
    permissions: list[str] = Field(default_factory=list)
    admin: bool = False

    def to_host(self) -> InMemoryHost:
        return InMemoryHost(
            sites=self.sites,
            current_site_id=self.current_site_id,
            sections=self.sections,
            category_groups=self.category_groups,
            product_types=self.product_types,
            volumes=self.volumes,
            transforms=self.transforms,
            plugins={
                handle: PluginState(installed=state.installed, enabled=state.enabled)
                for handle, state in self.plugins.items()
            },
        )

    def to_actor(self) -> PermissionSetActor:
        return PermissionSetActor(self.permissions, admin=self.admin)


# --- Requests ---


class EditorConfigRequest(BaseModel):
    field: FieldSettings
    host: HostSnapshot
    element: ContentItem | None = None
    value: str | None = None
    language: str | None = None
    namespace: str | None = None

    @model_validator(mode="after")
    def _check_element_site(self) -> "EditorConfigRequest":
        if self.element is not None and all(
            site.id != self.element.site_id for site in self.host.sites
        ):
            raise ValueError(f"Unknown element site: {self.element.site_id}")
        return self


class SettingsFormRequest(BaseModel):
    field: FieldSettings
    host: HostSnapshot
    language: str | None = None


class SerializeRequest(BaseModel):
    field: FieldSettings
    value: str | None = None


class StaticHtmlRequest(BaseModel):
    value: str | None = None


# --- Responses ---


class EditorConfigResponse(BaseModel):
    settings: dict[str, Any]
    script_url: str
    input_html: str
    init_js: str


class SettingsFormResponse(BaseModel):
    display_name: str
    settings: dict[str, Any]
    tinymce_config_options: list[dict[str, Any]]
    purifier_config_options: list[dict[str, Any]]
    volume_options: list[dict[str, Any]]
    transform_options: list[dict[str, Any]]
    default_transform_options: list[dict[str, Any]]


class SerializeResponse(BaseModel):
    value: str | None


class StaticHtmlResponse(BaseModel):
    html: str
