from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from tinymce_field.domain.selection import Selection, parse_selection

# --- Enums / Literals ---
SectionKind = Literal["single", "multi"]
Direction = Literal["ltr", "rtl"]
SelectionSetting = str | list[str] | None

# --- Sites ---

class Site(BaseModel):
    id: int
    uid: str = ""
    name: str
    language: str = "en-US"
    enabled: bool = True

class SiteSettings(BaseModel):
    """Per-site settings of a section, category group or product type."""

    site_id: int
    has_urls: bool = False

# --- Linkable catalogs ---

class Section(BaseModel):
    id: int
    uid: str
    name: str
    type: SectionKind = "multi"
    site_settings: dict[int, SiteSettings] = Field(default_factory=dict)

class CategoryGroup(BaseModel):
    id: int
    uid: str
    name: str
    site_settings: dict[int, SiteSettings] = Field(default_factory=dict)

class ProductType(BaseModel):
    id: int
    uid: str
    name: str
    site_settings: dict[int, SiteSettings] = Field(default_factory=dict)

# --- Assets ---

class Volume(BaseModel):
    id: int
    uid: str
    name: str
    has_urls: bool = False  # filesystem serves public URLs

class ImageTransform(BaseModel):
    id: int
    uid: str
    name: str
    handle: str

# --- Content ---

class ContentItem(BaseModel):
    """The element whose field is being edited."""

    id: int | None = None
    site_id: int
    title: str | None = None

# --- Field ---

class FieldSettings(BaseModel):
    handle: str
    tinymce_config: str | None = None
    available_volumes: SelectionSetting = "*"
    available_transforms: SelectionSetting = "*"
    default_transform: str = ""

    # HTML field behaviour
    purifier_config: str | None = None
    remove_empty_tags: bool = True

    @field_validator("available_volumes", "available_transforms")
    @classmethod
    def _check_selection(cls, value: Any) -> Any:
        if isinstance(value, str) and value not in ("*", ""):
            raise ValueError("must be '*', a list of uids, or empty")
        return value

    def volume_selection(self) -> Selection:
        return parse_selection(self.available_volumes)

    def transform_selection(self) -> Selection:
        return parse_selection(self.available_transforms)
