"""
Options component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from tinymce_field.domain.entities import ImageTransform, Volume


class AssetCatalogsPort(Protocol):
    """Read-only view over volumes and image transforms."""

    def get_all_volumes(self) -> list[Volume]:
        ...

    def get_all_transforms(self) -> list[ImageTransform]:
        ...

    def get_transform_by_uid(self, uid: str) -> ImageTransform | None:
        """Get a transform by uid, or None when it no longer exists."""
        ...


class TranslatorPort(Protocol):
    def translate(self, category: str, message: str, language: str | None = None) -> str:
        ...
