"""
Options component - volume and image-transform lists.

Settings-time lists feed the field settings form; the allowed-transform
filter feeds the editor's image dialog.
"""

from __future__ import annotations

from tinymce_field.domain.selection import Selection, allows, is_enabled

from .models import (
    AllowedTransformsInput,
    AllowedTransformsOutput,
    Option,
    OptionListsInput,
    OptionListsOutput,
)
from .ports import AssetCatalogsPort, TranslatorPort

TRANSLATION_CATEGORY = "tinymce"


# --- Settings-time lists ---


def build_volume_options(catalogs: AssetCatalogsPort) -> list[Option]:
    """Volumes whose filesystem serves URLs."""
    return [
        {"label": volume.name, "value": volume.uid}
        for volume in catalogs.get_all_volumes()
        if volume.has_urls
    ]


def build_transform_options(catalogs: AssetCatalogsPort) -> list[Option]:
    return [
        {"label": transform.name, "value": transform.uid}
        for transform in catalogs.get_all_transforms()
    ]


def build_default_transform_options(
    catalogs: AssetCatalogsPort,
    translator: TranslatorPort | None = None,
) -> list[Option]:
    """Transform options preceded by a "No transform" choice with a null value."""
    label = "No transform"
    if translator is not None:
        label = translator.translate(TRANSLATION_CATEGORY, label)
    return [{"label": label, "value": None}, *build_transform_options(catalogs)]


# --- Editor-time lists ---


def filter_allowed_transforms(
    available_transforms: Selection,
    catalogs: AssetCatalogsPort,
) -> list[Option]:
    """Transforms the field allows, in catalog order."""
    if not is_enabled(available_transforms):
        return []

    return [
        {"value": transform.handle, "text": transform.name}
        for transform in catalogs.get_all_transforms()
        if allows(available_transforms, transform.uid)
    ]


def resolve_default_transform(uid: str | None, catalogs: AssetCatalogsPort) -> str:
    """Handle of the default transform, or "" when unset or deleted."""
    if not uid:
        return ""
    transform = catalogs.get_transform_by_uid(uid)
    if transform is None:
        return ""
    return transform.handle


# --- Component Entry Points ---


def run_option_lists(
    inp: OptionListsInput,
    *,
    catalogs: AssetCatalogsPort,
    translator: TranslatorPort | None = None,
) -> OptionListsOutput:
    return OptionListsOutput(
        volume_options=build_volume_options(catalogs),
        transform_options=build_transform_options(catalogs),
        default_transform_options=build_default_transform_options(catalogs, translator),
    )


def run_allowed_transforms(
    inp: AllowedTransformsInput,
    *,
    catalogs: AssetCatalogsPort,
) -> AllowedTransformsOutput:
    return AllowedTransformsOutput(
        transforms=filter_allowed_transforms(inp.available_transforms, catalogs),
        default_transform=resolve_default_transform(inp.default_transform, catalogs),
    )


def run(
    inp: OptionListsInput | AllowedTransformsInput,
    *,
    catalogs: AssetCatalogsPort,
    translator: TranslatorPort | None = None,
) -> OptionListsOutput | AllowedTransformsOutput:
    """
    Main entry point for the options component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, OptionListsInput):
        return run_option_lists(inp, catalogs=catalogs, translator=translator)
    elif isinstance(inp, AllowedTransformsInput):
        return run_allowed_transforms(inp, catalogs=catalogs)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
