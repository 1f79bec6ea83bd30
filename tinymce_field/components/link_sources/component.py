"""
Link-sources component - builds the editor's "insert link" menu.

For each linkable element kind the host offers (entries, categories, assets,
commerce products and variants) this works out which sources the link dialog
may browse, scoped by per-site URL settings, field settings and the actor's
volume permissions.

Invariants:
- Section sources start with "*" when any section token was added,
  followed by "singles" when a single section exists. Singles alone give
  ["singles"], not the ["*", "singles"] older versions of the field sent
- A descriptor is only emitted when its source list is non-empty
- Volume permissions are checked on every call
"""

from __future__ import annotations

from collections.abc import Iterable

from tinymce_field.domain.entities import CategoryGroup, ContentItem, ProductType
from tinymce_field.domain.selection import Selection, allows, is_enabled

from .models import (
    ASSET,
    CATEGORY,
    ENTRY,
    PRODUCT,
    VARIANT,
    ElementKind,
    ResolveLinkSourcesInput,
    ResolveLinkSourcesOutput,
    SourceDescriptor,
)
from .ports import (
    ActorPort,
    LinkCatalogsPort,
    PluginsPort,
    SitesPort,
    TranslatorPort,
)

COMMERCE_HANDLE = "commerce"
TRANSLATION_CATEGORY = "tinymce"


# --- Source builders ---


def get_section_sources(
    current_item: ContentItem | None,
    *,
    catalogs: LinkCatalogsPort,
    sites: SitesPort,
) -> list[str]:
    """
    Entry sources.

    Singles are represented only by the aggregate "singles" token. Other
    sections are checked against every site, so a section with URLs in two
    sites contributes its token twice.
    """
    sources: list[str] = []
    show_singles = False
    all_sites = sites.get_all_sites()

    for section in catalogs.get_all_sections():
        if section.type == "single":
            show_singles = True
        elif current_item is not None:
            for site in all_sites:
                settings = section.site_settings.get(site.id)
                if settings is not None and settings.has_urls:
                    sources.append(f"section:{section.uid}")

    prefix: list[str] = []
    if sources:
        prefix.append("*")
    if show_singles:
        prefix.append("singles")

    return prefix + sources


def _site_scoped_sources(
    current_item: ContentItem | None,
    types: Iterable[CategoryGroup | ProductType],
    prefix: str,
) -> list[str]:
    sources: list[str] = []

    if current_item is None:
        return sources

    for type_ in types:
        settings = type_.site_settings.get(current_item.site_id)
        if settings is not None and settings.has_urls:
            sources.append(f"{prefix}:{type_.uid}")

    return sources


def get_category_sources(
    current_item: ContentItem | None,
    *,
    catalogs: LinkCatalogsPort,
) -> list[str]:
    """Category group sources for the current item's site."""
    return _site_scoped_sources(current_item, catalogs.get_all_category_groups(), "group")


def get_product_sources(
    current_item: ContentItem | None,
    *,
    catalogs: LinkCatalogsPort,
) -> list[str]:
    """Product type sources for the current item's site."""
    return _site_scoped_sources(current_item, catalogs.get_all_product_types(), "productType")


def get_volume_keys(
    available_volumes: Selection,
    *,
    catalogs: LinkCatalogsPort,
    actor: ActorPort,
) -> list[str]:
    """Volumes allowed by the field settings that the actor may view."""
    if not is_enabled(available_volumes):
        return []

    keys: list[str] = []
    for volume in catalogs.get_all_volumes():
        if allows(available_volumes, volume.uid) and actor.check_permission(
            f"viewAssets:{volume.uid}"
        ):
            keys.append(f"volume:{volume.uid}")

    return keys


def commerce_available(plugins: PluginsPort, handle: str = COMMERCE_HANDLE) -> bool:
    return plugins.is_plugin_installed(handle) and plugins.is_plugin_enabled(handle)


def _descriptor(
    kind: ElementKind,
    sources: list[str],
    translator: TranslatorPort | None,
) -> SourceDescriptor:
    title = kind.option_title
    if translator is not None:
        title = translator.translate(TRANSLATION_CATEGORY, title)
    return SourceDescriptor(
        option_title=title,
        element_type=kind.element_type,
        ref_handle=kind.ref_handle,
        sources=sources,
    )


# --- Component Entry Points ---


def run_resolve(
    inp: ResolveLinkSourcesInput,
    *,
    catalogs: LinkCatalogsPort,
    sites: SitesPort,
    actor: ActorPort,
    plugins: PluginsPort,
    translator: TranslatorPort | None = None,
    commerce_handle: str = COMMERCE_HANDLE,
) -> ResolveLinkSourcesOutput:
    """
    Resolve the link menu for the editor.

    Args:
        inp: Current item (or None) and the field's volume selection.
        catalogs: Host catalogs of sections, groups, product types and volumes.
        sites: Host site list.
        actor: The user, for volume permissions.
        plugins: Plugin registry, to detect commerce.
        translator: Optional translator for option titles.
        commerce_handle: Handle of the commerce plugin.

    Returns:
        ResolveLinkSourcesOutput with descriptors in entry, category, asset,
        product, variant order.
    """
    item = inp.current_item
    descriptors: list[SourceDescriptor] = []

    section_sources = get_section_sources(item, catalogs=catalogs, sites=sites)
    category_sources = get_category_sources(item, catalogs=catalogs)
    volume_keys = get_volume_keys(inp.available_volumes, catalogs=catalogs, actor=actor)

    if section_sources:
        descriptors.append(_descriptor(ENTRY, section_sources, translator))

    if category_sources:
        descriptors.append(_descriptor(CATEGORY, category_sources, translator))

    if volume_keys:
        descriptors.append(_descriptor(ASSET, volume_keys, translator))

    if commerce_available(plugins, commerce_handle):
        product_sources = get_product_sources(item, catalogs=catalogs)

        if product_sources:
            descriptors.append(_descriptor(PRODUCT, product_sources, translator))
            descriptors.append(_descriptor(VARIANT, list(product_sources), translator))

    return ResolveLinkSourcesOutput(descriptors=descriptors, volume_keys=volume_keys)


def run(
    inp: ResolveLinkSourcesInput,
    *,
    catalogs: LinkCatalogsPort,
    sites: SitesPort,
    actor: ActorPort,
    plugins: PluginsPort,
    translator: TranslatorPort | None = None,
    commerce_handle: str = COMMERCE_HANDLE,
) -> ResolveLinkSourcesOutput:
    """Main entry point for the link-sources component."""
    if isinstance(inp, ResolveLinkSourcesInput):
        return run_resolve(
            inp,
            catalogs=catalogs,
            sites=sites,
            actor=actor,
            plugins=plugins,
            translator=translator,
            commerce_handle=commerce_handle,
        )
    raise ValueError(f"Unknown input type: {type(inp)}")
