"""
Link-sources component - the editor's "insert link" menu.
"""

from .component import (
    COMMERCE_HANDLE,
    commerce_available,
    get_category_sources,
    get_product_sources,
    get_section_sources,
    get_volume_keys,
    run,
    run_resolve,
)
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

__all__ = [
    # Entry points
    "run",
    "run_resolve",
    # Source builders
    "get_section_sources",
    "get_category_sources",
    "get_product_sources",
    "get_volume_keys",
    "commerce_available",
    "COMMERCE_HANDLE",
    # Models
    "ElementKind",
    "SourceDescriptor",
    "ResolveLinkSourcesInput",
    "ResolveLinkSourcesOutput",
    "ENTRY",
    "CATEGORY",
    "ASSET",
    "PRODUCT",
    "VARIANT",
    # Ports
    "LinkCatalogsPort",
    "SitesPort",
    "ActorPort",
    "PluginsPort",
    "TranslatorPort",
]
