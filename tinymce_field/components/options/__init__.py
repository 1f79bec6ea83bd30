"""
Options component - volume and image-transform option lists.
"""

from .component import (
    build_default_transform_options,
    build_transform_options,
    build_volume_options,
    filter_allowed_transforms,
    resolve_default_transform,
    run,
    run_allowed_transforms,
    run_option_lists,
)
from .models import (
    AllowedTransformsInput,
    AllowedTransformsOutput,
    Option,
    OptionListsInput,
    OptionListsOutput,
)
from .ports import AssetCatalogsPort

__all__ = [
    # Entry points
    "run",
    "run_option_lists",
    "run_allowed_transforms",
    # Builders
    "build_volume_options",
    "build_transform_options",
    "build_default_transform_options",
    "filter_allowed_transforms",
    "resolve_default_transform",
    # Models
    "Option",
    "OptionListsInput",
    "OptionListsOutput",
    "AllowedTransformsInput",
    "AllowedTransformsOutput",
    # Ports
    "AssetCatalogsPort",
]
