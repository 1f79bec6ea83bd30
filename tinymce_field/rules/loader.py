from pathlib import Path

import yaml
from pydantic import ValidationError

from tinymce_field.rules.models import PluginRules


def load_rules(path: Path) -> PluginRules:
    """
    Load and validate the plugin configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or its schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Plugin config not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in plugin config: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return PluginRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Plugin config validation failed:\n{e}") from e
