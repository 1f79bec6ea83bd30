import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from tinymce_field.adapters.config_files import FileSystemConfigStore
from tinymce_field.adapters.translations import YamlTranslator
from tinymce_field.rules.loader import load_rules
from tinymce_field.rules.models import PluginRules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir or Path(os.environ.get("TINYMCE_FIELD_HOME", os.getcwd()))
        rules_path = os.environ.get("TINYMCE_RULES_PATH")
        self.rules_path = Path(rules_path) if rules_path else self.base_dir / "tinymce.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules(path: Path) -> PluginRules:
    if not path.exists():
        logger.warning("No plugin config at %s, using defaults", path)
        return PluginRules()
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> PluginRules:
    return _load_rules(settings.rules_path)


# --- Adapters ---
def get_config_store(
    settings: Settings = Depends(get_settings),
    rules: PluginRules = Depends(get_rules),
) -> FileSystemConfigStore:
    return FileSystemConfigStore(base_path=settings.base_dir / rules.paths.config_dir)


def get_translator(
    settings: Settings = Depends(get_settings),
    rules: PluginRules = Depends(get_rules),
) -> YamlTranslator:
    return YamlTranslator(
        base_path=settings.base_dir / rules.paths.translations_dir,
        language=rules.i18n.default_language,
    )
