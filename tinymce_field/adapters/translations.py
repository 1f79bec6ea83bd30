"""
YAML message catalogs.

Catalogs live at ``<translations_dir>/<language>/<category>.yaml`` as flat
source -> translation mappings. Lookups fall back from ``de-CH`` to ``de``
and finally to the source message.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class YamlTranslator:
    """Static translation lookup backed by YAML files."""

    def __init__(self, base_path: str | Path, language: str = "en-US") -> None:
        self._base = Path(base_path)
        self.language = language
        self._catalogs: dict[tuple[str, str], dict[str, str]] = {}

    def with_language(self, language: str) -> YamlTranslator:
        translator = YamlTranslator(self._base, language)
        translator._catalogs = self._catalogs
        return translator

    def _catalog(self, language: str, category: str) -> dict[str, str]:
        key = (language, category)
        if key not in self._catalogs:
            self._catalogs[key] = self._load(language, category)
        return self._catalogs[key]

    def _load(self, language: str, category: str) -> dict[str, str]:
        path = self._base / language / f"{category}.yaml"
        if not path.is_file():
            return {}

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in translation file {path}: {e}") from e

        if not isinstance(data, dict):
            logger.warning("Ignoring translation file %s: not a mapping", path)
            return {}

        logger.debug("Loaded %d messages from %s", len(data), path)
        return {str(k): str(v) for k, v in data.items()}

    def translate(self, category: str, message: str, language: str | None = None) -> str:
        language = language or self.language
        candidates = [language]
        primary = language.split("-")[0]
        if primary != language:
            candidates.append(primary)

        for candidate in candidates:
            translated = self._catalog(candidate, category).get(message)
            if translated:
                return translated

        return message
