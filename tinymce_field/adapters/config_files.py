"""
Filesystem config-file store.

Named editor and HTML Purifier configs live as JSON files under
``<config_dir>/<kind>/``, e.g. ``config/tinymce/Simple.json``. A field
stores only the file name; an empty name means ``Default.json``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_FILE = "Default.json"


class FileSystemConfigStore:
    """Reads named JSON config files from a base directory."""

    def __init__(self, base_path: str | Path) -> None:
        self._base = Path(base_path)

    def _dir(self, kind: str) -> Path:
        return self._base / kind

    def config_options(self, kind: str, default_label: str = "Default") -> list[dict[str, str]]:
        """
        List selectable configs for a kind.

        "Default" (empty value) comes first, followed by every other
        ``*.json`` file sorted by file name.
        """
        options = {"": default_label}
        directory = self._dir(kind)

        if directory.is_dir():
            for path in directory.glob("*.json"):
                if path.is_file() and path.name != DEFAULT_FILE:
                    options[path.name] = path.stem
        else:
            logger.debug("Config directory %s does not exist", directory)

        return [{"label": options[key], "value": key} for key in sorted(options)]

    def load_config(self, kind: str, name: str | None) -> dict[str, Any] | None:
        """
        Load a named config.

        Returns None when the file is missing or the name is unsafe.
        Raises ValueError if the file is not a JSON object.
        """
        filename = name or DEFAULT_FILE

        if Path(filename).name != filename or filename in (".", ".."):
            logger.warning("Rejected config file name %r for %s", filename, kind)
            return None

        path = self._dir(kind) / filename
        if not path.is_file():
            logger.debug("Config file %s not found", path)
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        return data
