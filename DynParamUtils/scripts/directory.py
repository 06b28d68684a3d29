"""Script registry reading scripts from a directory.

Every ``*.py`` file in the directory is a script whose id is its file name.
An optional ``catalog.yaml`` next to the scripts adds display names,
comments and default parameters::

    list_branches.py:
      name: List branches
      comment: Branches of the main repository
      parameters:
        remote_name: origin
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Set

import yaml

from ..exceptions import ConfigError
from .base import Script, ScriptRegistry

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "catalog.yaml"
SCRIPT_SUFFIX = ".py"


class DirectoryScriptRegistry(ScriptRegistry):
    """Resolve scripts from files on disk; nothing is cached."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def _load_catalog(self) -> Dict[str, dict]:
        path = self.directory / CATALOG_FILENAME
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                catalog = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to read script catalog {path}: {exc}") from exc
        if not isinstance(catalog, dict):
            raise ConfigError(f"Script catalog {path} must be a mapping of script ids")
        return catalog

    def _build(self, path: Path, entry: Optional[dict]) -> Script:
        entry = entry or {}
        params = entry.get("parameters") or {}
        if not isinstance(params, dict):
            raise ConfigError(f"Catalog parameters for {path.name} must be a mapping")
        return Script(
            id=path.name,
            name=entry.get("name") or path.stem,
            source=path.read_text(encoding="utf-8"),
            comment=entry.get("comment") or "",
            parameters=tuple(params.items()),
        )

    def resolve(self, script_id: str) -> Optional[Script]:
        # Ids are bare file names; anything that could escape the directory is unknown
        if not script_id or Path(script_id).name != script_id:
            return None
        path = self.directory / script_id
        if path.suffix != SCRIPT_SUFFIX or not path.is_file():
            logger.debug("No script %s in %s", script_id, self.directory)
            return None
        return self._build(path, self._load_catalog().get(script_id))

    def list_all(self) -> Set[Script]:
        if not self.directory.is_dir():
            return set()
        catalog = self._load_catalog()
        return {
            self._build(path, catalog.get(path.name))
            for path in sorted(self.directory.glob(f"*{SCRIPT_SUFFIX}"))
            if path.is_file()
        }
