"""Message catalog for user-facing names."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..exceptions import ConfigError

DEFAULT_LOCALE = "en"
CATALOG_PATH = Path(__file__).parent / "messages.yaml"


@lru_cache(maxsize=None)
def _catalog(path: str = str(CATALOG_PATH)) -> Dict[str, Dict[str, str]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load message catalog {path}: {exc}") from exc


def current_locale() -> str:
    return os.getenv("DYNPARAM_LOCALE", DEFAULT_LOCALE)


def get_message(key: str, locale: Optional[str] = None) -> str:
    """Look up ``key`` for ``locale``, then its language, then English.

    Unknown keys come back unchanged.
    """
    locale = locale or current_locale()
    catalog = _catalog()
    for candidate in (locale, locale.split("_")[0].split("-")[0], DEFAULT_LOCALE):
        messages = catalog.get(candidate) or {}
        if key in messages:
            return messages[key]
    return key
