"""Script registries, executors and the script-backed value provider."""

from __future__ import annotations

import os

from .base import InMemoryScriptRegistry, Script, ScriptExecutor, ScriptRegistry
from .directory import DirectoryScriptRegistry
from .executor import LocalScriptExecutor, run_source
from .provider import ScriptResultProvider, result_as_list

DEFAULT_SCRIPTS_DIR = "scripts"


def get_provider(scripts_dir: str | None = None, python: str | None = None) -> ScriptResultProvider:
    """Return a provider over a script directory and the local executor.

    Falls back to DYNPARAM_SCRIPTS_DIR and DYNPARAM_PYTHON when arguments
    are not given.
    """
    directory = scripts_dir or os.getenv("DYNPARAM_SCRIPTS_DIR", DEFAULT_SCRIPTS_DIR)
    interpreter = python or os.getenv("DYNPARAM_PYTHON") or None
    return ScriptResultProvider(DirectoryScriptRegistry(directory), LocalScriptExecutor(interpreter))


__all__ = [
    "DirectoryScriptRegistry",
    "InMemoryScriptRegistry",
    "LocalScriptExecutor",
    "Script",
    "ScriptExecutor",
    "ScriptRegistry",
    "ScriptResultProvider",
    "get_provider",
    "result_as_list",
    "run_source",
]
