"""Abstract script registry and executor interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Set, Tuple


@dataclass(frozen=True)
class Script:
    """A named, centrally stored script.

    Scripts compare and hash on ``id`` and ``name`` only, so registries can
    hand out sets of them regardless of what the defaults contain.
    """

    id: str
    name: str
    source: str = field(default="", repr=False, compare=False)
    comment: str = field(default="", compare=False)
    # (name, value) pairs applied underneath the caller's parameters
    parameters: Tuple[Tuple[str, Any], ...] = field(default=(), compare=False)

    def default_params(self) -> Dict[str, Any]:
        return dict(self.parameters)


class ScriptRegistry(ABC):
    """Lookup interface that script stores must implement."""

    @abstractmethod
    def resolve(self, script_id: str) -> Optional[Script]:
        """Return the script registered under ``script_id`` or None."""

    @abstractmethod
    def list_all(self) -> Set[Script]:
        """Return every known script."""


class ScriptExecutor(ABC):
    """Runs script source with a bound set of named parameters."""

    @abstractmethod
    def execute(self, source: str, params: Mapping[str, Any], remote: bool = False) -> Any:
        """Run ``source`` and return whatever the script evaluates to.

        Implementations raise ScriptExecutionError for compile or runtime
        failures inside the script.
        """


class InMemoryScriptRegistry(ScriptRegistry):
    """Registry backed by a plain dict, for embedding and tests."""

    def __init__(self, scripts: Iterable[Script] = ()):
        self._scripts: Dict[str, Script] = {}
        for script in scripts:
            self.add(script)

    def add(self, script: Script) -> None:
        self._scripts[script.id] = script

    def resolve(self, script_id: str) -> Optional[Script]:
        return self._scripts.get(script_id)

    def list_all(self) -> Set[Script]:
        return set(self._scripts.values())
