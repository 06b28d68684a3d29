"""Script-backed value provider.

Resolves a script by id, runs it through an executor with the definition's
parameters bound, and normalizes the result into an ordered choice list.
Nothing is cached: every call re-runs the script.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Sequence

from ..exceptions import ScriptNotFoundError
from .base import ScriptExecutor, ScriptRegistry

logger = logging.getLogger(__name__)

# Iterables that count as a single value rather than a collection of choices
_SCALAR_TYPES = (str, bytes, bytearray, Mapping)


def result_as_list(result: Any) -> List[Any]:
    """Normalize a raw script result into a list of choices.

    None becomes an empty list, a collection keeps its iteration order, and
    any other value becomes a one-element list.
    """
    if result is None:
        return []
    if isinstance(result, Iterable) and not isinstance(result, _SCALAR_TYPES):
        return list(result)
    return [result]


def bind_parameters(parameters: Sequence) -> Dict[str, Any]:
    """Turn ScriptParameter-like objects into a name -> value mapping."""
    return {param.name: param.value for param in parameters}


class ScriptResultProvider:
    """Run registered scripts and adapt their results."""

    def __init__(self, registry: ScriptRegistry, executor: ScriptExecutor):
        self.registry = registry
        self.executor = executor

    def get_script_result(self, script_id: str, parameters: Sequence = (), remote: bool = False) -> Any:
        script = self.registry.resolve(script_id)
        if script is None:
            raise ScriptNotFoundError(script_id)

        params = script.default_params()
        params.update(bind_parameters(parameters))
        logger.debug("Running script %s (remote=%s)", script_id, remote)
        return self.executor.execute(script.source, params, remote=remote)

    def get_result_as_list(self, script_id: str, parameters: Sequence = (), remote: bool = False) -> List[Any]:
        choices = result_as_list(self.get_script_result(script_id, parameters, remote))
        logger.debug("Script %s produced %d choice(s)", script_id, len(choices))
        return choices
