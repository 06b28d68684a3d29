"""Script-backed parameter definition.

A ``DynamicParameterDefinition`` names a registered script and the
parameters to run it with. The script's result is recomputed on every
access (choices, default, validation); how that result becomes a default
and which submissions are acceptable is decided by the definition's
``ChoiceStrategy``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, TYPE_CHECKING

from ..exceptions import InvalidChoiceError
from ..formatting import format_optional

if TYPE_CHECKING:
    from ..scripts.provider import ScriptResultProvider
    from .strategies import ChoiceStrategy

logger = logging.getLogger(__name__)

# Shared with every list-style parameter type
DEFAULT_MAX_VISIBLE_ITEM_COUNT = 5


def visible_item_count(choice_count: int) -> int:
    """Number of rows a list of ``choice_count`` entries should show."""
    return min(choice_count, DEFAULT_MAX_VISIBLE_ITEM_COUNT)


@dataclass(frozen=True)
class ScriptParameter:
    """Name/value pair bound into the script's execution context."""

    name: str
    value: Any = None


@dataclass(frozen=True)
class ParameterValue:
    """Named value handed to the host; ``value`` may be None."""

    name: str
    value: Optional[str] = None


class DynamicParameterDefinition:
    """Parameter whose values are computed by a registered script."""

    def __init__(
        self,
        name: str,
        description: str,
        uuid: Optional[str],
        script_id: str,
        parameters: Iterable[ScriptParameter],
        remote: bool,
        strategy: "ChoiceStrategy",
        provider: "ScriptResultProvider",
        readonly_input_field: bool = False,
        choice_type: Optional[str] = None,
    ):
        self._name = name
        self._description = description or ""
        self._uuid = uuid
        self._script_id = script_id
        self._parameters: Tuple[ScriptParameter, ...] = tuple(parameters or ())
        self._remote = bool(remote)
        self._readonly_input_field = bool(readonly_input_field)
        self._strategy = strategy
        self.provider = provider
        self.choice_type = choice_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def uuid(self) -> Optional[str]:
        return self._uuid

    @property
    def script_id(self) -> str:
        return self._script_id

    @property
    def parameters(self) -> Tuple[ScriptParameter, ...]:
        return self._parameters

    @property
    def remote(self) -> bool:
        return self._remote

    @property
    def readonly_input_field(self) -> bool:
        return self._readonly_input_field

    @property
    def strategy(self) -> "ChoiceStrategy":
        return self._strategy

    @property
    def type_name(self) -> str:
        return self._strategy.type_name

    def __repr__(self):
        return (
            f"{type(self).__name__}(name={self._name!r}, type={self.type_name!r}, "
            f"script_id={self._script_id!r})"
        )

    # ------------------------------------------------------------------
    # Script results
    # ------------------------------------------------------------------
    def get_script_result(self) -> Any:
        """Run the script and return its raw result."""
        return self.provider.get_script_result(self._script_id, self._parameters, self._remote)

    def get_choices(self) -> List[Any]:
        """Run the script and return its result as a list (never None)."""
        return self.provider.get_result_as_list(self._script_id, self._parameters, self._remote)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------
    def get_default_parameter_value(self) -> ParameterValue:
        return ParameterValue(self._name, self._strategy.default_value(self))

    def check_parameter_value(self, parameter: ParameterValue) -> ParameterValue:
        """Return ``parameter`` unchanged if acceptable.

        Raises InvalidChoiceError carrying the raw submitted string otherwise.
        """
        actual_value = format_optional(parameter.value, "")
        if self._strategy.accepts(self, actual_value):
            return parameter
        logger.debug("Rejected value %r for parameter %s", actual_value, self._name)
        raise InvalidChoiceError(actual_value)

    def create_value(self, raw: Optional[str]) -> ParameterValue:
        """Build a checked value from a submitted string; None means default."""
        if raw is None:
            return self.get_default_parameter_value()
        return self.check_parameter_value(ParameterValue(self._name, raw))

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def get_visible_item_count(self) -> int:
        return visible_item_count(len(self.get_choices()))
