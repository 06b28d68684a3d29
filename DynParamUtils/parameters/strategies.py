"""How a script result turns into a default and which submissions pass."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional, TYPE_CHECKING

from ..formatting import format_optional

if TYPE_CHECKING:
    from .base import DynamicParameterDefinition

logger = logging.getLogger(__name__)

SUBMISSION_SEPARATOR = ","

# Rendering hints understood by the templates; the strategies ignore them
PT_SINGLE_SELECT = "PT_SINGLE_SELECT"
PT_MULTI_SELECT = "PT_MULTI_SELECT"
PT_CHECKBOX = "PT_CHECKBOX"
PT_RADIO = "PT_RADIO"
CHOICE_TYPES = (PT_SINGLE_SELECT, PT_MULTI_SELECT, PT_CHECKBOX, PT_RADIO)


def split_submission(value: str) -> FrozenSet[str]:
    """Split a submitted value on commas, dropping empty tokens."""
    return frozenset(part for part in (value or "").split(SUBMISSION_SEPARATOR) if part)


class ChoiceStrategy(ABC):
    """Decides defaults and acceptance for a DynamicParameterDefinition."""

    type_name: str = ""

    @abstractmethod
    def default_value(self, definition: "DynamicParameterDefinition") -> Optional[str]:
        """Return the default payload, or None for a value with no content."""

    @abstractmethod
    def accepts(self, definition: "DynamicParameterDefinition", value: str) -> bool:
        """Return True if the submitted string is acceptable."""


class StringStrategy(ChoiceStrategy):
    """Free text; the script only supplies the default."""

    type_name = "string"

    def default_value(self, definition):
        return format_optional(definition.get_script_result())

    def accepts(self, definition, value):
        return True


class SelectStrategy(ChoiceStrategy):
    """Values must be taken from the script's list of choices.

    Multi-valued submissions arrive comma-joined; each part must be one of
    the stringified choices. An empty submission passes, since the empty
    set is a subset of any choice list.
    """

    type_name = "choice"

    def default_value(self, definition):
        choices = definition.get_choices()
        if not choices:
            return None
        return format_optional(choices[0])

    def accepts(self, definition, value):
        submitted = split_submission(value)
        choices = {format_optional(choice, "") for choice in definition.get_choices()}
        if not submitted:
            logger.warning("Empty submission accepted for parameter %s", definition.name)
        return submitted <= choices


class BooleanStrategy(ChoiceStrategy):
    """A checkbox whose initial state comes from the script."""

    type_name = "boolean"

    @staticmethod
    def _as_bool(result: Any) -> bool:
        if isinstance(result, str):
            return result.strip().lower() == "true"
        return bool(result)

    def default_value(self, definition):
        return format_optional(self._as_bool(definition.get_script_result()))

    def accepts(self, definition, value):
        return value.strip().lower() in ("true", "false")
