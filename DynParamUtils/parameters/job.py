"""The set of dynamic parameters configured on one job."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from ..exceptions import ValidationError
from .base import DynamicParameterDefinition, ParameterValue


class JobParameters:
    """Ordered, name-unique collection of parameter definitions."""

    def __init__(self, definitions: Iterable[DynamicParameterDefinition], name: Optional[str] = None):
        self.name = name
        self._definitions: Dict[str, DynamicParameterDefinition] = {}
        for definition in definitions:
            if definition.name in self._definitions:
                raise ValidationError(f"Duplicate parameter name: {definition.name}")
            self._definitions[definition.name] = definition

    def __iter__(self):
        return iter(self._definitions.values())

    def __len__(self):
        return len(self._definitions)

    def names(self) -> List[str]:
        return list(self._definitions)

    def get(self, name: str) -> DynamicParameterDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise ValidationError(f"Unknown parameter: {name}") from None

    def defaults(self) -> Dict[str, ParameterValue]:
        """Default value of every parameter, as the host would query them."""
        return {name: d.get_default_parameter_value() for name, d in self._definitions.items()}

    def resolve(self, submitted: Mapping[str, str]) -> Dict[str, ParameterValue]:
        """Check submitted strings and fill the rest with defaults.

        Raises ValidationError for names that are not configured and lets
        InvalidChoiceError from any parameter propagate.
        """
        unknown = sorted(set(submitted) - set(self._definitions))
        if unknown:
            raise ValidationError(f"Unknown parameter(s): {', '.join(unknown)}")
        return {
            name: definition.create_value(submitted.get(name))
            for name, definition in self._definitions.items()
        }
