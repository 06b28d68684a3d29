"""Parameter type descriptors and their registry.

Descriptors are registered explicitly; ``register_defaults`` installs the
built-in string, choice and boolean types and is called once at start-up.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Set

from ..exceptions import UnknownParameterTypeError
from ..i18n import get_message
from ..scripts.base import Script, ScriptRegistry
from .base import DynamicParameterDefinition
from .strategies import BooleanStrategy, ChoiceStrategy, SelectStrategy, StringStrategy

logger = logging.getLogger(__name__)


class ParameterDescriptor:
    """Type-level metadata for one parameter variant."""

    def __init__(self, type_name: str, strategy_factory: Callable[[], ChoiceStrategy], display_name_key: str):
        self.type_name = type_name
        self.strategy_factory = strategy_factory
        self.display_name_key = display_name_key

    def display_name(self, locale: Optional[str] = None) -> str:
        return get_message(self.display_name_key, locale)

    def scripts(self, registry: ScriptRegistry) -> Set[Script]:
        """Scripts a configuration UI can offer for this parameter."""
        return registry.list_all()

    def new_definition(self, **fields) -> DynamicParameterDefinition:
        return DynamicParameterDefinition(strategy=self.strategy_factory(), **fields)


class DescriptorRegistry:
    """Maps parameter type names to descriptors."""

    def __init__(self):
        self._descriptors: Dict[str, ParameterDescriptor] = {}

    def register(self, descriptor: ParameterDescriptor) -> ParameterDescriptor:
        if descriptor.type_name in self._descriptors:
            logger.debug("Replacing descriptor for type %s", descriptor.type_name)
        self._descriptors[descriptor.type_name] = descriptor
        return descriptor

    def get(self, type_name: str) -> ParameterDescriptor:
        descriptor = self._descriptors.get(type_name)
        if descriptor is None:
            raise UnknownParameterTypeError(type_name)
        return descriptor

    def names(self) -> List[str]:
        return list(self._descriptors)

    def create(self, type_name: str, **fields) -> DynamicParameterDefinition:
        """Create a definition of the given type; fields go to the constructor."""
        return self.get(type_name).new_definition(**fields)


def register_defaults(registry: DescriptorRegistry) -> DescriptorRegistry:
    registry.register(ParameterDescriptor("string", StringStrategy, "StringParameterDefinition.DisplayName"))
    registry.register(ParameterDescriptor("choice", SelectStrategy, "ChoiceParameterDefinition.DisplayName"))
    registry.register(ParameterDescriptor("boolean", BooleanStrategy, "BooleanParameterDefinition.DisplayName"))
    return registry


def default_registry() -> DescriptorRegistry:
    return register_defaults(DescriptorRegistry())
