"""Script-backed parameter definitions."""

from .base import (
    DEFAULT_MAX_VISIBLE_ITEM_COUNT,
    DynamicParameterDefinition,
    ParameterValue,
    ScriptParameter,
    visible_item_count,
)
from .descriptors import DescriptorRegistry, ParameterDescriptor, default_registry, register_defaults
from .job import JobParameters
from .strategies import (
    CHOICE_TYPES,
    BooleanStrategy,
    ChoiceStrategy,
    SelectStrategy,
    StringStrategy,
    split_submission,
)

__all__ = [
    "CHOICE_TYPES",
    "DEFAULT_MAX_VISIBLE_ITEM_COUNT",
    "BooleanStrategy",
    "ChoiceStrategy",
    "DescriptorRegistry",
    "DynamicParameterDefinition",
    "JobParameters",
    "ParameterDescriptor",
    "ParameterValue",
    "ScriptParameter",
    "SelectStrategy",
    "StringStrategy",
    "default_registry",
    "register_defaults",
    "split_submission",
    "visible_item_count",
]
