"""Rendering context for parameter form fragments."""

from __future__ import annotations

from typing import Dict

from ..formatting import format_optional
from ..parameters.base import DynamicParameterDefinition, visible_item_count
from ..parameters.strategies import PT_CHECKBOX, PT_MULTI_SELECT, PT_RADIO, PT_SINGLE_SELECT

_CHOICE_TEMPLATES = {
    PT_SINGLE_SELECT: "parameter/select.html.j2",
    PT_MULTI_SELECT: "parameter/multi_select.html.j2",
    PT_CHECKBOX: "parameter/checkbox.html.j2",
    PT_RADIO: "parameter/radio.html.j2",
}


def template_for(definition: DynamicParameterDefinition) -> str:
    """Pick the template for a definition's type and choice_type hint."""
    if definition.type_name == "choice":
        return _CHOICE_TEMPLATES.get(definition.choice_type, _CHOICE_TEMPLATES[PT_SINGLE_SELECT])
    return f"parameter/{definition.type_name}.html.j2"


def build_parameter_context(definition: DynamicParameterDefinition) -> Dict:
    """Return context for a parameter's form fragment."""
    context = {
        "name": definition.name,
        "description": definition.description,
        "uuid": definition.uuid,
        "readonly": definition.readonly_input_field,
        "choice_type": definition.choice_type,
        "default": definition.get_default_parameter_value().value,
    }
    if definition.type_name == "choice":
        choices = [format_optional(choice, "") for choice in definition.get_choices()]
        context["choices"] = choices
        context["visible_item_count"] = visible_item_count(len(choices))
    return context
