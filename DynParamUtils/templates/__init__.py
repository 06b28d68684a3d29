"""Form fragment rendering for dynamic parameters."""

from __future__ import annotations

from .context import build_parameter_context, template_for
from .loader import TemplateLoader
from .renderer import TemplateRenderer


def render_parameter(definition, renderer: TemplateRenderer | None = None) -> str:
    """Render the form fragment for one parameter definition."""
    renderer = renderer or TemplateRenderer(TemplateLoader())
    return renderer.render(template_for(definition), build_parameter_context(definition))


__all__ = [
    "TemplateLoader",
    "TemplateRenderer",
    "build_parameter_context",
    "render_parameter",
    "template_for",
]
