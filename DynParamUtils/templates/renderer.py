"""Template renderer."""

from __future__ import annotations

from typing import Dict

from jinja2 import TemplateError as JinjaTemplateError

from ..exceptions import TemplateError


class TemplateRenderer:
    """Render templates through a TemplateLoader."""

    def __init__(self, loader):
        self.loader = loader

    def render(self, template_name: str, context: Dict) -> str:
        """Render a template to a string."""
        template = self.loader.load(template_name)
        try:
            return template.render(**context)
        except JinjaTemplateError as exc:
            raise TemplateError(f"Failed to render {template_name}: {exc}") from exc
