# -*- coding: utf-8 -*-
"""
templates.service

Shared template service rendering grid HTML fragments.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

TEMPLATES_DIR = Path(__file__).resolve().parent


class TemplateService:
    """Own a lazily built ``Jinja2Templates`` instance."""

    def __init__(self, templates_dir: str | Path | Iterable[str | Path] | None = None) -> None:
        """Configure the service with template locations."""

        self._template_dirs = self._coerce_template_dirs(templates_dir or TEMPLATES_DIR)
        self._templates: Jinja2Templates | None = None

    @staticmethod
    def _coerce_template_dirs(value: str | Path | Iterable[str | Path]) -> list[str]:
        if isinstance(value, (str, Path)):
            return [str(value)]
        return [str(item) for item in value]

    def get_templates(self) -> Jinja2Templates:
        """Return the cached templates object, creating it when needed."""

        if self._templates is None:
            self._templates = Jinja2Templates(directory=self._template_dirs)
        return self._templates

    def render(self, template_name: str, context: Mapping[str, Any]) -> Markup:
        """Render ``template_name`` with ``context`` into safe markup."""

        template = self.get_templates().get_template(template_name)
        return Markup(template.render(**context))


DEFAULT_TEMPLATE_SERVICE = TemplateService()


__all__ = ["TemplateService", "DEFAULT_TEMPLATE_SERVICE", "TEMPLATES_DIR"]


# The End
