# -*- coding: utf-8 -*-
"""
form

Search form container.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from .fields import ExtraClassesMixin, FormField


class SearchForm(ExtraClassesMixin):
    """Named, ordered collection of form fields."""

    def __init__(
        self,
        name: str,
        fields: Iterable[FormField] = (),
        *,
        action: str = "",
        method: str = "GET",
    ) -> None:
        super().__init__()
        self.name = name
        self._fields: list[FormField] = list(fields)
        self.action = action
        self.method = method.upper()

    def fields(self) -> list[FormField]:
        return list(self._fields)

    def field(self, name: str) -> FormField | None:
        for form_field in self._fields:
            if form_field.name == name:
                return form_field
        return None

    def push(self, form_field: FormField) -> "SearchForm":
        self._fields.append(form_field)
        return self

    def load_data(self, data: Mapping[str, Any]) -> "SearchForm":
        """Populate field values from ``data`` keyed by field name."""
        for form_field in self._fields:
            if form_field.name in data:
                form_field.set_value(data[form_field.name])
        return self

    def get_schema(self) -> Dict[str, Any]:
        """JSON description of the form and its fields."""
        return {
            "name": self.name,
            "action": self.action,
            "method": self.method,
            "attributes": {"class": self.extra_class()},
            "fields": [form_field.get_schema() for form_field in self._fields],
        }

    def __repr__(self) -> str:
        return f"SearchForm({self.name!r}, fields={[f.name for f in self._fields]!r})"


__all__ = ["SearchForm"]


# The End
