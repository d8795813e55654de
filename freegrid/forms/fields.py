# -*- coding: utf-8 -*-
"""
fields

Form fields used by the grid search form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from typing import Any, Dict, Sequence

_INVALID_ID = re.compile(r"[^A-Za-z0-9_-]")


class ExtraClassesMixin:
    """Keep an ordered set of CSS classes."""

    def __init__(self) -> None:
        self._extra_classes: dict[str, None] = {}

    def add_extra_class(self, *classes: str) -> "ExtraClassesMixin":
        for value in classes:
            for name in value.split():
                self._extra_classes[name] = None
        return self

    def remove_extra_class(self, name: str) -> "ExtraClassesMixin":
        self._extra_classes.pop(name, None)
        return self

    def has_extra_class(self, name: str) -> bool:
        return name in self._extra_classes

    def extra_class(self) -> str:
        return " ".join(self._extra_classes)


class FormField(ExtraClassesMixin):
    """Single named input of a form."""

    schema_type: str = "text"

    def __init__(self, name: str, title: str | None = None, value: Any = None) -> None:
        super().__init__()
        self.name = name
        self.title = title if title is not None else name
        self.value = value
        self.attributes: dict[str, Any] = {}

    def get_id(self) -> str:
        return _INVALID_ID.sub("_", self.name)

    def set_value(self, value: Any) -> "FormField":
        self.value = value
        return self

    def get_schema(self) -> Dict[str, Any]:
        """JSON description of the field for client-side forms."""
        return {
            "name": self.name,
            "id": self.get_id(),
            "type": self.schema_type,
            "title": self.title,
            "value": self.value,
            "extraClass": self.extra_class(),
            "attributes": dict(self.attributes),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class TextField(FormField):
    schema_type = "text"


class DropdownField(FormField):
    schema_type = "select"

    def __init__(
        self,
        name: str,
        title: str | None = None,
        source: Sequence[tuple[Any, str]] = (),
        value: Any = None,
        empty_string: str = "",
    ) -> None:
        super().__init__(name, title, value)
        self.source = list(source)
        self.empty_string = empty_string

    def get_schema(self) -> Dict[str, Any]:
        schema = super().get_schema()
        options = [{"value": "", "title": self.empty_string}]
        options.extend({"value": value, "title": title} for value, title in self.source)
        schema["source"] = options
        return schema


__all__ = ["ExtraClassesMixin", "FormField", "TextField", "DropdownField"]


# The End
