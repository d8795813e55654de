# -*- coding: utf-8 -*-
"""
descriptors

Model and field descriptors used to scaffold columns and search fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field as PField

# Unified field types
FieldKind = Literal[
    "string", "text", "integer", "bigint", "float", "decimal",
    "boolean", "date", "datetime", "uuid", "json", "binary"
]

TEXT_KINDS = frozenset({"string", "text"})


class Choice(BaseModel):
    """Single selectable option for a field with discrete choices."""
    const: Any
    title: str


class Relation(BaseModel):
    """Information about a relation to another model."""
    kind: Literal["fk", "o2o", "m2m"]
    target: str  # dotted path "app.Model"


class FieldDescriptor(BaseModel):
    """Unified representation of a model field."""
    name: str
    kind: FieldKind
    primary_key: bool = False
    label: str | None = None
    relation: Relation | None = None
    choices: list[Choice] | None = None

    @property
    def is_text(self) -> bool:
        """Return ``True`` for plain text columns."""

        return self.kind in TEXT_KINDS and self.relation is None

    def get_title(self) -> str:
        """Return the label or a title derived from the field name."""
        if self.label:
            return self.label
        name = self.name.replace("_", " ")
        return name[:1].upper() + name[1:]


class ModelDescriptor(BaseModel):
    """Metadata describing an ORM model."""
    app_label: str
    model_name: str
    pk_attr: str

    fields: list[FieldDescriptor] = PField(default_factory=list)

    def field(self, name: str) -> FieldDescriptor | None:
        """Return the descriptor named ``name`` or ``None``."""

        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def fields_map(self) -> dict[str, FieldDescriptor]:
        """Return a mapping of field names to descriptors."""
        return {f.name: f for f in self.fields}

    def data_fields(self) -> list[FieldDescriptor]:
        """Return plain stored fields: no primary key, relations or blobs."""
        return [
            f for f in self.fields
            if not f.primary_key and f.relation is None and f.kind not in {"binary", "json"}
        ]


__all__ = [
    "FieldKind",
    "TEXT_KINDS",
    "Choice",
    "Relation",
    "FieldDescriptor",
    "ModelDescriptor",
]


# The End
