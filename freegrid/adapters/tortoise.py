# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM adapter utilities.

Translates Tortoise model metadata into :mod:`freegrid.schema.descriptors`
and exposes the queryset helpers the search contexts rely on, so that the
rest of the package does not touch Tortoise internals directly.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any

from tortoise import fields
from tortoise.expressions import Q
from tortoise.models import Model
from tortoise.queryset import QuerySet

from ..schema.descriptors import Choice, FieldDescriptor, ModelDescriptor, Relation

logger = logging.getLogger(__name__)

# === helpers ===


def _app_label(model: type[Model]) -> str:
    """Return the app label for a Tortoise model."""
    # Tortoise stores app in _meta.app once initialised; fallback - the module
    return getattr(model._meta, "app", None) or model.__module__.split(".")[0]


def _build_choices(f: fields.Field) -> list[Choice] | None:
    """Create ``Choice`` instances for enum or ``choices`` definitions."""
    enum_type = getattr(f, "enum_type", None)
    if enum_type is not None:
        return [Choice(const=m.value, title=getattr(m, "label", m.name)) for m in enum_type]
    raw_choices = getattr(f, "choices", None)
    if raw_choices:
        out = []
        for pair in raw_choices:
            if isinstance(pair, (list, tuple)) and len(pair) == 2:
                out.append(Choice(const=pair[0], title=str(pair[1])))
        return out or None
    return None


def _kind_for_field(f: fields.Field) -> str:
    """Map a Tortoise field instance to a generic field kind."""
    if isinstance(f, fields.BooleanField):
        return "boolean"
    if isinstance(f, fields.BigIntField):
        return "bigint"
    if isinstance(f, (fields.IntField, fields.SmallIntField)):
        return "integer"
    if isinstance(f, fields.FloatField):
        return "float"
    if isinstance(f, fields.DecimalField):
        return "decimal"
    # DatetimeField before DateField: keep the more specific kind
    if isinstance(f, fields.DatetimeField):
        return "datetime"
    if isinstance(f, fields.DateField):
        return "date"
    if isinstance(f, fields.UUIDField):
        return "uuid"
    if isinstance(f, fields.JSONField):
        return "json"
    if isinstance(f, fields.BinaryField):
        return "binary"
    if isinstance(f, fields.TextField):
        return "text"
    # By default, everything else is considered string (CharField and so on)
    return "string"


def _relation_for_field(f: fields.Field) -> Relation | None:
    """Return relation metadata for ``f`` if it defines FK, O2O or M2M."""
    if isinstance(f, fields.relational.OneToOneFieldInstance):
        kind = "o2o"
    elif isinstance(f, fields.relational.ForeignKeyFieldInstance):
        kind = "fk"
    elif isinstance(f, fields.relational.ManyToManyFieldInstance):
        kind = "m2m"
    else:
        return None
    target = getattr(f, "related_model", None)
    if isinstance(target, type):
        dotted = f"{_app_label(target)}.{target.__name__}"
    else:
        dotted = str(getattr(f, "model_name", "") or "")
    return Relation(kind=kind, target=dotted)


def _field_descriptor(name: str, f: fields.Field) -> FieldDescriptor:
    """Build a :class:`FieldDescriptor` from a Tortoise field."""
    return FieldDescriptor(
        name=name,
        kind=_kind_for_field(f),
        primary_key=bool(getattr(f, "pk", False)),
        label=getattr(f, "description", None) or None,
        relation=_relation_for_field(f),
        choices=_build_choices(f),
    )


def is_tortoise_model(model: Any) -> bool:
    """Return ``True`` for Tortoise model classes."""
    return isinstance(model, type) and issubclass(model, Model)


def get_model_descriptor(model: type[Model]) -> ModelDescriptor:
    """Describe the stored fields of ``model``.

    Reverse relations and the ``<name>_id`` source columns generated for
    foreign keys are skipped.
    """
    meta = model._meta
    fds: list[FieldDescriptor] = []
    for name, f in meta.fields_map.items():
        if isinstance(f, fields.relational.BackwardFKRelation):
            continue
        if getattr(f, "reference", None) is not None:
            continue
        fds.append(_field_descriptor(name, f))
    return ModelDescriptor(
        app_label=_app_label(model),
        model_name=model.__name__,
        pk_attr=getattr(meta, "pk_attr", "id"),
        fields=fds,
    )


def resolve_field(model: type[Model], path: str) -> FieldDescriptor | None:
    """Follow dotted ``path`` through relations and describe the last field.

    Returns ``None`` when a segment is unknown or a relation target is not
    resolved yet (models are resolved by ``Tortoise.init``).
    """
    current: Any = model
    parts = path.split(".")
    for index, part in enumerate(parts):
        if not is_tortoise_model(current):
            return None
        f = current._meta.fields_map.get(part)
        if f is None:
            logger.debug("Field '%s' not found on %s", part, current.__name__)
            return None
        if index == len(parts) - 1:
            return _field_descriptor(part, f)
        current = getattr(f, "related_model", None)
    return None


def is_queryset(obj: Any) -> bool:
    """Return ``True`` when ``obj`` is a Tortoise queryset."""
    return isinstance(obj, QuerySet)


def queryset_model(qs: QuerySet) -> type[Model]:
    """Return the model class a queryset selects."""
    return qs.model


def lookup(path: str) -> str:
    """Return ORM lookup path using ``__`` separator."""
    return path.replace(".", "__")


__all__ = [
    "Q",
    "QuerySet",
    "get_model_descriptor",
    "is_queryset",
    "is_tortoise_model",
    "lookup",
    "queryset_model",
    "resolve_field",
]


# The End
