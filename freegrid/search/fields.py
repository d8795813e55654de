# -*- coding: utf-8 -*-
"""
fields

Searchable field descriptions and the normalisation of their configuration.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from pydantic import BaseModel

from ..adapters.tortoise import lookup
from ..conf import current_settings
from ..core.exceptions import UnknownFilterKindError
from ..schema.descriptors import Choice, FieldDescriptor
from .filters import registry as filter_registry

logger = logging.getLogger(__name__)

FieldResolver = Callable[[str], "FieldDescriptor | None"]


class SearchableField(BaseModel):
    """One field offered by a search form, with its filter kind."""

    name: str
    title: str
    filter: str
    field_kind: str | None = None
    choices: list[Choice] | None = None

    @property
    def form_name(self) -> str:
        """Return the form-safe name: ``team.name`` becomes ``team__name``."""
        return lookup(self.name)


def default_filter_for(fd: FieldDescriptor | None) -> str:
    """Return the filter kind used when configuration does not name one."""
    if fd is None:
        return current_settings().default_filter
    if fd.choices or not fd.is_text:
        return "exact"
    return "partial"


def title_for(path: str, fd: FieldDescriptor | None) -> str:
    """Return a human title for ``path``."""
    if fd is not None and "." not in path:
        return fd.get_title()
    words = " ".join(part.replace("_", " ") for part in path.split("."))
    return words[:1].upper() + words[1:]


def _build(name: str, options: Mapping[str, Any], resolve: FieldResolver) -> SearchableField:
    target = options.get("field") or name
    fd = resolve(target)
    if fd is None:
        logger.debug("Searchable field '%s' does not resolve to a model field", target)
    kind = options.get("filter") or default_filter_for(fd)
    if filter_registry.get(kind) is None:
        raise UnknownFilterKindError(f"Unknown filter kind '{kind}' for searchable field '{name}'")
    return SearchableField(
        name=name,
        title=options.get("title") or title_for(name, fd),
        filter=kind,
        field_kind=fd.kind if fd is not None else None,
        choices=fd.choices if fd is not None else None,
    )


def normalize_searchable_fields(
    config: Iterable[str] | Mapping[str, Any],
    resolve: FieldResolver,
) -> dict[str, SearchableField]:
    """Turn ``searchable_fields`` configuration into searchable fields.

    Accepted forms::

        ("name", "city")
        {"name": "exact", "city": "partial"}
        {"name": {"title": "Team name", "filter": "exact"}}

    The ``field`` option names the model field described by an entry when it
    differs from the entry name.
    """
    result: dict[str, SearchableField] = {}
    if isinstance(config, Mapping):
        for name, options in config.items():
            if isinstance(options, str):
                options = {"filter": options}
            elif options is None:
                options = {}
            result[name] = _build(name, options, resolve)
        return result
    for name in config:
        result[name] = _build(name, {}, resolve)
    return result


def scaffold_searchable_fields(descriptors: Iterable[FieldDescriptor]) -> dict[str, SearchableField]:
    """Build searchable fields from stored model fields."""
    by_name = {fd.name: fd for fd in descriptors}
    return normalize_searchable_fields(list(by_name), by_name.get)


__all__ = [
    "SearchableField",
    "default_filter_for",
    "title_for",
    "normalize_searchable_fields",
    "scaffold_searchable_fields",
]


# The End
