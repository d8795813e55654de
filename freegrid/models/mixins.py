# -*- coding: utf-8 -*-
"""
mixins

Grid capabilities for Tortoise models.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Sequence

from ..adapters.tortoise import get_model_descriptor, is_tortoise_model, resolve_field
from ..core.interfaces import Describable, Searchable
from ..schema.descriptors import FieldDescriptor
from ..search.context import SearchContext
from ..search.fields import (
    SearchableField,
    normalize_searchable_fields,
    scaffold_searchable_fields,
    title_for,
)

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class GridModelMixin(Describable, Searchable):
    """Describe and search a model in grids.

    Configuration lives in class attributes::

        class Team(GridModelMixin, Model):
            summary_fields = {"name": "Name", "city": "City"}
            searchable_fields = ("name", "city", "cheerleader.hat.colour")

            class Meta:
                verbose_name_plural = "Teams"
    """

    summary_fields: Sequence[str] | Mapping[str, Any] | None = None
    searchable_fields: Sequence[str] | Mapping[str, Any] | None = None
    general_search_field: str | None = None
    general_search_split_terms: bool = True

    # --- metadata -------------------------------------------------------------

    @classmethod
    def get_stored_fields(cls) -> list[FieldDescriptor]:
        """Return the persisted, non-key, non-relational fields."""
        if not is_tortoise_model(cls):
            return []
        return get_model_descriptor(cls).data_fields()

    @classmethod
    def resolve_field(cls, path: str) -> FieldDescriptor | None:
        if not is_tortoise_model(cls):
            return None
        return resolve_field(cls, path)

    # --- naming ---------------------------------------------------------------

    @classmethod
    def _meta_option(cls, name: str) -> Any:
        """Read ``name`` from the ORM meta or the declared ``Meta`` class."""
        md = getattr(cls, "_meta", None)
        value = getattr(md, name, None) if md is not None else None
        if not value and hasattr(cls, "Meta"):
            value = getattr(cls.Meta, name, None)
        return value

    @classmethod
    def get_singular_name(cls) -> str:
        """
        Human-friendly singular name for the model.

        Preference order:
          1) Meta.verbose_name
          2) class name split on case changes
        """
        name = cls._meta_option("verbose_name")
        if not name:
            name = _CAMEL_BOUNDARY.sub(" ", cls.__name__).replace("_", " ")
        return str(name)

    @classmethod
    def get_plural_name(cls) -> str:
        """
        Human-friendly plural name for the model.

        Preference order:
          1) Meta.verbose_name_plural
          2) singular + 's' (very naive)
        """
        name = cls._meta_option("verbose_name_plural")
        if not name:
            name = f"{cls.get_singular_name()}s"
        return str(name)

    # --- columns ----------------------------------------------------------------

    @classmethod
    def get_summary_fields(cls) -> dict[str, Any]:
        """Return the list columns: ``summary_fields`` or the stored fields."""
        config = cls.summary_fields
        if isinstance(config, Mapping):
            return dict(config)
        if config:
            return {name: title_for(name, cls.resolve_field(name)) for name in config}
        return {fd.name: fd.get_title() for fd in cls.get_stored_fields()}

    # --- search -----------------------------------------------------------------

    @classmethod
    def get_searchable_fields(cls) -> dict[str, SearchableField]:
        """Return the searchable fields.

        ``searchable_fields`` wins. A model declaring only ``summary_fields``
        has nothing to search. Otherwise the stored fields are scaffolded.
        """
        if cls.searchable_fields is not None:
            return normalize_searchable_fields(cls.searchable_fields, cls.resolve_field)
        if cls.summary_fields is not None:
            return {}
        fields = scaffold_searchable_fields(cls.get_stored_fields())
        logger.debug("Scaffolded searchable fields for %s: %s", cls.__name__, list(fields))
        return fields

    @classmethod
    def get_default_search_context(cls) -> SearchContext:
        return SearchContext(cls, cls.get_searchable_fields())


__all__ = ["GridModelMixin"]


# The End
