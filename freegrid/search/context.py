# -*- coding: utf-8 -*-
"""
context

Search contexts: searchable fields plus the logic applying submitted
criteria to a collection.

:class:`SearchContext` narrows Tortoise querysets. :class:`InMemorySearchContext`
evaluates the same filters row by row for in-memory lists. Both expose the
same fields and filter kinds for a given model.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import copy
import logging
import re
from functools import reduce
from typing import Any, Mapping

from ..adapters.tortoise import Q, lookup
from ..conf import current_settings
from ..core.collections import InMemoryList, resolve_value
from ..core.interfaces import is_searchable
from .fields import SearchableField
from .filters import PartialMatchFilter, SearchFilter, registry as filter_registry

logger = logging.getLogger(__name__)

_TERMS = re.compile(r'"([^"]+)"|(\S+)')


def split_terms(text: str) -> list[str]:
    """Split free text into terms, keeping ``"quoted phrases"`` together."""
    return [quoted or bare for quoted, bare in _TERMS.findall(text)]


class SearchContext:
    """Resolved search definition for a model, narrowing querysets."""

    def __init__(
        self,
        model: type[Any],
        fields: Mapping[str, SearchableField] | None = None,
        filters: Mapping[str, SearchFilter] | None = None,
        *,
        general_search_field: str | None = None,
        split_general_terms: bool | None = None,
    ) -> None:
        self.model = model
        self._fields: dict[str, SearchableField] = dict(fields or {})
        if filters is None:
            filters = {
                name: filter_registry.create(field.filter, name, field_kind=field.field_kind)
                for name, field in self._fields.items()
            }
        self._filters: dict[str, SearchFilter] = dict(filters)
        if general_search_field is None:
            general_search_field = (
                model.get_general_search_field_name()
                if is_searchable(model)
                else current_settings().general_search_field
            )
        self.general_search_field = general_search_field
        if split_general_terms is None:
            split_general_terms = bool(getattr(model, "general_search_split_terms", True))
        self.split_general_terms = split_general_terms
        self._search_params: dict[str, Any] = {}

    # --- definition ---------------------------------------------------------

    def get_search_fields(self) -> list[SearchableField]:
        """Return the searchable fields in configuration order."""

        return list(self._fields.values())

    def get_filters(self) -> dict[str, SearchFilter]:
        """Return the filter of every searchable field, keyed by field path."""

        return dict(self._filters)

    def get_filter(self, name: str) -> SearchFilter | None:
        """Return the filter for ``name`` given as ``a.b`` or ``a__b``."""
        if name in self._filters:
            return self._filters[name]
        for field_name, search_filter in self._filters.items():
            if lookup(field_name) == name:
                return search_filter
        return None

    def copy(self, **overrides: Any) -> "SearchContext":
        """Return an independent copy, optionally overriding attributes.

        ``context.copy(general_search_field="kw")`` leaves ``context`` as it
        was.
        """

        clone = copy.copy(self)
        clone._fields = dict(self._fields)
        clone._filters = dict(self._filters)
        clone._search_params = dict(self._search_params)
        for name, value in overrides.items():
            if not hasattr(clone, name):
                raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")
            setattr(clone, name, value)
        return clone

    # --- parameters ---------------------------------------------------------

    def normalize_params(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        """Map submitted keys to field names and drop empty values.

        Keys may carry the form prefix (``Search__city``) and use ``__`` for
        relation paths.
        """
        prefix = current_settings().search_field_prefix
        result: dict[str, Any] = {}
        for key, value in (params or {}).items():
            if value is None or (isinstance(value, str) and value.strip() == ""):
                continue
            name = key[len(prefix):] if key.startswith(prefix) else key
            if name != self.general_search_field:
                search_filter = self.get_filter(name)
                if search_filter is not None:
                    name = search_filter.get_name()
            result[name] = value
        return result

    def get_search_params(self) -> dict[str, Any]:
        """Return the normalised criteria set by :meth:`set_search_params`."""

        return dict(self._search_params)

    def set_search_params(self, params: Mapping[str, Any] | None) -> "SearchContext":
        """Remember ``params`` after normalisation."""

        self._search_params = self.normalize_params(params)
        return self

    def get_applied_filters(self, params: Mapping[str, Any] | None = None) -> list[tuple[str, str]]:
        """Return the active ``(field, filter kind)`` pairs."""
        source = self.normalize_params(params) if params is not None else self._search_params
        applied: list[tuple[str, str]] = []
        for name in source:
            if name == self.general_search_field:
                applied.append((name, PartialMatchFilter.key))
                continue
            search_filter = self.get_filter(name)
            if search_filter is not None:
                applied.append((search_filter.get_name(), search_filter.key))
        return applied

    # --- querying -----------------------------------------------------------

    def get_query(self, params: Mapping[str, Any] | None, collection: Any = None) -> Any:
        """Return ``collection`` narrowed by ``params``.

        The collection defaults to every row of the model. It is never
        modified; a derived collection is returned.
        """
        criteria = self.normalize_params(params)
        if collection is None:
            collection = self.default_collection()
        for name, value in criteria.items():
            if name == self.general_search_field:
                collection = self.apply_general_search(collection, str(value))
                continue
            search_filter = self.get_filter(name)
            if search_filter is None:
                logger.warning(
                    "Ignoring search criterion '%s': no searchable field on %s",
                    name,
                    getattr(self.model, "__name__", self.model),
                )
                continue
            collection = self.apply_filter(collection, search_filter.with_value(value))
        return collection

    def default_collection(self) -> Any:
        """Return every row of the model."""

        return self.model.all()

    def general_terms(self, text: str) -> list[str]:
        """Return the terms of a free-text search."""

        text = text.strip()
        if not text:
            return []
        return split_terms(text) if self.split_general_terms else [text]

    def apply_filter(self, collection: Any, search_filter: SearchFilter) -> Any:
        """Narrow ``collection`` by one filter."""

        return search_filter.apply(collection)

    def apply_general_search(self, collection: Any, text: str) -> Any:
        """Require every term to partially match at least one searchable field."""
        names = list(self._fields)
        if not names:
            return collection
        for term in self.general_terms(text):
            conditions = [PartialMatchFilter(name, term).to_q() for name in names]
            collection = collection.filter(reduce(lambda left, right: left | right, conditions))
        return collection

    def __repr__(self) -> str:
        model_name = getattr(self.model, "__name__", self.model)
        return f"{type(self).__name__}({model_name}, fields={list(self._fields)!r})"


class InMemorySearchContext(SearchContext):
    """Search context evaluating filters against in-memory rows."""

    @classmethod
    def from_context(cls, context: SearchContext) -> "InMemorySearchContext":
        """Build an in-memory twin sharing fields, filters and parameters."""
        twin = cls(
            context.model,
            {field.name: field for field in context.get_search_fields()},
            context.get_filters(),
            general_search_field=context.general_search_field,
            split_general_terms=context.split_general_terms,
        )
        twin._search_params = context.get_search_params()
        return twin

    def default_collection(self) -> InMemoryList:
        """Return an empty list of the model's rows."""

        return InMemoryList(model=self.model)

    def apply_filter(self, collection: Any, search_filter: SearchFilter) -> Any:
        """Keep the rows whose value matches ``search_filter``."""

        if search_filter.is_empty():
            return collection
        return self._ensure_list(collection).filter_by(
            lambda row: search_filter.matches(resolve_value(row, search_filter.get_name()))
        )

    def apply_general_search(self, collection: Any, text: str) -> Any:
        """Keep rows where every term partially matches some searchable field."""

        names = list(self._fields)
        if not names:
            return collection
        rows = self._ensure_list(collection)
        for term in self.general_terms(text):
            checks = [PartialMatchFilter(name, term) for name in names]
            rows = rows.filter_by(
                lambda row, checks=checks: any(
                    check.matches(resolve_value(row, check.get_name())) for check in checks
                )
            )
        return rows

    def _ensure_list(self, collection: Any) -> InMemoryList:
        if isinstance(collection, InMemoryList):
            return collection
        return InMemoryList(collection, model=self.model)


__all__ = ["SearchContext", "InMemorySearchContext", "split_terms"]


# The End
