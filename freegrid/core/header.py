# -*- coding: utf-8 -*-
"""
header

Filter header: the search panel above a grid and the narrowing of the
grid's collection by the submitted criteria.

Search lifecycle of one grid::

    no filter --(criteria submitted)--> filter submitted --> filter applied
        ^                                                          |
        +-------------------------- reset -------------------------+

Criteria are retained in the grid state under ``FilterHeader.columns``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TYPE_CHECKING

from markupsafe import Markup

from ..adapters.tortoise import is_queryset, lookup
from ..conf import current_settings
from ..forms import DropdownField, FormField, SearchForm, TextField
from ..schema.search import SearchFieldSchema
from ..search.context import InMemorySearchContext, SearchContext
from ..search.fields import SearchableField
from ..templates.service import DEFAULT_TEMPLATE_SERVICE, TemplateService
from .collections import is_in_memory
from .components import ActionProvider, DataManipulator, HTMLProvider
from .exceptions import ConfigurationError
from .interfaces import is_describable, is_searchable

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .grid import GridField

logger = logging.getLogger(__name__)

STATE_COMPONENT = "FilterHeader"
STATE_KEY = "columns"

FIELD_CLASSES = ("stacked", "no-change-track")
FORM_CLASS = "cms-search-form"


def _model_name(model: Any) -> str:
    return model.__name__ if isinstance(model, type) else type(model).__name__


class FilterHeader(DataManipulator, HTMLProvider, ActionProvider):
    """Search and filter panel for a grid."""

    def __init__(
        self,
        search_field: str | None = None,
        placeholder_text: str | None = None,
        *,
        template_service: TemplateService | None = None,
    ) -> None:
        self._search_field = search_field
        self._placeholder_text = placeholder_text
        self._search_context: SearchContext | None = None
        self._templates = template_service or DEFAULT_TEMPLATE_SERVICE

    # --- configuration ------------------------------------------------------

    def set_search_field(self, name: str | None) -> "FilterHeader":
        """Override the name of the free-text search field."""
        self._search_field = name
        return self

    def get_search_field(self) -> str | None:
        """Return the free-text search field override, if any."""

        return self._search_field

    def set_placeholder_text(self, text: str | None) -> "FilterHeader":
        """Override the placeholder of the free-text search field."""

        self._placeholder_text = text
        return self

    def get_placeholder_text(self) -> str | None:
        return self._placeholder_text

    def set_search_context(self, context: SearchContext | None) -> "FilterHeader":
        """Use ``context`` instead of the model's default search context."""
        self._search_context = context
        return self

    # --- capability checks --------------------------------------------------

    @staticmethod
    def check_data_type(data_list: Any) -> bool:
        """Return ``True`` for collections this component can narrow."""
        return is_queryset(data_list) or is_in_memory(data_list)

    def can_filter_any_columns(self, grid: "GridField") -> bool:
        """Return ``True`` when at least one field of the grid's model is searchable.

        Searchable fields that do not exist on the model still count; they
        are resolved when a query is built.
        """
        if not self.check_data_type(grid.get_list()):
            return False
        model = grid.get_model_class()
        if not is_searchable(model):
            return False
        return bool(model.get_searchable_fields())

    # --- search context -----------------------------------------------------

    def get_search_context(self, grid: "GridField") -> SearchContext:
        """Return the search context for the grid's model.

        In-memory collections get an :class:`InMemorySearchContext` exposing
        the same fields and filter kinds as the queryable context. A context
        given to :meth:`set_search_context` is copied, never modified.
        """
        if self._search_context is not None:
            context = self._search_context.copy()
        else:
            model = grid.get_model_class()
            if not is_searchable(model):
                raise ConfigurationError(
                    "Cannot dynamically instantiate SearchContext. Pass the SearchContext to"
                    " set_search_context() or implement a get_default_search_context() method"
                    f" on {_model_name(model)}"
                )
            context = model.get_default_search_context()
        if is_in_memory(grid.get_list()) and not isinstance(context, InMemorySearchContext):
            logger.debug("Grid '%s' is backed by an in-memory list; searching in memory", grid.name)
            context = InMemorySearchContext.from_context(context)
        if self._search_field:
            context = context.copy(general_search_field=self._search_field)
        return context

    # --- criteria -----------------------------------------------------------

    def get_submitted_criteria(self, grid: "GridField") -> dict[str, Any]:
        """Return ``filter[<grid name>]`` of the current request."""
        submitted = grid.get_request().request_var("filter") or {}
        if not isinstance(submitted, Mapping):
            return {}
        criteria = submitted.get(grid.name) or {}
        return dict(criteria) if isinstance(criteria, Mapping) else {}

    def get_retained_criteria(self, grid: "GridField") -> dict[str, Any]:
        """Return the criteria kept in the grid state."""

        return dict(grid.state.get(STATE_COMPONENT, STATE_KEY) or {})

    def get_filter_criteria(self, grid: "GridField") -> dict[str, Any]:
        """Retained criteria updated with the submitted ones."""
        criteria = self.get_retained_criteria(grid)
        criteria.update(self.get_submitted_criteria(grid))
        return {key: value for key, value in criteria.items() if value not in (None, "")}

    # --- DataManipulator ----------------------------------------------------

    def get_manipulated_data(self, grid: "GridField", data_list: Any) -> Any:
        """Narrow ``data_list`` by the filter criteria and retain submitted ones."""

        if not self.check_data_type(data_list):
            return data_list
        submitted = self.get_submitted_criteria(grid)
        criteria = self.get_filter_criteria(grid)
        if submitted:
            grid.state.set(STATE_COMPONENT, STATE_KEY, criteria)
        if not criteria:
            return data_list
        if self._search_context is None and not self.can_filter_any_columns(grid):
            return data_list
        context = self.get_search_context(grid)
        logger.debug("Grid '%s' applying filters %s", grid.name, context.get_applied_filters(criteria))
        return context.get_query(criteria, data_list)

    # --- schema and form ----------------------------------------------------

    def get_placeholder(self, model: Any) -> str:
        """Return the placeholder of the free-text search field."""
        if self._placeholder_text:
            return self._placeholder_text
        if is_describable(model):
            return f'Search "{model.get_plural_name()}"'
        return f'Search "{_model_name(model)}"'

    def get_search_field_schema(self, grid: "GridField") -> str:
        """Return the JSON bootstrap data of the search panel."""
        context = self.get_search_context(grid)
        context.set_search_params(self.get_filter_criteria(grid))
        prefix = current_settings().search_field_prefix
        schema = SearchFieldSchema(
            form_schema_url=grid.link("schema/SearchForm"),
            name=self._search_field or context.general_search_field,
            placeholder=self.get_placeholder(grid.get_model_class()),
            filters={prefix + lookup(name): value for name, value in context.get_search_params().items()},
            gridfield=grid.name,
        )
        return schema.to_json()

    def _form_field(self, prefix: str, field: SearchableField) -> FormField:
        name = prefix + field.form_name
        if field.choices:
            return DropdownField(name, field.title, [(c.const, c.title) for c in field.choices])
        return TextField(name, field.title)

    def get_search_form(self, grid: "GridField") -> SearchForm:
        """Return the search form: free-text search first, then one field per searchable field."""
        context = self.get_search_context(grid)
        model = grid.get_model_class()
        prefix = current_settings().search_field_prefix
        fields: list[FormField] = [
            TextField(prefix + context.general_search_field, self.get_placeholder(model)),
        ]
        fields.extend(self._form_field(prefix, field) for field in context.get_search_fields())
        for form_field in fields:
            form_field.add_extra_class(*FIELD_CLASSES)
        plural = model.get_plural_name() if is_describable(model) else _model_name(model)
        form = SearchForm(f"{plural.replace(' ', '')}SearchForm", fields, action=grid.link())
        form.add_extra_class(FORM_CLASS)
        criteria = context.normalize_params(self.get_filter_criteria(grid))
        form.load_data({prefix + lookup(name): value for name, value in criteria.items()})
        return form

    # --- HTMLProvider -------------------------------------------------------

    def get_html_fragments(self, grid: "GridField") -> dict[str, Markup] | None:
        """Return the search panel and its toggle button, or ``None`` when nothing is searchable."""

        if not self.can_filter_any_columns(grid):
            return None
        model = grid.get_model_class()
        return {
            "before": self._templates.render(
                "freegrid/filter_header_search.html",
                {"schema": self.get_search_field_schema(grid), "placeholder": self.get_placeholder(model)},
            ),
            "buttons-before-right": self._templates.render(
                "freegrid/filter_header_button.html",
                {"gridfield": grid.name},
            ),
        }

    # --- ActionProvider -----------------------------------------------------

    def get_actions(self, grid: "GridField") -> list[str]:
        """Return the actions of the search panel."""

        return ["filter", "reset"]

    def handle_action(
        self,
        grid: "GridField",
        action_name: str,
        arguments: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> None:
        """Store the posted criteria on ``filter``; clear them on ``reset``."""

        if action_name == "reset":
            grid.state.set(STATE_COMPONENT, STATE_KEY, {})
            return
        if action_name == "filter":
            submitted = data.get("filter") or {}
            criteria = submitted.get(grid.name) if isinstance(submitted, Mapping) else None
            if isinstance(criteria, Mapping):
                grid.state.set(
                    STATE_COMPONENT,
                    STATE_KEY,
                    {key: value for key, value in criteria.items() if value not in (None, "")},
                )


__all__ = ["FilterHeader", "STATE_COMPONENT", "STATE_KEY"]


# The End
