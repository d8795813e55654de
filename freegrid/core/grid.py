# -*- coding: utf-8 -*-
"""
grid

Grid container and its component configuration.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence, Type, TypeVar

from markupsafe import Markup

from ..adapters.tortoise import is_queryset, queryset_model
from ..conf import current_settings
from .casting import registry as cast_registry
from .collections import ensure_collection, resolve_value
from .columns import DataColumns
from .components import ActionProvider, ColumnProvider, DataManipulator, GridComponent, HTMLProvider
from .exceptions import ActionNotFound
from .request import GridRequest
from .state import GridState, GridStateStore

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=GridComponent)


class GridConfig:
    """Ordered list of grid components."""

    def __init__(self, components: Iterable[GridComponent] = ()) -> None:
        self._components: list[GridComponent] = []
        for component in components:
            self.add_component(component)

    def add_component(self, component: GridComponent) -> "GridConfig":
        """Append ``component``; components run in insertion order."""

        self._components.append(component)
        return self

    def add_components(self, *components: GridComponent) -> "GridConfig":
        """Append several components at once."""

        for component in components:
            self.add_component(component)
        return self

    def remove_components_by_type(self, component_type: Type[GridComponent]) -> "GridConfig":
        """Drop every component that is an instance of ``component_type``."""

        self._components = [c for c in self._components if not isinstance(c, component_type)]
        return self

    def get_components(self) -> list[GridComponent]:
        """Return the components in order."""

        return list(self._components)

    def get_components_by_type(self, component_type: Type[C]) -> list[C]:
        """Return every component that is an instance of ``component_type``."""

        return [c for c in self._components if isinstance(c, component_type)]

    def get_component_by_type(self, component_type: Type[C]) -> C | None:
        """Return the first component of ``component_type`` or ``None``."""

        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    @classmethod
    def base(cls) -> "GridConfig":
        """Config rendering the display fields only."""
        return cls([DataColumns()])

    @classmethod
    def record_viewer(cls) -> "GridConfig":
        """Config rendering the display fields with the search panel."""
        from .header import FilterHeader

        return cls([DataColumns(), FilterHeader()])


class GridField:
    """Tabular view over a collection of rows.

    The grid itself knows nothing about columns or searching: it asks its
    components, in config order, for each of those concerns.
    """

    def __init__(
        self,
        name: str,
        title: str | None = None,
        data_list: Any = None,
        config: GridConfig | None = None,
        *,
        request: GridRequest | None = None,
        state_store: GridStateStore | None = None,
        field_escape: Sequence[tuple[str, str]] | None = None,
        base_url: str = "",
    ) -> None:
        self.name = name
        self.title = title
        self._list = ensure_collection(data_list)
        self._config = config if config is not None else GridConfig.base()
        self._model_class: type[Any] | None = None
        self._request = request or GridRequest()
        self.state = GridState(name, state_store)
        self.field_escape: tuple[tuple[str, str], ...] = tuple(field_escape or ())
        self.base_url = base_url

    # --- accessors ------------------------------------------------------------

    def get_list(self) -> Any:
        """Return the unfiltered data list."""

        return self._list

    def set_list(self, data_list: Any) -> "GridField":
        """Replace the data list."""

        self._list = ensure_collection(data_list)
        return self

    def get_config(self) -> GridConfig:
        return self._config

    def get_request(self) -> GridRequest:
        """Return the request the grid is rendered for."""

        return self._request

    def set_request(self, request: GridRequest) -> "GridField":
        self._request = request
        return self

    def set_model_class(self, model: type[Any]) -> "GridField":
        """Set the row model explicitly instead of detecting it."""

        self._model_class = model
        return self

    def get_model_class(self) -> type[Any]:
        """Return the row class: explicit, from the collection, or ``RecordData``."""
        if self._model_class is not None:
            return self._model_class
        if is_queryset(self._list):
            return queryset_model(self._list)
        model = getattr(self._list, "model", None)
        if model is not None:
            return model
        from ..models.records import RecordData

        return RecordData

    def link(self, action: str | None = None) -> str:
        """Return ``[base_url/]field/<name>[/action]``."""
        parts = [
            self.base_url.strip("/"),
            current_settings().field_url_segment,
            self.name,
            (action or "").strip("/"),
        ]
        return "/".join(part for part in parts if part)

    # --- values ---------------------------------------------------------------

    def get_casted_value(self, value: Any, cast: str) -> Markup:
        """Cast ``value`` with the named cast, e.g. ``Date.Nice``."""
        return cast_registry.cast(value, cast)

    def get_data_field_value(self, record: Any, field_name: str) -> Any:
        """Return the value of ``field_name`` on ``record``; missing values are ``""``."""
        value = resolve_value(record, field_name)
        return "" if value is None else value

    # --- columns --------------------------------------------------------------

    def _column_providers(self) -> list[ColumnProvider]:
        return self._config.get_components_by_type(ColumnProvider)

    def get_columns(self) -> list[str]:
        """Return the columns gathered from every column provider."""

        columns: list[str] = []
        for provider in self._column_providers():
            provider.augment_columns(self, columns)
        return columns

    def _providers_for(self, column: str) -> list[ColumnProvider]:
        return [p for p in self._column_providers() if column in p.get_columns_handled(self)]

    def get_column_content(self, record: Any, column: str) -> Markup:
        """Return the rendered cell of ``record`` in ``column``."""

        parts = [
            content
            for provider in self._providers_for(column)
            if (content := provider.get_column_content(self, record, column)) is not None
        ]
        return Markup("").join(parts)

    def get_column_attributes(self, record: Any, column: str) -> dict[str, str]:
        """Return the HTML attributes of one cell."""

        merged: dict[str, str] = {}
        for provider in self._providers_for(column):
            for key, value in provider.get_column_attributes(self, record, column).items():
                if key == "class" and merged.get("class"):
                    merged["class"] = f"{merged['class']} {value}"
                else:
                    merged[key] = value
        return merged

    def get_column_metadata(self, column: str) -> dict[str, Any]:
        """Return the metadata, such as the title, of ``column``."""

        merged: dict[str, Any] = {}
        for provider in self._providers_for(column):
            merged.update(provider.get_column_metadata(self, column))
        return merged

    # --- data -----------------------------------------------------------------

    def get_manipulated_list(self) -> Any:
        """Return the data list after every data manipulator ran."""

        data = self._list
        for manipulator in self._config.get_components_by_type(DataManipulator):
            data = manipulator.get_manipulated_data(self, data)
        return data

    def _render(self, records: Iterable[Any]) -> list[dict[str, Markup]]:
        columns = self.get_columns()
        return [{column: self.get_column_content(record, column) for column in columns} for record in records]

    def render_rows(self) -> list[dict[str, Markup]]:
        """Render every row of an in-memory grid as ``{column: html}``."""
        data = self.get_manipulated_list()
        if is_queryset(data):
            raise TypeError("Queryset-backed grids must be rendered with 'await fetch_rows()'")
        return self._render(data)

    async def fetch_rows(self) -> list[dict[str, Markup]]:
        """Evaluate the collection (awaiting querysets) and render every row."""
        data = self.get_manipulated_list()
        records = await data if is_queryset(data) else list(data)
        return self._render(records)

    # --- fragments and actions --------------------------------------------------

    def get_html_fragments(self) -> dict[str, Markup]:
        """Return HTML fragments of all providers keyed by placement."""

        fragments: dict[str, Markup] = {}
        for provider in self._config.get_components_by_type(HTMLProvider):
            for region, html in (provider.get_html_fragments(self) or {}).items():
                fragments[region] = fragments.get(region, Markup("")) + html
        return fragments

    def get_actions(self) -> list[str]:
        """Return the names of the actions the components handle."""

        actions: list[str] = []
        for provider in self._config.get_components_by_type(ActionProvider):
            actions.extend(a for a in provider.get_actions(self) if a not in actions)
        return actions

    def handle_action(
        self,
        action_name: str,
        arguments: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Dispatch ``action_name`` to the components listing it."""
        name = action_name.lower()
        handlers = [
            provider
            for provider in self._config.get_components_by_type(ActionProvider)
            if name in [a.lower() for a in provider.get_actions(self)]
        ]
        if not handlers:
            raise ActionNotFound(f"Grid '{self.name}' has no action '{action_name}'")
        result = None
        for provider in handlers:
            logger.debug("Grid '%s' dispatching action '%s' to %s", self.name, name, type(provider).__name__)
            result = provider.handle_action(self, name, arguments or {}, data or {})
        return result

    def __repr__(self) -> str:
        return f"GridField({self.name!r}, model={getattr(self.get_model_class(), '__name__', None)!r})"


__all__ = ["GridConfig", "GridField"]


# The End
