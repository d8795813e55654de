# -*- coding: utf-8 -*-
"""
columns

Data columns: per-row, per-column rendering of grid cells.

Every cell goes through the same pipeline:

1. resolve the raw value (``callback`` from the column spec, otherwise the
   row field named like the column);
2. cast it to an HTML-safe string;
3. apply the optional formatting;
4. apply the grid-wide field escape table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, TYPE_CHECKING

from markupsafe import Markup

from .casting import nl2br
from .components import ColumnProvider
from .exceptions import ConfigurationError
from .formatting import FormatTemplate
from .interfaces import is_describable

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .grid import GridField

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[^\w]")

Formatter = Callable[[Any, Any], Any]


class DataColumns(ColumnProvider):
    """Render the configured display fields of every row."""

    def __init__(
        self,
        display_fields: Mapping[str, Any] | None = None,
        *,
        field_casting: Mapping[str, str] | None = None,
        field_formatting: Mapping[str, Formatter | str] | None = None,
    ) -> None:
        self._display_fields: Mapping[str, Any] = MappingProxyType({})
        self._field_casting: Mapping[str, str] = MappingProxyType({})
        self._field_formatting: Mapping[str, Formatter | FormatTemplate] = MappingProxyType({})
        if display_fields is not None:
            self.set_display_fields(display_fields)
        if field_casting is not None:
            self.set_field_casting(field_casting)
        if field_formatting is not None:
            self.set_field_formatting(field_formatting)

    # --- configuration ------------------------------------------------------

    def set_display_fields(self, fields: Mapping[str, Any]) -> "DataColumns":
        """Override the model's summary fields with these columns.

        Example: ``{"name": "Member name", "email": "Email address"}``.
        """
        if not isinstance(fields, Mapping):
            raise TypeError("Arguments passed to DataColumns.set_display_fields() must be a mapping")
        self._display_fields = MappingProxyType(dict(fields))
        return self

    def set_field_casting(self, casting: Mapping[str, str]) -> "DataColumns":
        """Cast columns by name, e.g. ``{"created": "Date.Nice"}``."""
        if not isinstance(casting, Mapping):
            raise TypeError("Arguments passed to DataColumns.set_field_casting() must be a mapping")
        self._field_casting = MappingProxyType(dict(casting))
        return self

    def get_field_casting(self) -> Mapping[str, str]:
        """Return the read-only column to cast mapping."""

        return self._field_casting

    def set_field_formatting(self, formatting: Mapping[str, Formatter | str]) -> "DataColumns":
        """Format columns after casting.

        Values are either ``callable(value, record)`` or a template string such
        as ``'<a href="custom-admin/$id">$value</a>'``. Templates are compiled
        here, so a malformed one fails immediately.
        """
        if not isinstance(formatting, Mapping):
            raise TypeError("Arguments passed to DataColumns.set_field_formatting() must be a mapping")
        compiled: dict[str, Formatter | FormatTemplate] = {}
        for column, spec in formatting.items():
            if isinstance(spec, str):
                compiled[column] = FormatTemplate(spec)
            elif callable(spec):
                compiled[column] = spec
            else:
                raise TypeError(f"Formatting for column '{column}' must be a string or a callable")
        self._field_formatting = MappingProxyType(compiled)
        return self

    def get_field_formatting(self) -> Mapping[str, Formatter | FormatTemplate]:
        """Return the read-only column to formatter mapping."""

        return self._field_formatting

    def get_display_fields(self, grid: "GridField") -> Mapping[str, Any]:
        """Return the configured columns or the model's summary fields."""
        if self._display_fields:
            return self._display_fields
        model = grid.get_model_class()
        if not is_describable(model):
            name = getattr(model, "__name__", repr(model))
            raise ConfigurationError(
                "Cannot dynamically determine columns. Pass the column names to set_display_fields()"
                f" or implement a get_summary_fields() method on {name}"
            )
        logger.debug("Using summary fields of %s as grid columns", model.__name__)
        return model.get_summary_fields()

    # --- ColumnProvider -----------------------------------------------------

    def augment_columns(self, grid: "GridField", columns: list[str]) -> None:
        """Append the display columns missing from ``columns``."""

        for column in self.get_columns_handled(grid):
            if column not in columns:
                columns.append(column)

    def get_columns_handled(self, grid: "GridField") -> list[str]:
        """Return the columns this component renders."""

        return list(self.get_display_fields(grid))

    def get_column_content(self, grid: "GridField", record: Any, column: str) -> Markup:
        """HTML for the column, content of the ``<td>`` element."""
        info = self.get_display_fields(grid).get(column)
        if isinstance(info, Mapping) and info.get("callback") is not None:
            value = info["callback"](record, column, grid)
        else:
            value = grid.get_data_field_value(record, column)

        value = self.cast_value(grid, column, value)
        value = self.format_value(grid, record, column, value)
        return self.escape_value(grid, value)

    def get_column_attributes(self, grid: "GridField", record: Any, column: str) -> dict[str, str]:
        """Return the HTML attributes of one cell."""

        return {"class": "col-" + _NON_WORD.sub("-", column or "")}

    def get_column_metadata(self, grid: "GridField", column: str) -> dict[str, Any]:
        """Return the column title."""

        info = self.get_display_fields(grid).get(column)
        title = None
        if isinstance(info, str):
            title = info
        elif isinstance(info, Mapping):
            title = info.get("title")
        return {"title": title}

    # --- pipeline -----------------------------------------------------------

    def cast_value(self, grid: "GridField", column: str, value: Any) -> Markup:
        """Turn ``value`` into a string that is safe to insert into HTML."""
        if column in self._field_casting:
            return grid.get_casted_value(value, self._field_casting[column])
        nice = getattr(value, "nice", None)
        if callable(nice):
            return nl2br(nice())
        if hasattr(value, "__html__"):
            return Markup(value.__html__())
        return nl2br("" if value is None else value)

    def format_value(self, grid: "GridField", record: Any, column: str, value: Any) -> Any:
        """Apply the formatting configured for ``column`` to a cast value."""

        formatter = self._field_formatting.get(column)
        if formatter is None:
            return value
        if isinstance(formatter, FormatTemplate):
            return formatter.render(value, record, grid.get_data_field_value)
        return formatter(value, record)

    def escape_value(self, grid: "GridField", value: Any) -> Markup:
        """Apply the grid's field escape table as a final pass."""
        text = "" if value is None else str(value)
        for search, replace in grid.field_escape:
            text = text.replace(search, replace)
        return Markup(text)


__all__ = ["DataColumns"]


# The End
