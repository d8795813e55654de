# -*- coding: utf-8 -*-
"""
components

Roles a grid component can play.

A component subclasses one or more of these bases and the grid asks every
component playing a role when it needs that role.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING, Mapping

from markupsafe import Markup

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .grid import GridField


class GridComponent:
    """Marker base for everything that can be added to a grid config."""


class ColumnProvider(GridComponent, ABC):
    """Contribute columns and render their cells."""

    @abstractmethod
    def augment_columns(self, grid: "GridField", columns: list[str]) -> None:
        """Add handled columns to the shared, ordered ``columns`` list."""

    @abstractmethod
    def get_columns_handled(self, grid: "GridField") -> list[str]:
        """Names of all columns affected by this component."""

    @abstractmethod
    def get_column_content(self, grid: "GridField", record: Any, column: str) -> Markup | None:
        """HTML of the cell; ``None`` to skip."""

    @abstractmethod
    def get_column_attributes(self, grid: "GridField", record: Any, column: str) -> dict[str, str]:
        """Attributes of the element wrapping the cell content."""

    @abstractmethod
    def get_column_metadata(self, grid: "GridField", column: str) -> dict[str, Any]:
        """Arbitrary metadata about ``column``, e.g. its title."""


class DataManipulator(GridComponent, ABC):
    """Narrow, sort or page the grid's collection."""

    @abstractmethod
    def get_manipulated_data(self, grid: "GridField", data_list: Any) -> Any:
        """Return a collection derived from ``data_list``."""


class HTMLProvider(GridComponent, ABC):
    """Render named HTML fragments around the grid."""

    @abstractmethod
    def get_html_fragments(self, grid: "GridField") -> Mapping[str, Markup] | None:
        """Return fragments keyed by region name, or ``None``."""


class ActionProvider(GridComponent, ABC):
    """Handle user actions posted to the grid."""

    @abstractmethod
    def get_actions(self, grid: "GridField") -> list[str]:
        """Names of the actions handled by this component."""

    @abstractmethod
    def handle_action(
        self,
        grid: "GridField",
        action_name: str,
        arguments: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> Any:
        """Handle ``action_name``."""


__all__ = [
    "GridComponent",
    "ColumnProvider",
    "DataManipulator",
    "HTMLProvider",
    "ActionProvider",
]


# The End
