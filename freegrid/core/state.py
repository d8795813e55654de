# -*- coding: utf-8 -*-
"""
state

Retained per-grid UI state and the stores that keep it between requests.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, MutableMapping


class GridStateStore(ABC):
    """Storage for grid state keyed by grid name."""

    @abstractmethod
    def load(self, grid_name: str) -> dict[str, Any]:
        """Return the stored state for ``grid_name`` or an empty dict."""

    @abstractmethod
    def save(self, grid_name: str, data: dict[str, Any]) -> None:
        """Persist ``data`` as the state of ``grid_name``."""


class MemoryGridStateStore(GridStateStore):
    """Keep grid state in a process-local dictionary."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}

    def load(self, grid_name: str) -> dict[str, Any]:
        """Return the stored state of ``grid_name``."""

        return copy.deepcopy(self._data.get(grid_name, {}))

    def save(self, grid_name: str, data: dict[str, Any]) -> None:
        """Store ``data`` as the state of ``grid_name``."""

        self._data[grid_name] = copy.deepcopy(data)


class SessionGridStateStore(GridStateStore):
    """Keep grid state inside a session mapping such as ``request.session``."""

    key_prefix = "freegrid:"

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    def load(self, grid_name: str) -> dict[str, Any]:
        """Return the stored state of ``grid_name``."""

        return copy.deepcopy(self._session.get(self.key_prefix + grid_name) or {})

    def save(self, grid_name: str, data: dict[str, Any]) -> None:
        """Store ``data`` as the state of ``grid_name``."""

        self._session[self.key_prefix + grid_name] = copy.deepcopy(data)


class GridState:
    """Namespaced view of one grid's retained state.

    Values are grouped by component name. Every write goes straight to the
    backing store; a missing store is replaced by a private in-memory one.
    """

    def __init__(self, grid_name: str, store: GridStateStore | None = None) -> None:
        self._grid_name = grid_name
        self._store = store or MemoryGridStateStore()
        self._data = self._store.load(grid_name)

    @property
    def store(self) -> GridStateStore:
        return self._store

    def get(self, component: str, key: str, default: Any = None) -> Any:
        """Return ``key`` stored for ``component``."""
        return copy.deepcopy(self._data.get(component, {}).get(key, default))

    def set(self, component: str, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` for ``component``."""
        self._data.setdefault(component, {})[key] = copy.deepcopy(value)
        self._store.save(self._grid_name, self._data)

    def clear(self, component: str, key: str | None = None) -> None:
        """Drop ``key`` (or every key) stored for ``component``."""
        if component not in self._data:
            return
        if key is None:
            del self._data[component]
        else:
            self._data[component].pop(key, None)
        self._store.save(self._grid_name, self._data)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the whole state."""
        return copy.deepcopy(self._data)


__all__ = ["GridStateStore", "MemoryGridStateStore", "SessionGridStateStore", "GridState"]


# The End
