# -*- coding: utf-8 -*-
"""
collections

In-memory row collection and row value access helpers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterable, Iterator


def resolve_value(record: Any, path: str) -> Any:
    """Return the value found at dotted ``path`` on ``record``.

    Each segment is looked up as a mapping key or an attribute. Bound methods
    are called without arguments. Relations that still need to be awaited
    (unfetched ORM relations) resolve to ``None``, as does any missing
    segment.
    """
    current = record
    for part in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(part)
        else:
            current = getattr(current, part, None)
        if inspect.ismethod(current):
            current = current()
        if inspect.isawaitable(current):
            return None
    return current


class InMemoryList(Sequence):
    """Immutable list of rows that is filtered in Python rather than in SQL."""

    def __init__(self, items: Iterable[Any] = (), model: type[Any] | None = None) -> None:
        """Store ``items`` and the optional row ``model`` class."""
        self._items: tuple[Any, ...] = tuple(items)
        self._model = model

    @property
    def model(self) -> type[Any] | None:
        """Return the declared row class or the class of the first row."""
        if self._model is not None:
            return self._model
        if self._items:
            return type(self._items[0])
        return None

    def set_model(self, model: type[Any]) -> "InMemoryList":
        """Declare the row class even when the list is empty."""
        self._model = model
        return self

    def filter_by(self, predicate: Callable[[Any], bool]) -> "InMemoryList":
        """Return a new list holding only rows accepted by ``predicate``."""
        return InMemoryList((row for row in self._items if predicate(row)), model=self._model)

    def column(self, name: str) -> list[Any]:
        """Return the values of ``name`` for every row."""
        return [resolve_value(row, name) for row in self._items]

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return InMemoryList(self._items[index], model=self._model)
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"InMemoryList({list(self._items)!r})"


def is_in_memory(collection: Any) -> bool:
    """Return ``True`` when ``collection`` is evaluated in Python."""
    return isinstance(collection, InMemoryList)


def ensure_collection(data: Any) -> Any:
    """Wrap plain Python sequences into :class:`InMemoryList`."""
    if data is None:
        return InMemoryList()
    if isinstance(data, (list, tuple)):
        return InMemoryList(data)
    return data


__all__ = ["InMemoryList", "resolve_value", "is_in_memory", "ensure_collection"]


# The End
