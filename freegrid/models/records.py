# -*- coding: utf-8 -*-
"""
records

Generic in-memory row without any grid capability.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator


class RecordData(Mapping):
    """Read-only mapping whose keys are also readable as attributes."""

    def __init__(self, data: Mapping[str, Any] | None = None, **values: Any) -> None:
        merged = dict(data or {})
        merged.update(values)
        object.__setattr__(self, "_data", merged)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RecordData is read-only")

    def __repr__(self) -> str:
        return f"RecordData({self._data!r})"


__all__ = ["RecordData"]


# The End
