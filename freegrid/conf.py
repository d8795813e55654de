# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the FreeGrid package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Mapping


@dataclass
class GridSettings:
    """Container for grid configuration derived from environment variables."""

    search_field_prefix: str = "Search__"
    general_search_field: str = "q"
    default_filter: str = "partial"
    date_format: str = "%d/%m/%Y"
    datetime_format: str = "%d/%m/%Y %H:%M"
    currency_symbol: str = "$"
    field_url_segment: str = "field"

    def __post_init__(self) -> None:
        """Normalise values that are used to build names and URLs."""
        self.field_url_segment = self.field_url_segment.strip().strip("/") or "field"
        self.general_search_field = self.general_search_field.strip() or "q"
        self.default_filter = self.default_filter.strip().lower() or "partial"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FREEGRID_",
    ) -> "GridSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        defaults = cls()
        return cls(
            search_field_prefix=data.get("SEARCH_FIELD_PREFIX") or defaults.search_field_prefix,
            general_search_field=data.get("GENERAL_SEARCH_FIELD") or defaults.general_search_field,
            default_filter=data.get("DEFAULT_FILTER") or defaults.default_filter,
            date_format=data.get("DATE_FORMAT") or defaults.date_format,
            datetime_format=data.get("DATETIME_FORMAT") or defaults.datetime_format,
            currency_symbol=data.get("CURRENCY_SYMBOL") or defaults.currency_symbol,
            field_url_segment=data.get("FIELD_URL_SEGMENT") or defaults.field_url_segment,
        )


class SettingsManager:
    """Central storage for the active ``GridSettings`` instance."""

    def __init__(self, initial: GridSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[GridSettings], None]] = []

    def configure(self, settings: GridSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> GridSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = GridSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access reloads them."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[GridSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[GridSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: GridSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> GridSettings:
    """Return the active settings instance used by FreeGrid components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings; used by tests to restore defaults."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[GridSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[GridSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "GridSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
