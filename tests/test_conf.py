# -*- coding: utf-8 -*-
"""
test_conf

Settings loading and observers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from freegrid.conf import (
    GridSettings,
    configure,
    current_settings,
    register_settings_observer,
    unregister_settings_observer,
)


def test_defaults() -> None:
    settings = GridSettings()
    assert settings.search_field_prefix == "Search__"
    assert settings.general_search_field == "q"
    assert settings.default_filter == "partial"
    assert settings.field_url_segment == "field"


def test_from_env() -> None:
    settings = GridSettings.from_env(
        {
            "FREEGRID_GENERAL_SEARCH_FIELD": "keywords",
            "FREEGRID_FIELD_URL_SEGMENT": "/grid/",
            "FREEGRID_DEFAULT_FILTER": "EXACT",
            "OTHER_DATE_FORMAT": "%Y",
        }
    )
    assert settings.general_search_field == "keywords"
    assert settings.field_url_segment == "grid"
    assert settings.default_filter == "exact"
    assert settings.date_format == "%d/%m/%Y"


def test_configure_notifies_observers() -> None:
    seen: list[GridSettings] = []
    register_settings_observer(seen.append)
    try:
        custom = GridSettings(general_search_field="keywords")
        configure(custom)
        assert current_settings() is custom
        assert seen == [custom]
    finally:
        unregister_settings_observer(seen.append)


def test_settings_drive_grid_links() -> None:
    from freegrid import GridField

    configure(GridSettings(field_url_segment="grid"))
    assert GridField("teams").link("search") == "grid/teams/search"


# The End
