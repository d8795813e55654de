# -*- coding: utf-8 -*-
"""
test_columns

Rendering of grid cells by the data columns component.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import date
from types import MappingProxyType

import pytest
from markupsafe import Markup

from freegrid import DataColumns, GridConfig, GridField, RecordData
from freegrid.core.exceptions import ConfigurationError, FormatTemplateError, UnknownCastError
from tests.grid_models import Player, WhatIsThis, players


class NiceValue:
    def nice(self) -> str:
        return "first\nsecond & third"


class Badge:
    def __html__(self) -> str:
        return "<span class=\"badge\">ok</span>"


def _grid(rows, columns: DataColumns | None = None, **kwargs) -> GridField:
    config = GridConfig([columns or DataColumns()])
    return GridField("testfield", data_list=rows, config=config, **kwargs)


class TestDisplayFields:
    def test_summary_fields_are_the_default_columns(self) -> None:
        grid = _grid(players())
        assert grid.get_columns() == ["name", "city"]
        assert grid.get_column_metadata("city") == {"title": "City"}

    def test_configured_columns_override_summary_fields(self) -> None:
        columns = DataColumns({"city": "Town"})
        grid = _grid(players(), columns)
        assert grid.get_columns() == ["city"]
        assert grid.get_column_metadata("city") == {"title": "Town"}
        assert isinstance(columns.get_display_fields(grid), MappingProxyType)

    def test_model_without_summary_fields_requires_configuration(self) -> None:
        grid = _grid([WhatIsThis("x")])
        with pytest.raises(ConfigurationError) as exc:
            grid.get_columns()
        assert "set_display_fields()" in str(exc.value)
        assert "get_summary_fields()" in str(exc.value)
        assert "WhatIsThis" in str(exc.value)

    def test_record_data_requires_configuration(self) -> None:
        grid = _grid([RecordData(name="x")])
        with pytest.raises(ConfigurationError):
            grid.get_columns()

    def test_setters_reject_non_mappings(self) -> None:
        columns = DataColumns()
        with pytest.raises(TypeError):
            columns.set_display_fields(["name"])  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            columns.set_field_casting(["Date.Nice"])  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            columns.set_field_formatting("$value")  # type: ignore[arg-type]

    def test_columns_are_deduplicated_across_providers(self) -> None:
        config = GridConfig([DataColumns({"name": "Name"}), DataColumns({"name": "Name", "city": "City"})])
        grid = GridField("testfield", data_list=players(), config=config)
        assert grid.get_columns() == ["name", "city"]


class TestColumnContent:
    def test_plain_values_are_escaped(self) -> None:
        row = RecordData(name="<b>Tom & Jerry</b>")
        grid = _grid([row], DataColumns({"name": "Name"}))
        content = grid.get_column_content(row, "name")
        assert isinstance(content, Markup)
        assert content == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"

    def test_missing_values_render_empty(self) -> None:
        row = RecordData(name="x")
        grid = _grid([row], DataColumns({"missing": "Missing", "team.name": "Team"}))
        assert grid.get_column_content(row, "missing") == ""
        assert grid.get_column_content(row, "team.name") == ""

    def test_dotted_columns_traverse_relations(self) -> None:
        row = Player("Alice", "Paris", team=RecordData(name="Reds"))
        grid = _grid([row], DataColumns({"team.name": "Team"}))
        assert grid.get_column_content(row, "team.name") == "Reds"

    def test_newlines_become_line_breaks(self) -> None:
        row = RecordData(notes="one\r\ntwo")
        grid = _grid([row], DataColumns({"notes": "Notes"}))
        assert grid.get_column_content(row, "notes") == "one<br />\ntwo"

    def test_nice_values_and_html_values(self) -> None:
        row = RecordData(nice=NiceValue(), badge=Badge())
        grid = _grid([row], DataColumns({"nice": "Nice", "badge": "Badge"}))
        assert grid.get_column_content(row, "nice") == "first<br />\nsecond &amp; third"
        assert grid.get_column_content(row, "badge") == '<span class="badge">ok</span>'

    def test_callback_supplies_the_value(self) -> None:
        row = RecordData(first="Ada", last="Lovelace")
        columns = DataColumns(
            {"full": {"title": "Full name", "callback": lambda record, column, grid: f"{record.first} {record.last}"}}
        )
        grid = _grid([row], columns)
        assert grid.get_column_content(row, "full") == "Ada Lovelace"
        assert grid.get_column_metadata("full") == {"title": "Full name"}

    def test_casting(self) -> None:
        row = RecordData(created=date(2024, 3, 9), active=True)
        columns = DataColumns(
            {"created": "Created", "active": "Active"},
            field_casting={"created": "Date.Nice", "active": "Boolean->Nice"},
        )
        grid = _grid([row], columns)
        assert grid.get_column_content(row, "created") == "09/03/2024"
        assert grid.get_column_content(row, "active") == "Yes"

    def test_unknown_cast_raises(self) -> None:
        row = RecordData(created="2024-03-09")
        grid = _grid([row], DataColumns({"created": "Created"}, field_casting={"created": "Nope.Nice"}))
        with pytest.raises(UnknownCastError):
            grid.get_column_content(row, "created")

    def test_callable_formatting(self) -> None:
        row = RecordData(name="Alice", id=7)
        columns = DataColumns(
            {"name": "Name"},
            field_formatting={"name": lambda value, record: Markup("<em>%s</em>") % value},
        )
        grid = _grid([row], columns)
        assert grid.get_column_content(row, "name") == "<em>Alice</em>"

    def test_template_formatting(self) -> None:
        row = RecordData(name="A&B", id=5)
        columns = DataColumns(
            {"name": "Name"},
            field_formatting={"name": '<a href="custom-admin/$id">$value</a>'},
        )
        grid = _grid([row], columns)
        assert grid.get_column_content(row, "name") == '<a href="custom-admin/5">A&amp;B</a>'

    def test_malformed_template_fails_at_configuration(self) -> None:
        with pytest.raises(FormatTemplateError):
            DataColumns({"name": "Name"}, field_formatting={"name": "<a href='{$id'>$value</a>"})

    def test_field_escape_is_applied_last(self) -> None:
        row = RecordData(name="a|b|c")
        grid = _grid([row], DataColumns({"name": "Name"}), field_escape=[("|", "\\|"), ("a", "A")])
        assert grid.get_column_content(row, "name") == "A\\|b\\|c"

    def test_rendering_is_repeatable(self) -> None:
        row = RecordData(name="x\ny")
        grid = _grid([row], DataColumns({"name": "Name"}, field_formatting={"name": "[$value]"}))
        first = grid.get_column_content(row, "name")
        assert grid.get_column_content(row, "name") == first


class TestColumnAttributes:
    def test_class_is_derived_from_the_column_name(self) -> None:
        row = RecordData(name="x")
        grid = _grid([row], DataColumns({"My Field!": "Title"}))
        assert grid.get_column_attributes(row, "My Field!") == {"class": "col-My-Field-"}

    def test_dotted_column_class(self) -> None:
        row = RecordData(name="x")
        grid = _grid([row], DataColumns({"team.name": "Team"}))
        assert grid.get_column_attributes(row, "team.name") == {"class": "col-team-name"}

    def test_render_rows(self) -> None:
        grid = _grid(players()[:2])
        assert grid.render_rows() == [
            {"name": "Alice", "city": "Paris"},
            {"name": "Bob", "city": "Berlin"},
        ]

    def test_model_class_of_a_player_list(self) -> None:
        grid = _grid(players())
        assert grid.get_model_class() is Player


# The End
