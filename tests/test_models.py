# -*- coding: utf-8 -*-
"""
test_models

Model capabilities and generic records.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from freegrid.core.collections import InMemoryList, ensure_collection, resolve_value
from freegrid.core.interfaces import Describable, Searchable, is_describable, is_searchable
from freegrid.models import GridModelMixin, RecordData
from tests.grid_models import Player, WhatIsThis


class TestRecordData:
    def test_mapping_and_attribute_access(self) -> None:
        record = RecordData({"name": "Alice"}, city="Paris")
        assert record["name"] == "Alice"
        assert record.city == "Paris"
        assert dict(record) == {"name": "Alice", "city": "Paris"}
        with pytest.raises(AttributeError):
            record.missing
        with pytest.raises(AttributeError):
            record.name = "Bob"

    def test_has_no_capabilities(self) -> None:
        assert not is_describable(RecordData)
        assert not is_searchable(RecordData)


class TestCapabilities:
    def test_mixin_implements_both_interfaces(self) -> None:
        assert is_describable(Player) and is_searchable(Player)
        assert not is_describable(WhatIsThis)
        assert not is_describable(Player("a", "b"))

    def test_interfaces_require_implementation(self) -> None:
        class Bare(Describable, Searchable):
            pass

        with pytest.raises(NotImplementedError):
            Bare.get_summary_fields()
        with pytest.raises(NotImplementedError):
            Bare.get_default_search_context()
        assert Bare.get_general_search_field_name() == "q"

    def test_naming(self) -> None:
        class FootballClub(GridModelMixin):
            pass

        class Person(GridModelMixin):
            general_search_field = "keywords"

            class Meta:
                verbose_name = "Human"
                verbose_name_plural = "People"

        assert FootballClub.get_singular_name() == "Football Club"
        assert FootballClub.get_plural_name() == "Football Clubs"
        assert Person.get_plural_name() == "People"
        assert Person.get_singular_name() == "Human"
        assert Person.get_general_search_field_name() == "keywords"

    def test_summary_fields_forms(self) -> None:
        class Listed(GridModelMixin):
            summary_fields = ("name", "team.name")

        assert Listed.get_summary_fields() == {"name": "Name", "team.name": "Team name"}
        assert Listed.get_searchable_fields() == {}
        assert Player.get_summary_fields() == {"name": "Name", "city": "City"}


class TestCollections:
    def test_in_memory_list_is_immutable_and_typed(self) -> None:
        rows = InMemoryList([Player("a", "Paris"), Player("b", "Rome")])
        assert rows.model is Player
        assert isinstance(rows[:1], InMemoryList)
        narrowed = rows.filter_by(lambda row: row.city == "Rome")
        assert [row.name for row in narrowed] == ["b"]
        assert len(rows) == 2
        assert rows.column("city") == ["Paris", "Rome"]

    def test_empty_list_model(self) -> None:
        assert InMemoryList().model is None
        assert InMemoryList().set_model(Player).model is Player

    def test_ensure_collection(self) -> None:
        assert isinstance(ensure_collection(None), InMemoryList)
        assert isinstance(ensure_collection((1, 2)), InMemoryList)
        rows = InMemoryList()
        assert ensure_collection(rows) is rows

    def test_resolve_value(self) -> None:
        class Row:
            def __init__(self) -> None:
                self.team = {"name": "Reds"}

            def label(self) -> str:
                return "row"

        assert resolve_value(Row(), "team.name") == "Reds"
        assert resolve_value(Row(), "label") == "row"
        assert resolve_value(Row(), "team.city.name") is None


# The End
