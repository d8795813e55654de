# -*- coding: utf-8 -*-
"""
test_tortoise_search

Grid search over Tortoise querysets, and its equivalence with the
in-memory path.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json

import pytest
from tortoise import Tortoise

from freegrid import FilterHeader, GridConfig, GridField, GridRequest, InMemoryList
from freegrid.adapters.tortoise import get_model_descriptor, is_queryset, resolve_field
from freegrid.search import InMemorySearchContext, SearchContext
from tests.grid_models import Mascot, Stadium, Team, init_db, seed_teams


def _grid(data_list, criteria: dict | None = None) -> GridField:
    request = GridRequest(query={"filter": {"testfield": criteria}}) if criteria else None
    return GridField("testfield", data_list=data_list, config=GridConfig.record_viewer(), request=request)


def _header(grid: GridField) -> FilterHeader:
    return grid.get_config().get_component_by_type(FilterHeader)


class TestTortoiseAdapter:
    @pytest.mark.asyncio
    async def test_descriptors_and_relation_paths(self) -> None:
        await init_db()
        try:
            descriptor = get_model_descriptor(Team)
            assert descriptor.pk_attr == "id"
            assert [f.name for f in descriptor.data_fields()] == ["name", "city"]
            assert descriptor.fields_map["cheerleader"].relation.kind == "fk"

            colour = resolve_field(Team, "cheerleader.hat.colour")
            assert colour is not None and colour.kind == "string"
            assert resolve_field(Team, "cheerleader.shoes") is None
            assert is_queryset(Team.all())
        finally:
            await Tortoise.close_connections()


class TestTortoiseModels:
    @pytest.mark.asyncio
    async def test_naming_and_scaffolding(self) -> None:
        await init_db()
        try:
            assert Team.get_plural_name() == "Teams"
            assert Stadium.get_plural_name() == "Stadiums"
            assert Stadium.get_summary_fields() == {"name": "Name", "capacity": "Capacity"}

            scaffolded = Stadium.get_searchable_fields()
            assert {name: field.filter for name, field in scaffolded.items()} == {
                "name": "partial",
                "capacity": "exact",
            }
            assert Mascot.get_searchable_fields() == {}

            searchable = Team.get_searchable_fields()
            assert list(searchable) == ["name", "city", "cheerleader.hat.colour"]
            assert searchable["cheerleader.hat.colour"].title == "Cheerleader hat colour"
        finally:
            await Tortoise.close_connections()

    @pytest.mark.asyncio
    async def test_capability(self) -> None:
        await init_db()
        try:
            assert _header(_grid(Team.all())).can_filter_any_columns(_grid(Team.all()))
            stadiums = _grid(Stadium.all())
            assert _header(stadiums).can_filter_any_columns(stadiums)
            mascots = _grid(Mascot.all())
            assert not _header(mascots).can_filter_any_columns(mascots)
            assert _header(mascots).get_html_fragments(mascots) is None
        finally:
            await Tortoise.close_connections()


class TestQuerysetSearch:
    @pytest.mark.asyncio
    async def test_queryable_and_in_memory_contexts_agree(self) -> None:
        await init_db()
        try:
            await seed_teams()
            queryable = _grid(Team.all())
            in_memory = _grid(InMemoryList(await Team.all(), model=Team))

            query_context = _header(queryable).get_search_context(queryable)
            memory_context = _header(in_memory).get_search_context(in_memory)
            assert type(query_context) is SearchContext
            assert isinstance(memory_context, InMemorySearchContext)

            def describe(context: SearchContext) -> list[tuple[str, str]]:
                return [(name, f.key) for name, f in context.get_filters().items()]

            assert describe(query_context) == describe(memory_context) == [
                ("name", "partial"),
                ("city", "partial"),
                ("cheerleader.hat.colour", "partial"),
            ]
        finally:
            await Tortoise.close_connections()

    @pytest.mark.asyncio
    async def test_queryset_is_narrowed(self) -> None:
        await init_db()
        try:
            await seed_teams()
            grid = _grid(Team.all(), {"Search__city": "land"})
            narrowed = grid.get_manipulated_list()
            assert is_queryset(narrowed)
            teams = await narrowed
            assert [team.name for team in teams] == ["Team 3"]

            grid = _grid(Team.all(), {"Search__cheerleader__hat__colour": "red"})
            teams = await grid.get_manipulated_list()
            assert [team.name for team in teams] == ["Team 1"]
        finally:
            await Tortoise.close_connections()

    @pytest.mark.asyncio
    async def test_general_search_on_queryset(self) -> None:
        await init_db()
        try:
            await seed_teams()
            grid = _grid(Team.all(), {"q": "team blue"})
            teams = await grid.get_manipulated_list()
            assert [team.name for team in teams] == ["Team 2"]

            grid = _grid(Team.all(), {"q": "team"})
            assert len(await grid.get_manipulated_list()) == 3
        finally:
            await Tortoise.close_connections()

    @pytest.mark.asyncio
    async def test_same_rows_as_in_memory_path(self) -> None:
        await init_db()
        try:
            await seed_teams()
            criteria = {"Search__name": "team", "Search__city": "ll"}
            from_queryset = await _grid(Team.all(), criteria).get_manipulated_list()
            rows = InMemoryList(await Team.all(), model=Team)
            from_memory = _grid(rows, criteria).get_manipulated_list()
            assert sorted(t.name for t in from_queryset) == sorted(t.name for t in from_memory) == ["Team 2"]
        finally:
            await Tortoise.close_connections()

    @pytest.mark.asyncio
    async def test_values_not_fitting_the_column_match_nothing(self) -> None:
        await init_db()
        try:
            await Stadium.create(name="Arena", capacity=5)
            await Stadium.create(name="Dome", capacity=50)
            stadiums = await Stadium.all()

            for value, expected in (("abc", []), ("5.7", []), ("5", ["Arena"]), (" 50 ", ["Dome"])):
                criteria = {"capacity": value}
                from_queryset = await _grid(Stadium.all(), criteria).get_manipulated_list()
                from_memory = _grid(InMemoryList(stadiums, model=Stadium), criteria).get_manipulated_list()
                assert [s.name for s in from_queryset] == [s.name for s in from_memory] == expected, value
        finally:
            await Tortoise.close_connections()

    @pytest.mark.asyncio
    async def test_fetch_rows_and_schema(self) -> None:
        await init_db()
        try:
            await seed_teams()
            grid = _grid(Team.all().order_by("id"), {"Search__name": "2"})
            assert await grid.fetch_rows() == [{"name": "Team 2", "city": "Wellington"}]
            with pytest.raises(TypeError):
                grid.render_rows()

            schema = json.loads(_header(grid).get_search_field_schema(grid))
            assert schema["placeholder"] == 'Search "Teams"'
            assert schema["filters"] == {"Search__name": "2"}

            form = _header(grid).get_search_form(grid)
            assert form.name == "TeamsSearchForm"
            assert [f.name for f in form.fields()] == [
                "Search__q",
                "Search__name",
                "Search__city",
                "Search__cheerleader__hat__colour",
            ]
        finally:
            await Tortoise.close_connections()


# The End
