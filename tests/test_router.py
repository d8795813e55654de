# -*- coding: utf-8 -*-
"""
test_router

HTTP endpoints of the grid search panel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from freegrid import GridConfig, GridField, GridRegistry, GridRouter, MemoryGridStateStore
from freegrid.core.exceptions import GridNotFound
from freegrid.core.request import GridRequest
from freegrid.core.state import GridStateStore
from tests.grid_models import players


def _registry() -> GridRegistry:
    registry = GridRegistry()

    @registry.register("players")
    def build_players(request: GridRequest, store: GridStateStore) -> GridField:
        return GridField(
            "players",
            "Players",
            players(),
            GridConfig.record_viewer(),
            request=request,
            state_store=store,
        )

    return registry


class TestGridRegistry:
    def test_unknown_grid(self) -> None:
        with pytest.raises(GridNotFound):
            _registry().build("nope", GridRequest(), MemoryGridStateStore())

    def test_names(self) -> None:
        registry = _registry()
        assert registry.names() == ["players"]
        assert "players" in registry


class TestGridRouter:
    def _client(self) -> TestClient:
        app = FastAPI()
        app.include_router(GridRouter(_registry()).router, prefix="/admin")
        return TestClient(app)

    def test_search_form_schema(self) -> None:
        response = self._client().get("/admin/field/players/schema/SearchForm")
        assert response.status_code == 200
        schema = response.json()
        assert schema["name"] == "PlayersSearchForm"
        assert [f["name"] for f in schema["fields"]] == ["Search__q", "Search__name", "Search__city"]

    def test_search_field_schema_honours_query_criteria(self) -> None:
        response = self._client().get("/admin/field/players/search", params={"filter[players][name]": "Alice"})
        assert response.status_code == 200
        payload = response.json()
        assert payload["formSchemaUrl"] == "field/players/schema/SearchForm"
        assert payload["gridfield"] == "players"
        assert payload["filters"] == {"Search__name": "Alice"}

    def test_actions_update_retained_state(self) -> None:
        client = self._client()
        response = client.post(
            "/admin/field/players/action/filter",
            json={"filter": {"players": {"city": "Paris"}}},
        )
        assert response.status_code == 200
        assert response.json()["state"] == {"FilterHeader": {"columns": {"city": "Paris"}}}
        assert client.get("/admin/field/players/search").json()["filters"] == {"Search__city": "Paris"}

        response = client.post("/admin/field/players/action/reset")
        assert response.status_code == 200
        assert response.json()["state"] == {"FilterHeader": {"columns": {}}}
        assert client.get("/admin/field/players/search").json()["filters"] == {}

    def test_unknown_action(self) -> None:
        response = self._client().post("/admin/field/players/action/explode")
        assert response.status_code == 400

    def test_unknown_grid(self) -> None:
        assert self._client().get("/admin/field/nope/search").status_code == 404
        assert self._client().post("/admin/field/nope/action/reset").status_code == 404


# The End
