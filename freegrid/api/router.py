# -*- coding: utf-8 -*-
"""
router

FastAPI endpoints backing the client-side search panel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from ..conf import current_settings
from ..core.exceptions import ActionNotFound, GridNotFound
from ..core.grid import GridField
from ..core.header import FilterHeader
from ..core.request import GridRequest
from ..core.state import GridStateStore, MemoryGridStateStore
from .registry import GridRegistry

logger = logging.getLogger(__name__)


class GridRouter:
    """Expose registered grids under ``/<field segment>/{grid}``."""

    def __init__(self, registry: GridRegistry, state_store: GridStateStore | None = None) -> None:
        self.registry = registry
        self.state_store = state_store or MemoryGridStateStore()
        self._router: APIRouter | None = None

    @property
    def router(self) -> APIRouter:
        if self._router is None:
            self._router = self.build_router()
        return self._router

    async def _grid_request(self, request: Request) -> GridRequest:
        body: dict[str, Any] = {}
        if request.method == "POST" and await request.body():
            payload = await request.json()
            if isinstance(payload, dict):
                body = payload
        return GridRequest.from_pairs(
            request.query_params.multi_items(),
            method=request.method,
            url=str(request.url),
            body=body,
        )

    def get_grid(self, name: str, request: GridRequest) -> GridField:
        try:
            return self.registry.build(name, request, self.state_store)
        except GridNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    @staticmethod
    def get_filter_header(grid: GridField) -> FilterHeader:
        header = grid.get_config().get_component_by_type(FilterHeader)
        if header is None:
            raise HTTPException(status_code=404, detail=f"Grid '{grid.name}' has no search panel")
        return header

    def build_router(self) -> APIRouter:
        """Create the API router with the search and action endpoints."""
        router = APIRouter()
        segment = current_settings().field_url_segment

        @router.get(f"/{segment}/{{grid_name}}/schema/SearchForm")
        async def search_form_schema(grid_name: str, request: Request) -> dict[str, Any]:
            grid = self.get_grid(grid_name, await self._grid_request(request))
            return self.get_filter_header(grid).get_search_form(grid).get_schema()

        @router.get(f"/{segment}/{{grid_name}}/search")
        async def search_field_schema(grid_name: str, request: Request) -> Response:
            grid = self.get_grid(grid_name, await self._grid_request(request))
            schema = self.get_filter_header(grid).get_search_field_schema(grid)
            return Response(content=schema, media_type="application/json")

        @router.post(f"/{segment}/{{grid_name}}/action/{{action}}")
        async def grid_action(grid_name: str, action: str, request: Request) -> dict[str, Any]:
            grid_request = await self._grid_request(request)
            grid = self.get_grid(grid_name, grid_request)
            try:
                grid.handle_action(action, grid_request.query, grid_request.data)
            except ActionNotFound as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
            logger.debug("Grid '%s' handled action '%s'", grid_name, action)
            return {"grid": grid.name, "action": action.lower(), "state": grid.state.to_dict()}

        return router


__all__ = ["GridRouter"]


# The End
