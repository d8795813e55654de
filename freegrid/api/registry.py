# -*- coding: utf-8 -*-
"""
registry

Named grid factories served by the HTTP router.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from ..core.exceptions import GridNotFound
from ..core.grid import GridField
from ..core.request import GridRequest
from ..core.state import GridStateStore

logger = logging.getLogger(__name__)

GridFactory = Callable[[GridRequest, GridStateStore], GridField]


class GridRegistry:
    """Registry mapping grid names to the factories building them."""

    def __init__(self) -> None:
        self._factories: Dict[str, GridFactory] = {}

    def register(self, name: str) -> Callable[[GridFactory], GridFactory]:
        """Return a decorator registering a grid factory under ``name``."""

        def decorator(factory: GridFactory) -> GridFactory:
            self.add(name, factory)
            return factory

        return decorator

    def add(self, name: str, factory: GridFactory) -> None:
        if name in self._factories:
            logger.debug("Replacing grid factory '%s'", name)
        self._factories[name] = factory

    def names(self) -> list[str]:
        return list(self._factories)

    def build(self, name: str, request: GridRequest, store: GridStateStore) -> GridField:
        """Build the grid registered as ``name`` for ``request``."""
        try:
            factory = self._factories[name]
        except KeyError:
            raise GridNotFound(f"Grid '{name}' is not registered") from None
        return factory(request, store)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


__all__ = ["GridFactory", "GridRegistry"]


# The End
