# -*- coding: utf-8 -*-
"""
core

Grid container, components and the value pipeline behind grid cells.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .collections import InMemoryList, ensure_collection, is_in_memory, resolve_value
from .columns import DataColumns
from .components import ActionProvider, ColumnProvider, DataManipulator, GridComponent, HTMLProvider
from .exceptions import (
    ActionNotFound,
    ConfigurationError,
    FormatTemplateError,
    GridError,
    GridNotFound,
    UnknownCastError,
    UnknownFilterKindError,
)
from .grid import GridConfig, GridField
from .interfaces import Describable, Searchable, is_describable, is_searchable
from .request import GridRequest, expand_brackets
from .state import GridState, GridStateStore, MemoryGridStateStore, SessionGridStateStore

__all__ = [
    "ActionNotFound",
    "ActionProvider",
    "ColumnProvider",
    "ConfigurationError",
    "DataColumns",
    "DataManipulator",
    "Describable",
    "FormatTemplateError",
    "GridComponent",
    "GridConfig",
    "GridError",
    "GridField",
    "GridNotFound",
    "GridRequest",
    "GridState",
    "GridStateStore",
    "HTMLProvider",
    "InMemoryList",
    "MemoryGridStateStore",
    "Searchable",
    "SessionGridStateStore",
    "UnknownCastError",
    "UnknownFilterKindError",
    "ensure_collection",
    "expand_brackets",
    "is_describable",
    "is_in_memory",
    "is_searchable",
    "resolve_value",
]


# The End
