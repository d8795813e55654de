# -*- coding: utf-8 -*-
"""
__init__

Grid components entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import GridSettings, configure, current_settings
from .core import (
    ConfigurationError,
    DataColumns,
    GridConfig,
    GridError,
    GridField,
    GridRequest,
    InMemoryList,
    MemoryGridStateStore,
    SessionGridStateStore,
)
from .core.header import FilterHeader
from .search import InMemorySearchContext, SearchContext
from .models import GridModelMixin, RecordData
from .api import GridRegistry, GridRouter
from .meta import __version__

# The End
