# -*- coding: utf-8 -*-
"""
search

Search contexts, filters and searchable field descriptions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .context import InMemorySearchContext, SearchContext
from .fields import SearchableField, normalize_searchable_fields, scaffold_searchable_fields
from .filters import SearchFilter, registry as filter_registry

__all__ = [
    "InMemorySearchContext",
    "SearchContext",
    "SearchableField",
    "SearchFilter",
    "filter_registry",
    "normalize_searchable_fields",
    "scaffold_searchable_fields",
]


# The End
