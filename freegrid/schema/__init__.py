# -*- coding: utf-8 -*-
"""
schema

Pydantic descriptors and wire schemas.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .descriptors import Choice, FieldDescriptor, ModelDescriptor, Relation
from .search import SearchFieldSchema

__all__ = ["Choice", "FieldDescriptor", "ModelDescriptor", "Relation", "SearchFieldSchema"]


# The End
