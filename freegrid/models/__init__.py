# -*- coding: utf-8 -*-
"""
models

Model-side helpers: grid capabilities for Tortoise models and generic rows.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .mixins import GridModelMixin
from .records import RecordData

__all__ = ["GridModelMixin", "RecordData"]


# The End
