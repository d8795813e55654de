# -*- coding: utf-8 -*-
"""
api

HTTP surface of the grids.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .registry import GridFactory, GridRegistry
from .router import GridRouter

__all__ = ["GridFactory", "GridRegistry", "GridRouter"]


# The End
