# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the grid core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for grid-specific exceptions."""


class ConfigurationError(GridError):
    """Raised when a grid or model is missing required configuration.

    These errors are aimed at the developer wiring the grid, never at the
    end user of the rendered page.
    """


class FormatTemplateError(ConfigurationError):
    """Raised when a field formatting template cannot be parsed."""


class UnknownCastError(ConfigurationError):
    """Raised when a field casting names an unregistered cast."""


class UnknownFilterKindError(ConfigurationError):
    """Raised when a searchable field names an unregistered filter kind."""


class ActionNotFound(GridError):
    """Raised when no grid component handles an action."""


class GridNotFound(GridError):
    """Raised when a grid is not registered."""


__all__ = [
    "GridError",
    "ConfigurationError",
    "FormatTemplateError",
    "UnknownCastError",
    "UnknownFilterKindError",
    "ActionNotFound",
    "GridNotFound",
]


# The End
