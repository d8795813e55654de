# -*- coding: utf-8 -*-
"""
interfaces

Capabilities a row model may implement to cooperate with grid components.

The interfaces are plain base classes rather than ``ABC`` subclasses so that
they can be mixed into Tortoise models, whose metaclass is not compatible
with ``ABCMeta``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING, Mapping

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..search.context import SearchContext
    from ..search.fields import SearchableField


class Describable:
    """Model able to describe its own list columns and naming."""

    @classmethod
    def get_summary_fields(cls) -> Mapping[str, Any]:
        """Return the ordered column name -> title map shown in lists."""
        raise NotImplementedError

    @classmethod
    def get_plural_name(cls) -> str:
        """Return the human readable plural name of the model."""
        raise NotImplementedError


class Searchable:
    """Model backed by a queryable store that declares searchable fields."""

    @classmethod
    def get_searchable_fields(cls) -> dict[str, "SearchableField"]:
        """Return the ordered field name -> searchable field map."""
        raise NotImplementedError

    @classmethod
    def get_default_search_context(cls) -> "SearchContext":
        """Return a search context built from the searchable fields."""
        raise NotImplementedError

    @classmethod
    def get_general_search_field_name(cls) -> str:
        """Return the name of the free-text search field."""
        from ..conf import current_settings

        return getattr(cls, "general_search_field", None) or current_settings().general_search_field


def is_describable(model: Any) -> bool:
    """Return ``True`` when ``model`` is a class implementing :class:`Describable`."""
    return isinstance(model, type) and issubclass(model, Describable)


def is_searchable(model: Any) -> bool:
    """Return ``True`` when ``model`` is a class implementing :class:`Searchable`."""
    return isinstance(model, type) and issubclass(model, Searchable)


__all__ = ["Describable", "Searchable", "is_describable", "is_searchable"]


# The End
