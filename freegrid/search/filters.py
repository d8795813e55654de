# -*- coding: utf-8 -*-
"""
filters

Search filters: the comparison applied to one field during a search.

Every filter can narrow a Tortoise queryset and can test a single in-memory
value, and both paths share the same semantics. Submitted values are coerced
to the field kind once, with the same rules on both paths; a value that does
not fit the field matches no row.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Type

from ..adapters.tortoise import Q, lookup
from ..core.exceptions import UnknownFilterKindError

logger = logging.getLogger(__name__)

TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
FALSE_WORDS = frozenset({"0", "false", "no", "off"})
INTEGER_KINDS = frozenset({"integer", "bigint"})


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _finite_decimal(text: str) -> Decimal:
    try:
        number = Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"'{text}' is not a number") from exc
    if not number.is_finite():
        raise ValueError(f"'{text}' is not a finite number")
    return number


def _to_integer(text: str) -> int:
    number = _finite_decimal(text)
    if number != number.to_integral_value():
        raise ValueError(f"'{text}' is not an integer")
    return int(number)


def _to_boolean(text: str) -> bool:
    word = text.lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f"'{text}' is not a boolean")


def coerce_value(kind: str | None, raw: Any) -> Any:
    """Convert the submitted ``raw`` value to a field of kind ``kind``.

    Unknown kinds leave ``raw`` untouched. A value that cannot represent the
    kind raises :class:`ValueError`; integer kinds reject fractional input
    instead of truncating it.
    """

    if kind is None or raw is None:
        return raw
    if isinstance(raw, bool) and kind == "boolean":
        return raw
    text = str(raw).strip()
    if kind in INTEGER_KINDS:
        return _to_integer(text)
    if kind == "float":
        return float(_finite_decimal(text))
    if kind == "decimal":
        return _finite_decimal(text)
    if kind == "boolean":
        return _to_boolean(text)
    if kind == "datetime":
        return datetime.fromisoformat(text)
    if kind == "date":
        return date.fromisoformat(text)
    if kind in {"string", "text", "uuid"}:
        return text
    return raw


def coerce_like(sample: Any, raw: Any) -> Any:
    """Convert ``raw`` to the type of the in-memory value ``sample``.

    Used when the field kind is unknown, for rows that are not model
    instances.
    """

    if raw is None or sample is None or isinstance(raw, type(sample)):
        return raw
    if isinstance(sample, bool):
        return coerce_value("boolean", raw)
    if isinstance(sample, int):
        return coerce_value("integer", raw)
    if isinstance(sample, float):
        return coerce_value("float", raw)
    if isinstance(sample, Decimal):
        return coerce_value("decimal", raw)
    if isinstance(sample, datetime):
        return coerce_value("datetime", raw)
    if isinstance(sample, date):
        return coerce_value("date", raw)
    return str(raw).strip()


class SearchFilter:
    """Base filter bound to a field path such as ``team.name``.

    ``field_kind`` is the kind of the model field behind the path, when it
    is known. Filters with ``coerces`` set convert the submitted value to
    that kind before comparing.
    """

    key: str = "base"
    # Tortoise lookup suffix; empty string means equality
    lookup_suffix: str = ""
    coerces: bool = False

    def __init__(self, name: str, value: Any = None, field_kind: str | None = None) -> None:
        self.name = name
        self.value = value
        self.field_kind = field_kind

    def get_name(self) -> str:
        """Return the dotted field path."""

        return self.name

    def get_lookup(self) -> str:
        """Return the Tortoise lookup, e.g. ``team__name__icontains``."""

        base = lookup(self.name)
        return f"{base}__{self.lookup_suffix}" if self.lookup_suffix else base

    def is_empty(self) -> bool:
        """Return ``True`` when no value was submitted."""

        return self.value is None or (isinstance(self.value, str) and self.value.strip() == "")

    def with_value(self, value: Any) -> "SearchFilter":
        """Return a copy of this filter holding ``value``."""

        return type(self)(self.name, value, self.field_kind)

    def get_value(self) -> Any:
        """Return the submitted value coerced to the field kind.

        Raises :class:`ValueError` when the value does not fit the field.
        """

        if not self.coerces:
            return self.value
        return coerce_value(self.field_kind, self.value)

    def to_q(self) -> Q:
        """Build the Tortoise condition for the submitted value."""

        return Q(**{self.get_lookup(): self.get_value()})

    def apply(self, qs: Any) -> Any:
        """Narrow queryset ``qs``; empty filters leave it unchanged.

        A value that does not fit the field yields an empty queryset.
        """

        if self.is_empty():
            return qs
        try:
            condition = self.to_q()
        except ValueError as exc:
            logger.info("Search on '%s' matches nothing: %s", self.name, exc)
            return qs.filter(pk__in=[])
        return qs.filter(condition)

    def matches(self, candidate: Any) -> bool:
        """Test an in-memory ``candidate`` value."""

        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.value!r})"


class FilterRegistry:
    """Filter classes keyed by filter kind."""

    def __init__(self) -> None:
        self._by_key: Dict[str, Type[SearchFilter]] = {}

    def register(self, key: str):
        """Decorator to register a filter by key."""

        def _decorator(cls: Type[SearchFilter]) -> Type[SearchFilter]:
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[SearchFilter] | None:
        """Return the filter class registered as ``key`` or ``None``."""

        return self._by_key.get(key)

    def create(
        self,
        key: str,
        name: str,
        value: Any = None,
        field_kind: str | None = None,
    ) -> SearchFilter:
        """Instantiate the filter registered as ``key``."""

        filter_cls = self.get(key)
        if filter_cls is None:
            raise UnknownFilterKindError(f"Unknown filter kind '{key}' for field '{name}'")
        return filter_cls(name, value, field_kind)

    def keys(self) -> list[str]:
        """Return registered kinds in registration order."""

        return list(self._by_key)


registry = FilterRegistry()


@registry.register("partial")
class PartialMatchFilter(SearchFilter):
    """Case-insensitive substring match."""

    lookup_suffix = "icontains"

    def matches(self, candidate: Any) -> bool:
        return _text(self.value).lower() in _text(candidate).lower()


class _CoercingFilter(SearchFilter):
    coerces = True

    def _compare(self, left: Any, right: Any) -> bool:
        raise NotImplementedError

    def matches(self, candidate: Any) -> bool:
        if candidate is None:
            return False
        try:
            if self.field_kind is None:
                value = coerce_like(candidate, self.value)
            else:
                value = self.get_value()
            return self._compare(candidate, value)
        except (TypeError, ValueError):
            return False


@registry.register("exact")
class ExactMatchFilter(_CoercingFilter):
    """Equality match."""

    def _compare(self, left: Any, right: Any) -> bool:
        return left == right


@registry.register("starts_with")
class StartsWithFilter(SearchFilter):
    """Case-insensitive prefix match."""

    lookup_suffix = "istartswith"

    def matches(self, candidate: Any) -> bool:
        return _text(candidate).lower().startswith(_text(self.value).lower())


@registry.register("ends_with")
class EndsWithFilter(SearchFilter):
    """Case-insensitive suffix match."""

    lookup_suffix = "iendswith"

    def matches(self, candidate: Any) -> bool:
        return _text(candidate).lower().endswith(_text(self.value).lower())


@registry.register("gt")
class GreaterThanFilter(_CoercingFilter):
    lookup_suffix = "gt"

    def _compare(self, left: Any, right: Any) -> bool:
        return left > right


@registry.register("gte")
class GreaterThanOrEqualFilter(_CoercingFilter):
    lookup_suffix = "gte"

    def _compare(self, left: Any, right: Any) -> bool:
        return left >= right


@registry.register("lt")
class LessThanFilter(_CoercingFilter):
    lookup_suffix = "lt"

    def _compare(self, left: Any, right: Any) -> bool:
        return left < right


@registry.register("lte")
class LessThanOrEqualFilter(_CoercingFilter):
    lookup_suffix = "lte"

    def _compare(self, left: Any, right: Any) -> bool:
        return left <= right


__all__ = [
    "SearchFilter",
    "FilterRegistry",
    "registry",
    "coerce_value",
    "coerce_like",
    "PartialMatchFilter",
    "ExactMatchFilter",
    "StartsWithFilter",
    "EndsWithFilter",
    "GreaterThanFilter",
    "GreaterThanOrEqualFilter",
    "LessThanFilter",
    "LessThanOrEqualFilter",
]


# The End
