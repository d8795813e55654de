# -*- coding: utf-8 -*-
"""
casting

Named value casts turning raw row values into HTML-safe strings.

A cast identifier is ``Type`` or ``Type.Method`` (``Type->Method`` is
accepted as well), e.g. ``Date.Nice`` or ``Text.FirstSentence``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Type

from markupsafe import Markup, escape

from ..conf import current_settings
from .exceptions import UnknownCastError

_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def nl2br(text: Any) -> Markup:
    """Escape ``text`` and insert ``<br />`` before every newline."""
    escaped = str(escape("" if text is None else text))
    escaped = escaped.replace("\r\n", "\n")
    return Markup(escaped.replace("\n", "<br />\n"))


class BaseCast:
    """Wrap a raw value; methods return ``Markup`` ready for embedding."""

    key: str = "base"

    def __init__(self, value: Any) -> None:
        self.value = value

    def render(self) -> Markup:
        """Default presentation used when no method is named."""
        return nl2br(self.value)

    def nice(self) -> Markup:
        return self.render()


class CastRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseCast]] = {}

    def register(self, key: str):
        """Decorator to register a cast by key."""
        def _decorator(cls: Type[BaseCast]) -> Type[BaseCast]:
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseCast] | None:
        """Return the cast class registered as ``key`` or ``None``."""

        return self._by_key.get(key)

    @staticmethod
    def parse(spec: str) -> tuple[str, str | None]:
        """Split ``Type.Method`` into ``("Type", "method")``."""
        normalized = spec.strip().replace("->", ".")
        type_name, _, method = normalized.partition(".")
        if not method:
            return type_name, None
        return type_name, _CAMEL_BOUNDARY.sub("_", method).lower()

    def cast(self, value: Any, spec: str) -> Markup:
        """Cast ``value`` with the cast named by ``spec``."""
        type_name, method_name = self.parse(spec)
        cast_cls = self.get(type_name)
        if cast_cls is None:
            raise UnknownCastError(f"Unknown field cast '{spec}'")
        instance = cast_cls(value)
        if method_name is None:
            return instance.render()
        method = getattr(instance, method_name, None)
        if method is None or method_name.startswith("_"):
            raise UnknownCastError(f"Cast '{type_name}' has no method for '{spec}'")
        return method()


registry = CastRegistry()


@registry.register("Text")
class TextCast(BaseCast):
    def first_sentence(self) -> Markup:
        """Return the text up to and including the first full stop."""

        text = "" if self.value is None else str(self.value).strip()
        return nl2br(_SENTENCE_END.split(text, maxsplit=1)[0])

    def limit_characters(self, limit: int = 20, suffix: str = "...") -> Markup:
        """Return at most ``limit`` characters, marking a cut with ``suffix``."""

        text = "" if self.value is None else str(self.value)
        if len(text) > limit:
            text = text[: limit - len(suffix)].rstrip() + suffix
        return nl2br(text)

    def lower_case(self) -> Markup:
        return nl2br("" if self.value is None else str(self.value).lower())

    def upper_case(self) -> Markup:
        return nl2br("" if self.value is None else str(self.value).upper())


@registry.register("Varchar")
class VarcharCast(TextCast):
    """Short text; presented like ``Text``."""


@registry.register("HTMLText")
class HTMLTextCast(BaseCast):
    """Trusted HTML content."""

    def render(self) -> Markup:
        return Markup("" if self.value is None else str(self.value))

    def plain(self) -> Markup:
        return escape(self.render().striptags())


@registry.register("Boolean")
class BooleanCast(BaseCast):
    def render(self) -> Markup:
        return Markup("1" if self.value else "0")

    def nice(self) -> Markup:
        return Markup("Yes" if self.value else "No")


@registry.register("Date")
class DateCast(BaseCast):
    def _as_date(self) -> date | None:
        value = self.value
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return datetime.fromisoformat(str(value)).date()

    def render(self) -> Markup:
        value = self._as_date()
        return Markup("") if value is None else escape(value.isoformat())

    def nice(self) -> Markup:
        value = self._as_date()
        return Markup("") if value is None else escape(value.strftime(current_settings().date_format))


@registry.register("Datetime")
class DatetimeCast(BaseCast):
    def _as_datetime(self) -> datetime | None:
        value = self.value
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        return datetime.fromisoformat(str(value))

    def render(self) -> Markup:
        value = self._as_datetime()
        return Markup("") if value is None else escape(value.isoformat(sep=" "))

    def nice(self) -> Markup:
        value = self._as_datetime()
        return Markup("") if value is None else escape(value.strftime(current_settings().datetime_format))


class _NumberCast(BaseCast):
    def _as_decimal(self) -> Decimal | None:
        if self.value is None or self.value == "":
            return None
        try:
            return Decimal(str(self.value))
        except InvalidOperation:
            return None


@registry.register("Int")
class IntCast(_NumberCast):
    def render(self) -> Markup:
        value = self._as_decimal()
        return Markup("") if value is None else escape(str(int(value)))

    def nice(self) -> Markup:
        value = self._as_decimal()
        return Markup("") if value is None else escape(f"{int(value):,}")


@registry.register("Decimal")
class DecimalCast(_NumberCast):
    def render(self) -> Markup:
        value = self._as_decimal()
        return Markup("") if value is None else escape(f"{value:.2f}")

    def nice(self) -> Markup:
        value = self._as_decimal()
        return Markup("") if value is None else escape(f"{value:,.2f}")


@registry.register("Float")
class FloatCast(DecimalCast):
    pass


@registry.register("Currency")
class CurrencyCast(_NumberCast):
    def render(self) -> Markup:
        value = self._as_decimal()
        if value is None:
            return Markup("")
        sign = "-" if value < 0 else ""
        return escape(f"{sign}{current_settings().currency_symbol}{abs(value):,.2f}")


__all__ = ["BaseCast", "CastRegistry", "registry", "nl2br"]


# The End
