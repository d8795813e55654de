# -*- coding: utf-8 -*-
"""
formatting

Placeholder templates used to format rendered column values.

A template such as ``'<a href="custom-admin/$id">$value</a>'`` is parsed
once into nodes and evaluated by lookup for every row. Supported tokens:

* ``$value``   the cast column value, inserted as is (already safe);
* ``$Field``   a row field, HTML-escaped;
* ``{$a.b}``   braced form, needed for dotted paths or adjacent word chars;
* ``\\$``       a literal dollar sign.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from markupsafe import Markup, escape

from .exceptions import FormatTemplateError

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_PATH = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*")

VALUE_TOKEN = "value"


@dataclass(frozen=True, slots=True)
class Literal:
    text: str


@dataclass(frozen=True, slots=True)
class ValueRef:
    pass


@dataclass(frozen=True, slots=True)
class FieldRef:
    path: str


Node = Literal | ValueRef | FieldRef


def _ref(name: str) -> Node:
    return ValueRef() if name == VALUE_TOKEN else FieldRef(name)


def parse_template(source: str) -> tuple[Node, ...]:
    """Parse ``source`` into template nodes.

    Raises:
        FormatTemplateError: On an unterminated or empty ``{$...}`` token.
    """
    nodes: list[Node] = []
    buffer: list[str] = []
    pos = 0
    length = len(source)

    def flush() -> None:
        if buffer:
            nodes.append(Literal("".join(buffer)))
            buffer.clear()

    while pos < length:
        char = source[pos]
        if char == "\\" and source.startswith("$", pos + 1):
            buffer.append("$")
            pos += 2
            continue
        if char == "{" and source.startswith("$", pos + 1):
            end = source.find("}", pos + 2)
            if end == -1:
                raise FormatTemplateError(f"Unterminated '{{$' at position {pos} in {source!r}")
            name = source[pos + 2 : end].strip()
            if not _PATH.fullmatch(name):
                raise FormatTemplateError(f"Invalid placeholder '{{${name}}}' in {source!r}")
            flush()
            nodes.append(_ref(name))
            pos = end + 1
            continue
        if char == "$":
            match = _NAME.match(source, pos + 1)
            if match:
                flush()
                nodes.append(_ref(match.group(0)))
                pos = match.end()
                continue
        buffer.append(char)
        pos += 1
    flush()
    return tuple(nodes)


class FormatTemplate:
    """Compiled formatting template."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.nodes = parse_template(source)

    def render(self, value: Any, record: Any, accessor: Callable[[Any, str], Any]) -> Markup:
        """Evaluate the template for ``record``.

        ``accessor(record, path)`` resolves row fields.
        """
        parts: list[str] = []
        for node in self.nodes:
            if isinstance(node, Literal):
                parts.append(node.text)
            elif isinstance(node, ValueRef):
                parts.append("" if value is None else str(value))
            else:
                parts.append(str(escape(accessor(record, node.path))))
        return Markup("".join(parts))

    def __repr__(self) -> str:
        return f"FormatTemplate({self.source!r})"


__all__ = ["FormatTemplate", "Literal", "ValueRef", "FieldRef", "parse_template"]


# The End
