# -*- coding: utf-8 -*-
"""
request

Framework-neutral view of the request a grid is rendered for.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

_BRACKETS = re.compile(r"\[([^\]]*)\]")


@dataclass
class GridRequest:
    """HTTP-style request carrying query and body variables."""

    method: str = "GET"
    url: str = ""
    query: dict[str, Any] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)

    def get_var(self, name: str, default: Any = None) -> Any:
        """Return a query string variable."""
        return self.query.get(name, default)

    def post_var(self, name: str, default: Any = None) -> Any:
        """Return a body variable."""
        return self.data.get(name, default)

    def request_var(self, name: str, default: Any = None) -> Any:
        """Return a body variable, falling back to the query string."""
        if name in self.data:
            return self.data[name]
        return self.query.get(name, default)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, Any]],
        *,
        method: str = "GET",
        url: str = "",
        body: Mapping[str, Any] | None = None,
    ) -> "GridRequest":
        """Build a request from flat ``filter[grid][Name]=x`` style pairs."""
        return cls(method=method.upper(), url=url, query=expand_brackets(pairs), data=dict(body or {}))


def expand_brackets(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Expand bracketed keys such as ``filter[grid][Name]`` into nested dicts."""
    result: dict[str, Any] = {}
    for key, value in pairs:
        head, _, rest = key.partition("[")
        path = [head]
        if rest:
            path.extend(_BRACKETS.findall("[" + rest))
        target = result
        for part in path[:-1]:
            nested = target.get(part)
            if not isinstance(nested, dict):
                nested = {}
                target[part] = nested
            target = nested
        target[path[-1]] = value
    return result


__all__ = ["GridRequest", "expand_brackets"]


# The End
