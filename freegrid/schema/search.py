# -*- coding: utf-8 -*-
"""
search

Wire schema handed to the client-side search panel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PField


class SearchFieldSchema(BaseModel):
    """Search panel bootstrap data, serialised with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    form_schema_url: str = PField(alias="formSchemaUrl")
    name: str
    placeholder: str
    filters: dict[str, Any] = PField(default_factory=dict)
    gridfield: str

    def to_json(self) -> str:
        """Return the schema as JSON using the wire key names."""

        return self.model_dump_json(by_alias=True)


__all__ = ["SearchFieldSchema"]


# The End
