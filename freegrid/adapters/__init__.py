# -*- coding: utf-8 -*-
"""
adapters

ORM adapters. Tortoise ORM is the only supported backend.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .tortoise import get_model_descriptor, is_queryset, is_tortoise_model, lookup, resolve_field

__all__ = ["get_model_descriptor", "is_queryset", "is_tortoise_model", "lookup", "resolve_field"]


# The End
