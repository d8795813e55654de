# -*- coding: utf-8 -*-
"""
templates

Template rendering helpers for grid fragments.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .service import DEFAULT_TEMPLATE_SERVICE, TemplateService

__all__ = ["DEFAULT_TEMPLATE_SERVICE", "TemplateService"]


# The End
