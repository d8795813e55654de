# -*- coding: utf-8 -*-
"""
forms

Search form and form fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .fields import DropdownField, FormField, TextField
from .form import SearchForm

__all__ = ["DropdownField", "FormField", "SearchForm", "TextField"]


# The End
