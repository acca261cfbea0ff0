# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Fluent builder for markup element trees.

A lightweight, zero-dependency library that builds HTML/XHTML element
trees through chained method calls and renders them to a string.
"""

__version__ = "0.1.0"

from .builder import MarkupBuilder
from .exceptions import MarkupError, NoParentError
from .node import VOID_ELEMENTS, ContentPlacement, ElementNode
from .page import MarkupPage

__all__ = [
    # Core classes
    "ElementNode",
    "ContentPlacement",
    "VOID_ELEMENTS",
    # Builders
    "MarkupBuilder",
    "MarkupPage",
    # Exceptions
    "MarkupError",
    "NoParentError",
]
