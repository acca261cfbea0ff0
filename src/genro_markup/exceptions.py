# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""genro-markup exceptions."""

from __future__ import annotations


class MarkupError(Exception):
    """Base exception for genro-markup errors."""

    pass


class NoParentError(MarkupError, ValueError):
    """Raised when navigating up from a node that has no parent."""

    pass
