#!/usr/bin/env python3
"""
Import Error Types

Errors raised while turning raw import cells into accounting state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..importer.prop_types import PropertyType


class ParseError(ValueError):
    """
    Raised when an import value can't be turned into a typed value.

    Covers malformed dates, amounts, commodities and reconcile states, empty
    mandatory fields and values that can't be resolved against the book.
    ``prop_type`` is set once an accumulator has attributed the failure to
    a column type.
    """

    def __init__(self, message: str, prop_type: PropertyType | None = None):
        super().__init__(message)
        self.message = message
        self.prop_type = prop_type
