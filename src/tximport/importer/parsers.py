#!/usr/bin/env python3
"""
Import Value Parsers

Turn raw cell strings into typed values. Every parser raises ParseError
with a user facing explanation when the string doesn't fit.
"""

from __future__ import annotations

from datetime import date

from ..book.commodities import CommodityTable
from ..book.models import CURRENCY_NAMESPACE, Commodity, ReconcileState
from ..core.currency import parse_monetary_string
from ..core.dates import parse_date_string
from ..core.errors import ParseError
from ..core.numeric import Numeric

RECONCILE_CODES: dict[str, ReconcileState] = {state.value: state for state in ReconcileState}


def parse_date(value: str, date_format: int) -> date:
    """
    Parse a date string with the selected date format.

    Callers treat an empty string as "no date" before getting here.

    Raises:
        ParseError: If value doesn't match the format or is not a real date
    """
    try:
        return parse_date_string(value, date_format)
    except (ValueError, IndexError) as e:
        raise ParseError(str(e)) from e


def parse_monetary(value: str, currency_format: int) -> Numeric:
    """
    Parse a monetary string with the selected currency format.

    An empty string is zero, not "absent": a caller can't tell a
    deliberate zero from a missing amount by looking at the result.

    Raises:
        ParseError: If value has no digits or doesn't fit the format
    """
    try:
        return parse_monetary_string(value, currency_format)
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_reconciled(value: str) -> ReconcileState:
    """
    Parse a reconcile state code (n, c, y, f or v).

    Voided is reported as not reconciled; voiding is handled at the
    transaction level.

    Raises:
        ParseError: If value is not a known reconcile code
    """
    state = RECONCILE_CODES.get(value)
    if state is None:
        raise ParseError("Value can't be parsed into a valid reconcile state.")
    if state == ReconcileState.VOIDED:
        return ReconcileState.NOT_RECONCILED
    return state


def parse_commodity(value: str, table: CommodityTable) -> Commodity | None:
    """
    Resolve a commodity string against the commodity table.

    Tried in order: unique name ('NAMESPACE::MNEMONIC'), mnemonic in the
    currency namespace, mnemonic in each other namespace. First match wins.

    Returns:
        The commodity, or None for an empty string

    Raises:
        ParseError: If nothing matches
    """
    if not value:
        return None

    comm = table.lookup_unique(value)
    if comm is None:
        comm = table.lookup(CURRENCY_NAMESPACE, value)
    if comm is None:
        for namespace in table.namespaces():
            if namespace == CURRENCY_NAMESPACE:
                continue
            comm = table.lookup(namespace, value)
            if comm is not None:
                break

    if comm is None:
        raise ParseError("Value can't be parsed into a valid commodity.")
    return comm
