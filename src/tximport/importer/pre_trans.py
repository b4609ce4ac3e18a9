#!/usr/bin/env python3
"""
Transaction Property Accumulator

Collects the transaction level properties of one logical transaction from
the cells of one or more import rows, validates them and finally creates
the transaction header.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..book.book import Book
from ..book.commodities import CommodityTable
from ..book.models import Commodity
from ..core.dates import to_neutral_datetime
from ..core.errors import ParseError
from .draft import DraftTransaction
from .parsers import parse_commodity, parse_date
from .prop_types import PropertyType

logger = logging.getLogger(__name__)

ErrorMap = dict[PropertyType, str]


def error_messages(errors: ErrorMap, check_accounts_mapped: bool = False) -> list[str]:
    """
    Flatten an error map into a list of messages.

    Args:
        errors: Error map of an accumulator
        check_accounts_mapped: Leave out account and transfer account errors,
            for callers that let the user map accounts later

    Returns:
        Error messages in property type order
    """
    skip = {PropertyType.ACCOUNT, PropertyType.TACCOUNT} if check_accounts_mapped else set()
    return [message for prop_type, message in sorted(errors.items()) if prop_type not in skip]


def format_error(prop_type: PropertyType, cause: str) -> str:
    """Prefix an error cause with the label of the property it belongs to."""
    return f"{prop_type.label}: {cause}"


def bullet_list(header: str, items: list[str]) -> str:
    """Join items below header as a bulleted list."""
    return header + "".join(f"\n• {item}" for item in items)


class PreTransaction:
    """
    Transaction properties harvested from import data.

    Every assign records a failure in ``errors()`` as well as raising it,
    so callers can collect all problems of a row without catching at each
    call. Once ``materialize`` succeeded the object is inert.
    """

    def __init__(self, date_format: int, multi_split: bool, commodities: CommodityTable | None = None):
        self._date_format = date_format
        self._multi_split = multi_split
        self._commodities = commodities if commodities is not None else CommodityTable()

        self._differ: str | None = None
        self._date: date | None = None
        self._num: str | None = None
        self._desc: str | None = None
        self._notes: str | None = None
        self._commodity: Commodity | None = None
        self._void_reason: str | None = None
        self._created = False

        self._errors: ErrorMap = {}

    @property
    def date_format(self) -> int:
        return self._date_format

    @date_format.setter
    def date_format(self, date_format: int) -> None:
        self._date_format = date_format

    @property
    def multi_split(self) -> bool:
        return self._multi_split

    @multi_split.setter
    def multi_split(self, multi_split: bool) -> None:
        self._multi_split = multi_split

    @property
    def void_reason(self) -> str | None:
        return self._void_reason

    @property
    def created(self) -> bool:
        """True once a transaction has been materialized from this object."""
        return self._created

    def errors(self) -> ErrorMap:
        """Get a copy of the per property error messages."""
        return dict(self._errors)

    def assign(self, prop_type: PropertyType, value: str) -> None:
        """
        Set a transaction property from an import string.

        An empty value clears the property. Types outside the transaction
        scope are ignored with a warning.

        Raises:
            ParseError: If value can't be parsed, or a mandatory property is
                emptied outside multi-split mode
        """
        # Drop any existing error for the prop_type we're about to set
        self._errors.pop(prop_type, None)
        try:
            self._SETTERS[prop_type](self, prop_type, value)
        except ParseError as e:
            message = format_error(prop_type, e.message)
            self._errors[prop_type] = message
            raise ParseError(message, prop_type) from e

    def clear(self, prop_type: PropertyType) -> None:
        """
        Clear a property.

        Clearing a mandatory property is allowed; the omission shows up in
        ``check_essentials`` instead of as an error here.
        """
        try:
            self.assign(prop_type, "")
        except ParseError:
            self._errors.pop(prop_type, None)

    def check_essentials(self) -> list[str]:
        """Get the list of missing mandatory properties; empty when complete."""
        errors = []
        if self._date is None:
            errors.append("No valid date.")
        if self._desc is None:
            errors.append("No valid description.")
        return errors

    def materialize(self, book: Book, currency: Commodity) -> DraftTransaction | None:
        """
        Create the transaction header described by this object.

        The transaction currency is the imported commodity if that is a
        currency, and currency otherwise.

        Args:
            book: Book to create the transaction in
            currency: Fallback transaction currency

        Returns:
            Draft owning the new, still open transaction; None if a
            transaction was created before or essentials are missing
        """
        if self._created:
            return None

        check = self.check_essentials()
        if check:
            logger.warning(bullet_list("Not creating transaction because essentials not set properly:", check))
            return None

        trans = book.create_transaction()
        if self._commodity is not None and self._commodity.is_currency:
            trans.currency = self._commodity
        else:
            trans.currency = currency
        trans.date_posted = to_neutral_datetime(self._date)

        if self._num:
            trans.num = self._num
        if self._desc:
            trans.description = self._desc
        if self._notes:
            trans.notes = self._notes

        self._created = True
        draft = DraftTransaction(trans)
        draft.void_reason = self._void_reason
        return draft

    def is_part_of(self, parent: PreTransaction | None) -> bool:
        """
        Check whether this object's properties fit in those of parent.

        Not symmetrical: a property left empty here matches anything in
        parent, so a row that repeats or omits the first row's transaction
        columns is considered part of the same transaction. A fully empty
        object is part of any parent. A parent with errors is never a parent.
        """
        if parent is None:
            return False

        return (
            (self._differ is None or self._differ == parent._differ)
            and (self._date is None or self._date == parent._date)
            and (self._num is None or self._num == parent._num)
            and (self._desc is None or self._desc == parent._desc)
            and (self._notes is None or self._notes == parent._notes)
            and (self._commodity is None or self._commodity == parent._commodity)
            and (self._void_reason is None or self._void_reason == parent._void_reason)
            and not parent._errors
        )

    def _set_differ(self, prop_type: PropertyType, value: str) -> None:
        self._differ = value or None

    def _set_date(self, prop_type: PropertyType, value: str) -> None:
        self._date = None
        if value:
            self._date = parse_date(value, self._date_format)
        elif not self._multi_split:
            raise ParseError(f"{prop_type.label} field can not be empty if 'Multi-split' option is unset.")

    def _set_num(self, prop_type: PropertyType, value: str) -> None:
        self._num = value or None

    def _set_desc(self, prop_type: PropertyType, value: str) -> None:
        self._desc = None
        if value:
            self._desc = value
        elif not self._multi_split:
            raise ParseError(f"{prop_type.label} field can not be empty if 'Multi-split' option is unset.")

    def _set_notes(self, prop_type: PropertyType, value: str) -> None:
        self._notes = value or None

    def _set_commodity(self, prop_type: PropertyType, value: str) -> None:
        self._commodity = None
        self._commodity = parse_commodity(value, self._commodities)

    def _set_void_reason(self, prop_type: PropertyType, value: str) -> None:
        self._void_reason = value or None

    def _unsupported(self, prop_type: PropertyType, value: str) -> None:
        logger.warning("%s is an invalid property for a transaction", prop_type.name)

    _SETTERS: dict[PropertyType, Callable[[PreTransaction, PropertyType, str], None]] = {
        PropertyType.NONE: _unsupported,
        PropertyType.UNIQUE_ID: _set_differ,
        PropertyType.DATE: _set_date,
        PropertyType.NUM: _set_num,
        PropertyType.DESCRIPTION: _set_desc,
        PropertyType.NOTES: _set_notes,
        PropertyType.COMMODITY: _set_commodity,
        PropertyType.VOID_REASON: _set_void_reason,
        PropertyType.ACTION: _unsupported,
        PropertyType.ACCOUNT: _unsupported,
        PropertyType.AMOUNT: _unsupported,
        PropertyType.AMOUNT_NEG: _unsupported,
        PropertyType.PRICE: _unsupported,
        PropertyType.MEMO: _unsupported,
        PropertyType.REC_STATE: _unsupported,
        PropertyType.REC_DATE: _unsupported,
        PropertyType.TACTION: _unsupported,
        PropertyType.TACCOUNT: _unsupported,
        PropertyType.T_AMOUNT: _unsupported,
        PropertyType.T_AMOUNT_NEG: _unsupported,
        PropertyType.TMEMO: _unsupported,
        PropertyType.TREC_STATE: _unsupported,
        PropertyType.TREC_DATE: _unsupported,
    }
