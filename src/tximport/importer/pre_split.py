#!/usr/bin/env python3
"""
Split Property Accumulator

Collects the properties of one split line, validates them and creates the
split (and in two-split mode possibly its transfer split) on a draft
transaction.

Amount vs. value: a split's amount is in its account's commodity, its value
in the transaction currency. When the two differ, the value is derived from
transfer data, an imported price or the book's price database, in that
order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..book.models import Account, Commodity, ReconcileState, Transaction
from ..core.dates import to_neutral_datetime
from ..core.errors import ParseError
from ..core.numeric import Numeric
from .account_map import AccountResolver
from .draft import DraftTransaction
from .parsers import parse_date, parse_monetary, parse_reconciled
from .pre_trans import ErrorMap, bullet_list, format_error
from .prop_types import PropertyType

logger = logging.getLogger(__name__)


def _add_split(
    trans: Transaction,
    account: Account,
    amount: Numeric,
    value: Numeric,
    action: str | None,
    memo: str | None,
    rec_state: ReconcileState | None,
    rec_date: date | None,
) -> None:
    """Add a split with the given properties to an open transaction."""
    split = trans.create_split(account)
    split.amount = amount
    split.value = value

    if memo:
        split.memo = memo
    if action:
        split.action = action

    if rec_state is not None and rec_state != ReconcileState.NOT_RECONCILED:
        split.reconcile = rec_state
    if rec_state == ReconcileState.RECONCILED and rec_date is not None:
        split.date_reconciled = to_neutral_datetime(rec_date)


def _nearest_rate(trans: Transaction, commodity: Commodity | None) -> tuple[Numeric, bool] | None:
    """
    Look up the book's price between commodity and the transaction currency.

    Returns:
        (rate, quoted_in_currency) where quoted_in_currency is True if the
        rate gives transaction currency per unit of commodity, or None when
        there's no usable price
    """
    if commodity is None or trans.currency is None or trans.date_posted is None:
        return None
    nprice = trans.book.price_db.lookup_nearest_in_time(commodity, trans.currency, trans.date_posted)
    if nprice is None or nprice.value.is_zero:
        return None
    return nprice.value, nprice.currency.equiv(trans.currency)


Setter = Callable[["PreSplit", PropertyType, str], None]


def _text_setter(attr: str) -> Setter:
    def setter(self: PreSplit, prop_type: PropertyType, value: str) -> None:
        setattr(self, attr, value or None)

    return setter


def _monetary_setter(attr: str) -> Setter:
    # Prices usually share the file's decimal point, so they use the
    # monetary parser as well.
    def setter(self: PreSplit, prop_type: PropertyType, value: str) -> None:
        setattr(self, attr, None)
        setattr(self, attr, parse_monetary(value, self.currency_format))

    return setter


def _reconcile_setter(attr: str) -> Setter:
    def setter(self: PreSplit, prop_type: PropertyType, value: str) -> None:
        setattr(self, attr, None)
        setattr(self, attr, parse_reconciled(value))

    return setter


def _date_setter(attr: str) -> Setter:
    def setter(self: PreSplit, prop_type: PropertyType, value: str) -> None:
        setattr(self, attr, None)
        if value:
            setattr(self, attr, parse_date(value, self.date_format))

    return setter


def _account_setter(attr: str, kind: str) -> Setter:
    def setter(self: PreSplit, prop_type: PropertyType, value: str) -> None:
        setattr(self, attr, None)
        if not value:
            raise ParseError(f"{kind} value can't be empty.")
        account = self.resolve_account(value)
        if account is None:
            raise ParseError(f"{kind} value can't be mapped back to an account.")
        setattr(self, attr, account)

    return setter


class PreSplit:
    """
    Split properties harvested from import data.

    Uses the same error bookkeeping as PreTransaction. Amount like
    properties can also be accumulated over several columns with
    ``accumulate``.
    """

    def __init__(self, date_format: int, currency_format: int, accounts: AccountResolver | None = None):
        self._date_format = date_format
        self._currency_format = currency_format
        self._accounts = accounts

        self._action: str | None = None
        self._account: Account | None = None
        self._amount: Numeric | None = None
        self._amount_neg: Numeric | None = None
        self._price: Numeric | None = None
        self._memo: str | None = None
        self._rec_state: ReconcileState | None = None
        self._rec_date: date | None = None
        self._taction: str | None = None
        self._taccount: Account | None = None
        self._tamount: Numeric | None = None
        self._tamount_neg: Numeric | None = None
        self._tmemo: str | None = None
        self._trec_state: ReconcileState | None = None
        self._trec_date: date | None = None
        self._created = False

        self._errors: ErrorMap = {}

    @property
    def date_format(self) -> int:
        return self._date_format

    @date_format.setter
    def date_format(self, date_format: int) -> None:
        self._date_format = date_format

    @property
    def currency_format(self) -> int:
        return self._currency_format

    @currency_format.setter
    def currency_format(self, currency_format: int) -> None:
        self._currency_format = currency_format

    @property
    def account(self) -> Account | None:
        return self._account

    @account.setter
    def account(self, account: Account | None) -> None:
        self._account = account

    @property
    def created(self) -> bool:
        """True once splits have been materialized from this object."""
        return self._created

    def errors(self) -> ErrorMap:
        """Get a copy of the per property error messages."""
        return dict(self._errors)

    def assign(self, prop_type: PropertyType, value: str) -> None:
        """
        Set a split property from an import string, replacing any old value.

        Types outside the split scope are ignored with a warning.

        Raises:
            ParseError: If value can't be parsed or resolved
        """
        self._errors.pop(prop_type, None)
        try:
            self._SETTERS[prop_type](self, prop_type, value)
        except ParseError as e:
            message = format_error(prop_type, e.message)
            self._errors[prop_type] = message
            raise ParseError(message, prop_type) from e

    def clear(self, prop_type: PropertyType) -> None:
        """Clear a property without reporting mandatory property errors."""
        try:
            self.assign(prop_type, "")
        except ParseError:
            self._errors.pop(prop_type, None)

    def accumulate(self, prop_type: PropertyType, value: str) -> None:
        """
        Add an import string to an amount like property.

        The first value behaves like ``assign``. Only AMOUNT, AMOUNT_NEG,
        T_AMOUNT and T_AMOUNT_NEG can be accumulated; other types are
        ignored with a warning.

        Raises:
            ParseError: If value can't be parsed
        """
        self._errors.pop(prop_type, None)
        attr = self._ACCUMULATORS.get(prop_type)
        if attr is None:
            logger.warning("%s can't be used to add values in a split", prop_type.name)
            return

        try:
            num_val = parse_monetary(value, self._currency_format)
        except ParseError as e:
            message = format_error(prop_type, e.message)
            self._errors[prop_type] = message
            raise ParseError(message, prop_type) from e

        current = getattr(self, attr)
        setattr(self, attr, num_val if current is None else current + num_val)

    def check_essentials(self) -> list[str]:
        """Get the list of missing or inconsistent properties; empty when complete."""
        errors = []
        if self._amount is None and self._amount_neg is None:
            errors.append("No amount or negated amount column.")

        if self._rec_state == ReconcileState.RECONCILED and self._rec_date is None:
            errors.append("Split is reconciled but reconcile date column is missing or invalid.")

        if self._trec_state == ReconcileState.RECONCILED and self._trec_date is None:
            errors.append(
                "Transfer split is reconciled but transfer reconcile date column is missing or invalid."
            )

        return errors

    def materialize(self, draft: DraftTransaction | None) -> int:
        """
        Create the split(s) described by this object on a draft transaction.

        If a transfer account is known the balancing transfer split is
        created too, provided its amount can be determined. Otherwise what is
        known about the transfer split is left on the draft for a later
        matching step.

        Args:
            draft: Draft owning the transaction to add splits to. A missing
                draft, or one that gave up its transaction, creates nothing

        Returns:
            Number of splits created (0, 1 or 2)
        """
        if self._created:
            return 0

        check = self.check_essentials()
        if check:
            logger.warning(bullet_list("Not creating split because essentials not set properly:", check))
            return 0

        if self._account is None:
            logger.error("No account set, can't create this split.")
            return 0

        if draft is None or not draft.owns_transaction:
            logger.error("Draft transaction no longer owns a transaction, can't create this split.")
            return 0

        trans = draft.transaction
        amount = Numeric.zero()
        if self._amount is not None:
            amount += self._amount
        if self._amount_neg is not None:
            amount -= self._amount_neg

        tamount: Numeric | None = None
        if self._tamount is not None or self._tamount_neg is not None:
            tamount = Numeric.zero()
            if self._tamount is not None:
                tamount += self._tamount
            if self._tamount_neg is not None:
                tamount -= self._tamount_neg

        value = self._split_value(trans, amount, tamount)
        if value is None:
            logger.error("No price found, can't create this split.")
            return 0

        _add_split(trans, self._account, amount, value, self._action, self._memo, self._rec_state, self._rec_date)
        splits_created = 1

        if self._taccount is not None:
            # A transfer account means a single line transaction: the transfer
            # split balances the first one.
            tvalue = -value
            if tamount is None:
                tamount = self._transfer_amount(trans, tvalue)
            if tamount is not None:
                _add_split(
                    trans,
                    self._taccount,
                    tamount,
                    tvalue,
                    self._taction,
                    self._tmemo,
                    self._trec_state,
                    self._trec_date,
                )
                splits_created += 1
            else:
                logger.warning("No price found, defer creation of second split to generic import matcher.")

        if splits_created == 1:
            # Multi-split mode, or the transfer split couldn't be created:
            # pass on what is known so it can be completed later.
            draft.price = self._price
            draft.taction = self._taction
            draft.tmemo = self._tmemo
            draft.tamount = tamount
            draft.taccount = self._taccount
            draft.trec_state = self._trec_state
            draft.trec_date = self._trec_date

        self._created = True
        return splits_created

    def _split_value(self, trans: Transaction, amount: Numeric, tamount: Numeric | None) -> Numeric | None:
        """Determine the split's value in the transaction currency."""
        trans_curr = trans.currency
        acct_comm = self._account.commodity if self._account else None

        if trans_curr is not None and trans_curr.equiv(acct_comm):
            return amount
        if (
            tamount is not None
            and self._taccount is not None
            and trans_curr is not None
            and trans_curr.equiv(self._taccount.commodity)
        ):
            return -tamount
        if self._price is not None:
            return amount * self._price

        # Import data didn't specify a price, use the nearest in time.
        # Reminder: value = amount * price, or amount = value / price
        rate = _nearest_rate(trans, acct_comm)
        if rate is None:
            return None
        value, quoted_in_currency = rate
        return amount * value if quoted_in_currency else amount * value.inv()

    def _transfer_amount(self, trans: Transaction, tvalue: Numeric) -> Numeric | None:
        """Derive the transfer split's amount from its value."""
        tcomm = self._taccount.commodity if self._taccount else None

        if trans.currency is not None and trans.currency.equiv(tcomm):
            return tvalue
        if self._price is not None and not self._price.is_zero:
            return tvalue * self._price.inv()

        rate = _nearest_rate(trans, tcomm)
        if rate is None:
            return None
        value, quoted_in_currency = rate
        return tvalue * value.inv() if quoted_in_currency else tvalue * value

    def resolve_account(self, name: str) -> Account | None:
        """Resolve an import account string, None without an account resolver."""
        if self._accounts is None:
            return None
        return self._accounts.resolve(name)

    def _unsupported(self, prop_type: PropertyType, value: str) -> None:
        logger.warning("%s is an invalid property for a split", prop_type.name)

    _SETTERS: dict[PropertyType, Setter] = {
        PropertyType.NONE: _unsupported,
        PropertyType.UNIQUE_ID: _unsupported,
        PropertyType.DATE: _unsupported,
        PropertyType.NUM: _unsupported,
        PropertyType.DESCRIPTION: _unsupported,
        PropertyType.NOTES: _unsupported,
        PropertyType.COMMODITY: _unsupported,
        PropertyType.VOID_REASON: _unsupported,
        PropertyType.ACTION: _text_setter("_action"),
        PropertyType.ACCOUNT: _account_setter("_account", "Account"),
        PropertyType.AMOUNT: _monetary_setter("_amount"),
        PropertyType.AMOUNT_NEG: _monetary_setter("_amount_neg"),
        PropertyType.PRICE: _monetary_setter("_price"),
        PropertyType.MEMO: _text_setter("_memo"),
        PropertyType.REC_STATE: _reconcile_setter("_rec_state"),
        PropertyType.REC_DATE: _date_setter("_rec_date"),
        PropertyType.TACTION: _text_setter("_taction"),
        PropertyType.TACCOUNT: _account_setter("_taccount", "Transfer account"),
        PropertyType.T_AMOUNT: _monetary_setter("_tamount"),
        PropertyType.T_AMOUNT_NEG: _monetary_setter("_tamount_neg"),
        PropertyType.TMEMO: _text_setter("_tmemo"),
        PropertyType.TREC_STATE: _reconcile_setter("_trec_state"),
        PropertyType.TREC_DATE: _date_setter("_trec_date"),
    }

    _ACCUMULATORS: dict[PropertyType, str] = {
        PropertyType.AMOUNT: "_amount",
        PropertyType.AMOUNT_NEG: "_amount_neg",
        PropertyType.T_AMOUNT: "_tamount",
        PropertyType.T_AMOUNT_NEG: "_tamount_neg",
    }
