#!/usr/bin/env python3
"""
Book Data Models

In-memory accounting records the importer writes into: commodities,
accounts, transactions and their splits. These play the part of the
persistence engine that owns the real book.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from ..core.numeric import Numeric

if TYPE_CHECKING:
    from .book import Book

CURRENCY_NAMESPACE = "CURRENCY"
ACCOUNT_SEPARATOR = ":"


class ReconcileState(Enum):
    """Reconcile states of a split, keyed by their single letter code."""

    NOT_RECONCILED = "n"
    CLEARED = "c"
    RECONCILED = "y"
    FROZEN = "f"
    VOIDED = "v"


@dataclass(frozen=True)
class Commodity:
    """
    Currency, stock, fund or any other tradeable unit.

    Identity is the (namespace, mnemonic) pair; the full name is display only.
    """

    namespace: str
    mnemonic: str
    fullname: str = field(default="", compare=False)

    @property
    def unique_name(self) -> str:
        """Get the table wide unique name like 'CURRENCY::USD'."""
        return f"{self.namespace}::{self.mnemonic}"

    @property
    def is_currency(self) -> bool:
        """True for commodities in the currency namespace."""
        return self.namespace == CURRENCY_NAMESPACE

    def equiv(self, other: Commodity | None) -> bool:
        """Check whether other denotes the same commodity."""
        if other is None:
            return False
        return self.namespace == other.namespace and self.mnemonic == other.mnemonic

    def __str__(self) -> str:
        return self.mnemonic


@dataclass(eq=False)
class Account:
    """
    Account in a tree of accounts.

    The root account has no name; every other account's full name is the
    path of names from the root joined with ':'.
    """

    name: str
    commodity: Commodity | None = None
    parent: Account | None = field(default=None, repr=False)
    children: list[Account] = field(default_factory=list, repr=False)
    splits: list[Split] = field(default_factory=list, repr=False)

    def add_child(self, child: Account) -> Account:
        """Attach child below this account and return it."""
        child.parent = self
        self.children.append(child)
        return child

    @property
    def full_name(self) -> str:
        """Get the ':'-separated path from the root."""
        names = []
        account: Account | None = self
        while account is not None and account.parent is not None:
            names.append(account.name)
            account = account.parent
        return ACCOUNT_SEPARATOR.join(reversed(names))

    def lookup_by_full_name(self, full_name: str) -> Account | None:
        """
        Find a descendant by its full name relative to this account.

        Args:
            full_name: Path like 'Assets:Bank:Checking'

        Returns:
            Matching account, or None if the path doesn't exist
        """
        if not full_name:
            return None
        account: Account | None = self
        for name in full_name.split(ACCOUNT_SEPARATOR):
            account = next((c for c in account.children if c.name == name), None)
            if account is None:
                return None
        return account

    def descendants(self) -> list[Account]:
        """Get all accounts below this one, depth first."""
        result = []
        for child in self.children:
            result.append(child)
            result.extend(child.descendants())
        return result


@dataclass(eq=False)
class Split:
    """
    One leg of a transaction.

    amount is in the account's commodity, value in the transaction currency.
    """

    transaction: Transaction = field(repr=False)
    account: Account | None = None
    amount: Numeric = field(default_factory=Numeric.zero)
    value: Numeric = field(default_factory=Numeric.zero)
    memo: str = ""
    action: str = ""
    reconcile: ReconcileState = ReconcileState.NOT_RECONCILED
    date_reconciled: datetime | None = None


class Transaction:
    """
    Transaction header with its splits.

    Transactions are created in an open edit. An open edit ends either with
    commit_edit, which registers the transaction in its book, or with
    destroy, which throws the transaction and its splits away.
    """

    def __init__(self, book: Book):
        self.book = book
        self.currency: Commodity | None = None
        self.date_posted: datetime | None = None
        self.num = ""
        self.description = ""
        self.notes = ""
        self.splits: list[Split] = []
        self._edit_level = 0
        self.committed = False
        self.destroyed = False

    def __repr__(self) -> str:
        state = "destroyed" if self.destroyed else "open" if self.is_open else "committed"
        return f"Transaction(description={self.description!r}, splits={len(self.splits)}, {state})"

    @property
    def is_open(self) -> bool:
        """True while an edit is in progress."""
        return self._edit_level > 0

    def begin_edit(self) -> None:
        """Open (or nest) an edit."""
        if self.destroyed:
            raise RuntimeError("Can't edit a destroyed transaction")
        self._edit_level += 1

    def commit_edit(self) -> None:
        """Close one edit level; closing the last one registers the transaction."""
        self._require_open()
        self._edit_level -= 1
        if self._edit_level == 0 and not self.committed:
            self.committed = True
            self.book.transactions.append(self)

    def destroy(self) -> None:
        """Abort the open edit and discard the transaction and its splits."""
        if self.destroyed:
            return
        for split in self.splits:
            if split.account is not None and split in split.account.splits:
                split.account.splits.remove(split)
        self.splits.clear()
        if self in self.book.transactions:
            self.book.transactions.remove(self)
        self._edit_level = 0
        self.destroyed = True

    def create_split(self, account: Account | None) -> Split:
        """Create a new split in this transaction, posted to account."""
        self._require_open()
        split = Split(transaction=self, account=account)
        self.splits.append(split)
        if account is not None:
            account.splits.append(split)
        return split

    def _require_open(self) -> None:
        if not self.is_open:
            raise RuntimeError("Transaction is not open for editing")
