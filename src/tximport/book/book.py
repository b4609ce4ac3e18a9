#!/usr/bin/env python3
"""
Book

Container tying together the commodity table, account tree, price database
and the transactions committed so far. Acts as the record factory for the
importer.
"""

from .commodities import CommodityTable
from .models import CURRENCY_NAMESPACE, Account, Commodity, Transaction
from .prices import PriceDB


class Book:
    """In-memory book of accounts."""

    def __init__(self) -> None:
        self.commodity_table = CommodityTable()
        self.root_account = Account(name="")
        self.price_db = PriceDB()
        self.transactions: list[Transaction] = []

    def add_currency(self, mnemonic: str, fullname: str = "") -> Commodity:
        """Register a currency and return it."""
        return self.commodity_table.insert(Commodity(CURRENCY_NAMESPACE, mnemonic, fullname))

    def add_account(self, full_name: str, commodity: Commodity) -> Account:
        """
        Create an account by full name, creating missing parents on the way.

        Parents created implicitly get the same commodity.

        Args:
            full_name: Path like 'Assets:Bank:Checking'
            commodity: Commodity of the new account

        Returns:
            The account at full_name
        """
        account = self.root_account
        for name in full_name.split(":"):
            child = next((c for c in account.children if c.name == name), None)
            if child is None:
                child = account.add_child(Account(name=name, commodity=commodity))
            account = child
        return account

    def create_transaction(self) -> Transaction:
        """Create a new transaction in an open edit."""
        trans = Transaction(self)
        trans.begin_edit()
        return trans
