#!/usr/bin/env python3
"""Tests for the in-memory book records."""

from datetime import datetime, timedelta, timezone

import pytest

from tximport.book import Account, Book, Commodity, Price, PriceDB
from tximport.core.numeric import Numeric


class TestCommodity:
    """Test commodity identity."""

    def test_unique_name_and_currency_flag(self, usd):
        """Test unique name and currency namespace detection."""
        assert usd.unique_name == "CURRENCY::USD"
        assert usd.is_currency
        assert not Commodity("NASDAQ", "AAPL").is_currency

    def test_equiv_ignores_fullname(self):
        """Test equivalence is namespace plus mnemonic."""
        assert Commodity("CURRENCY", "USD", "Dollar").equiv(Commodity("CURRENCY", "USD", "US Dollar"))
        assert not Commodity("NYSE", "ABC").equiv(Commodity("NASDAQ", "ABC"))
        assert not Commodity("CURRENCY", "USD").equiv(None)


class TestCommodityTable:
    """Test commodity table lookups."""

    def test_lookups(self, book):
        """Test lookup by unique name and by namespace and mnemonic."""
        table = book.commodity_table
        assert table.lookup_unique("NYSE::XYZ") == Commodity("NYSE", "XYZ")
        assert table.lookup("CURRENCY", "EUR") == Commodity("CURRENCY", "EUR")
        assert table.lookup_unique("XYZ") is None
        assert table.lookup("NYSE", "AAPL") is None

    def test_namespaces_in_insertion_order(self, book):
        """Test namespace enumeration is deterministic."""
        assert book.commodity_table.namespaces() == ["CURRENCY", "NASDAQ", "NYSE"]
        assert len(book.commodity_table) == 7

    def test_insert_keeps_existing(self, book):
        """Test inserting a known commodity returns the stored one."""
        stored = book.commodity_table.insert(Commodity("CURRENCY", "USD", "Other name"))
        assert stored.fullname == "US Dollar"


class TestAccounts:
    """Test the account tree."""

    def test_full_name(self, book):
        """Test full names are ':'-joined paths."""
        aapl = book.root_account.lookup_by_full_name("Assets:Brokerage:AAPL")
        assert aapl is not None
        assert aapl.full_name == "Assets:Brokerage:AAPL"
        assert book.root_account.full_name == ""

    def test_lookup_missing(self, book):
        """Test lookups of paths that don't exist."""
        root = book.root_account
        assert root.lookup_by_full_name("Assets:Nope") is None
        assert root.lookup_by_full_name("Checking") is None
        assert root.lookup_by_full_name("") is None

    def test_descendants(self):
        """Test depth first enumeration."""
        root = Account(name="")
        assets = root.add_child(Account(name="Assets"))
        bank = assets.add_child(Account(name="Bank"))
        expenses = root.add_child(Account(name="Expenses"))
        assert root.descendants() == [assets, bank, expenses]


class TestTransactionLifecycle:
    """Test transaction edit handling."""

    def test_created_open(self):
        """Test new transactions start in an open edit."""
        trans = Book().create_transaction()
        assert trans.is_open
        assert not trans.committed

    def test_commit_registers(self, book):
        """Test committing adds the transaction to the book."""
        trans = book.create_transaction()
        checking = book.root_account.lookup_by_full_name("Assets:Checking")
        split = trans.create_split(checking)
        trans.commit_edit()

        assert not trans.is_open
        assert book.transactions == [trans]
        assert checking.splits == [split]

    def test_destroy_detaches_splits(self, book):
        """Test destroying an open transaction discards it and its splits."""
        trans = book.create_transaction()
        checking = book.root_account.lookup_by_full_name("Assets:Checking")
        trans.create_split(checking)
        trans.destroy()

        assert trans.destroyed
        assert trans.splits == []
        assert checking.splits == []
        assert book.transactions == []

    def test_no_edits_after_commit_or_destroy(self):
        """Test closed transactions reject new splits and edits."""
        book = Book()
        committed = book.create_transaction()
        committed.commit_edit()
        with pytest.raises(RuntimeError):
            committed.create_split(None)

        destroyed = book.create_transaction()
        destroyed.destroy()
        with pytest.raises(RuntimeError):
            destroyed.begin_edit()


@pytest.mark.prices
class TestPriceDB:
    """Test nearest in time price lookup."""

    def setup_method(self):
        """Set up a price database with prices around a date."""
        self.usd = Commodity("CURRENCY", "USD")
        self.eur = Commodity("CURRENCY", "EUR")
        self.gbp = Commodity("CURRENCY", "GBP")
        self.when = datetime(2024, 3, 10, 10, 59, tzinfo=timezone.utc)
        self.db = PriceDB()
        self.early = self.db.add_price(
            Price(self.eur, self.usd, self.when - timedelta(days=5), Numeric.from_string("1.05"))
        )
        self.late = self.db.add_price(
            Price(self.eur, self.usd, self.when + timedelta(days=2), Numeric.from_string("1.15"))
        )

    def test_nearest(self):
        """Test the closest price in time wins."""
        assert self.db.lookup_nearest_in_time(self.eur, self.usd, self.when) is self.late

    def test_either_direction(self):
        """Test prices recorded in the opposite direction are found."""
        assert self.db.lookup_nearest_in_time(self.usd, self.eur, self.when) is self.late

    def test_tie_goes_to_earlier(self):
        """Test equal distance prefers the earlier price."""
        tie = self.when - timedelta(days=2)
        earlier = self.db.add_price(Price(self.usd, self.eur, tie, Numeric.from_string("0.9")))
        assert self.db.lookup_nearest_in_time(self.eur, self.usd, self.when) is earlier

    def test_unknown_pair(self):
        """Test pairs without prices."""
        assert self.db.lookup_nearest_in_time(self.gbp, self.usd, self.when) is None
