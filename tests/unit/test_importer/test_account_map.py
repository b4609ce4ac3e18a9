#!/usr/bin/env python3
"""Tests for import account mapping."""

from tximport.importer import AccountMap, AccountResolver


class TestAccountMap:
    """Test the import string cache."""

    def test_add_search_remove(self, book):
        """Test the mapping lifecycle."""
        checking = book.root_account.lookup_by_full_name("Assets:Checking")
        account_map = AccountMap()
        account_map.add("CHK", checking)

        assert "CHK" in account_map
        assert len(account_map) == 1
        assert account_map.search("CHK") is checking

        account_map.remove("CHK")
        account_map.remove("CHK")
        assert account_map.search("CHK") is None


class TestAccountResolver:
    """Test resolving import account strings."""

    def test_full_name(self, book):
        """Test full names resolve without a mapping."""
        resolver = AccountResolver(book.root_account)
        assert resolver.resolve("Income:Salary").full_name == "Income:Salary"
        assert resolver.resolve("Salary") is None

    def test_mapping_wins(self, book):
        """Test a confirmed mapping takes precedence over the full name."""
        account_map = AccountMap()
        travel = book.root_account.lookup_by_full_name("Expenses:Travel")
        account_map.add("Income:Salary", travel)
        account_map.add("Trips", travel)

        resolver = AccountResolver(book.root_account, account_map)
        assert resolver.resolve("Income:Salary") is travel
        assert resolver.resolve("Trips") is travel
