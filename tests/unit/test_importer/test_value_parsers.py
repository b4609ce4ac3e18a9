#!/usr/bin/env python3
"""Tests for the import value parsers."""

from datetime import date

import pytest

from tximport.book import Commodity, ReconcileState
from tximport.core.errors import ParseError
from tximport.core.numeric import Numeric
from tximport.importer.parsers import parse_commodity, parse_date, parse_monetary, parse_reconciled


class TestParseCommodity:
    """Test commodity resolution order."""

    def test_unique_name(self, book):
        """Test a full unique name selects that exact commodity."""
        assert parse_commodity("NYSE::ABC", book.commodity_table) == Commodity("NYSE", "ABC")

    def test_currency_mnemonic(self, book, eur):
        """Test a bare currency code."""
        assert parse_commodity("EUR", book.commodity_table) is eur

    def test_first_namespace_wins(self, book):
        """Test an ambiguous mnemonic resolves to the first namespace that has it."""
        assert parse_commodity("ABC", book.commodity_table) == Commodity("NASDAQ", "ABC")

    def test_other_namespace(self, book):
        """Test a mnemonic only known outside the currency namespace."""
        assert parse_commodity("XYZ", book.commodity_table) == Commodity("NYSE", "XYZ")

    def test_empty_is_none(self, book):
        """Test an empty string means no commodity."""
        assert parse_commodity("", book.commodity_table) is None

    def test_unknown(self, book):
        """Test an unknown commodity raises."""
        with pytest.raises(ParseError, match="valid commodity"):
            parse_commodity("DOGE", book.commodity_table)


class TestParseReconciled:
    """Test reconcile code parsing."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("n", ReconcileState.NOT_RECONCILED),
            ("c", ReconcileState.CLEARED),
            ("y", ReconcileState.RECONCILED),
            ("f", ReconcileState.FROZEN),
            ("v", ReconcileState.NOT_RECONCILED),
        ],
    )
    def test_codes(self, code, expected):
        """Test each code, voided maps to not reconciled."""
        assert parse_reconciled(code) == expected

    @pytest.mark.parametrize("code", ["", "x", "Y", "yes"])
    def test_invalid(self, code):
        """Test unknown codes raise."""
        with pytest.raises(ParseError, match="valid reconcile state"):
            parse_reconciled(code)


class TestParseWrappers:
    """Test the date and monetary wrappers raise ParseError."""

    def test_date(self):
        """Test valid and invalid dates."""
        assert parse_date("2024-03-01", 0) == date(2024, 3, 1)
        with pytest.raises(ParseError, match="selected date format"):
            parse_date("March 1st", 0)

    def test_bad_date_format_selector(self):
        """Test an out of range date format is a parse error too."""
        with pytest.raises(ParseError):
            parse_date("2024-03-01", 9)

    @pytest.mark.currency
    def test_monetary(self):
        """Test valid and invalid amounts."""
        assert parse_monetary("1,5", 2) == Numeric.from_string("1.5")
        assert parse_monetary("", 1) == Numeric.zero()
        with pytest.raises(ParseError, match="valid number"):
            parse_monetary("abc", 1)
