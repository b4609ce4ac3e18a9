"""
Book Package

In-memory stand-ins for the accounting engine the importer writes into:
commodity table, account tree, price database and transaction records.
"""

from .book import Book
from .commodities import CommodityTable
from .models import (
    CURRENCY_NAMESPACE,
    Account,
    Commodity,
    ReconcileState,
    Split,
    Transaction,
)
from .prices import Price, PriceDB

__all__ = [
    "Account",
    "Book",
    "CURRENCY_NAMESPACE",
    "Commodity",
    "CommodityTable",
    "Price",
    "PriceDB",
    "ReconcileState",
    "Split",
    "Transaction",
]
