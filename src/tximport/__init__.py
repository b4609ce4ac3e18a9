"""
Transaction Importer - CSV Transaction Property Assembly

Turns loosely typed cells of CSV or fixed-width import files into validated
double-entry transactions: a transaction header plus balanced splits.

Key Features:
- Column property catalog for two-split and multi-split imports
- Locale and format aware date, amount, commodity and reconcile parsing
- Per-property error tracking across partial and repeated rows
- Multi-currency values via imported prices or the book's price database

Packages:
- core: Numbers, monetary and date formats, configuration, errors
- book: In-memory accounting records the importer writes into
- importer: Property accumulators and draft transactions
- cli: Command-line interface

Example Usage:
    from tximport.importer import PreSplit, PreTransaction, PropertyType
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.errors import ParseError
from .core.numeric import Numeric
from .importer import DraftTransaction, PreSplit, PreTransaction, PropertyType

__all__ = [
    # Core primitives
    "Numeric",
    "ParseError",

    # Importer
    "DraftTransaction",
    "PreSplit",
    "PreTransaction",
    "PropertyType",

    # Configuration
    "get_config",
    "Environment",
]
