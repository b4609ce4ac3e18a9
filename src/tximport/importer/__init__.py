"""
Importer Package

Turns (property type, string value) pairs harvested from import rows into
draft transactions with balanced splits.

Typical use, one logical transaction at a time:
    pre_trans = PreTransaction(date_format, multi_split, book.commodity_table)
    pre_split = PreSplit(date_format, currency_format, AccountResolver(book.root_account))
    ... assign / accumulate cells ...
    if not pre_trans.check_essentials() and not pre_split.check_essentials():
        draft = pre_trans.materialize(book, base_currency)
        pre_split.materialize(draft)
"""

from .account_map import AccountMap, AccountResolver
from .draft import DraftTransaction
from .parsers import parse_commodity, parse_date, parse_monetary, parse_reconciled
from .pre_split import PreSplit
from .pre_trans import ErrorMap, PreTransaction, error_messages
from .prop_types import (
    MULTI_COL_PROPS,
    PROP_TYPE_LABELS,
    PropertyType,
    is_multi_col_prop,
    is_split_prop,
    is_trans_prop,
    sanitize_trans_prop,
)

__all__ = [
    "AccountMap",
    "AccountResolver",
    "DraftTransaction",
    "ErrorMap",
    "MULTI_COL_PROPS",
    "PROP_TYPE_LABELS",
    "PreSplit",
    "PreTransaction",
    "PropertyType",
    "error_messages",
    "is_multi_col_prop",
    "is_split_prop",
    "is_trans_prop",
    "parse_commodity",
    "parse_date",
    "parse_monetary",
    "parse_reconciled",
    "sanitize_trans_prop",
]
