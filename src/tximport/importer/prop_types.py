#!/usr/bin/env python3
"""
Import Property Types

Catalog of the column types an import file can have. Each column of a
CSV or fixed-width file is assigned one property type; no two columns share
a type except NONE and the multi-column amount types.

Transaction level types come first (UNIQUE_ID .. VOID_REASON), split level
types after them (ACTION .. TREC_DATE).
"""

from __future__ import annotations

from enum import IntEnum


class PropertyType(IntEnum):
    """Semantics of an import column."""

    NONE = 0
    UNIQUE_ID = 1
    DATE = 2
    NUM = 3
    DESCRIPTION = 4
    NOTES = 5
    COMMODITY = 6
    VOID_REASON = 7

    ACTION = 8
    ACCOUNT = 9
    AMOUNT = 10
    AMOUNT_NEG = 11
    PRICE = 12
    MEMO = 13
    REC_STATE = 14
    REC_DATE = 15
    TACTION = 16
    TACCOUNT = 17
    T_AMOUNT = 18
    T_AMOUNT_NEG = 19
    TMEMO = 20
    TREC_STATE = 21
    TREC_DATE = 22

    @property
    def label(self) -> str:
        """Human readable name, used in the column chooser and error messages."""
        return PROP_TYPE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> PropertyType:
        """
        Find the property type carrying a label.

        Raises:
            ValueError: If no property type has this label
        """
        for prop_type, prop_label in PROP_TYPE_LABELS.items():
            if prop_label == label:
                return prop_type
        raise ValueError(f"Unknown property type label: {label!r}")


# Last member of each scope
TRANS_PROPS = PropertyType.VOID_REASON
SPLIT_PROPS = PropertyType.TREC_DATE

PROP_TYPE_LABELS: dict[PropertyType, str] = {
    PropertyType.NONE: "None",
    PropertyType.UNIQUE_ID: "Transaction ID",
    PropertyType.DATE: "Date",
    PropertyType.NUM: "Number",
    PropertyType.DESCRIPTION: "Description",
    PropertyType.NOTES: "Notes",
    PropertyType.COMMODITY: "Transaction Commodity",
    PropertyType.VOID_REASON: "Void Reason",
    PropertyType.ACTION: "Action",
    PropertyType.ACCOUNT: "Account",
    PropertyType.AMOUNT: "Amount",
    PropertyType.AMOUNT_NEG: "Amount (Negated)",
    PropertyType.PRICE: "Price",
    PropertyType.MEMO: "Memo",
    PropertyType.REC_STATE: "Reconciled",
    PropertyType.REC_DATE: "Reconcile Date",
    PropertyType.TACTION: "Transfer Action",
    PropertyType.TACCOUNT: "Transfer Account",
    PropertyType.T_AMOUNT: "Transfer Amount",
    PropertyType.T_AMOUNT_NEG: "Transfer Amount (Negated)",
    PropertyType.TMEMO: "Transfer Memo",
    PropertyType.TREC_STATE: "Transfer Reconciled",
    PropertyType.TREC_DATE: "Transfer Reconcile Date",
}

# Types the user can't select in two-split mode
TWO_SPLIT_EXCLUDED = frozenset({PropertyType.UNIQUE_ID})

# Types the user can't select in multi-split mode: there is no single
# implicit counter split to put transfer data on.
MULTI_SPLIT_EXCLUDED = frozenset(
    {
        PropertyType.TACTION,
        PropertyType.TACCOUNT,
        PropertyType.T_AMOUNT,
        PropertyType.T_AMOUNT_NEG,
        PropertyType.TMEMO,
        PropertyType.TREC_STATE,
        PropertyType.TREC_DATE,
    }
)

# Types whose values from several columns are summed
MULTI_COL_PROPS = frozenset(
    {
        PropertyType.AMOUNT,
        PropertyType.AMOUNT_NEG,
        PropertyType.T_AMOUNT,
        PropertyType.T_AMOUNT_NEG,
    }
)


def is_trans_prop(prop_type: PropertyType) -> bool:
    """True for transaction level property types."""
    return PropertyType.NONE < prop_type <= TRANS_PROPS


def is_split_prop(prop_type: PropertyType) -> bool:
    """True for split level property types."""
    return TRANS_PROPS < prop_type <= SPLIT_PROPS


def is_multi_col_prop(prop_type: PropertyType) -> bool:
    """True if prop_type may be assigned to more than one column at once."""
    return prop_type in MULTI_COL_PROPS


def sanitize_trans_prop(prop_type: PropertyType, multi_split: bool) -> PropertyType:
    """
    Filter a property type through the current import mode.

    Some types only make sense in a multi-split context and others only in
    a two-split context.

    Args:
        prop_type: Type to check
        multi_split: True in multi-split mode, False in two-split mode

    Returns:
        prop_type if it fits the mode, PropertyType.NONE otherwise
    """
    excluded = MULTI_SPLIT_EXCLUDED if multi_split else TWO_SPLIT_EXCLUDED
    return PropertyType.NONE if prop_type in excluded else prop_type
