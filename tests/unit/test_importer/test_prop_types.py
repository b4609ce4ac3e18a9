#!/usr/bin/env python3
"""Tests for the import property type catalog."""

import pytest

from tximport.importer import PreSplit, PreTransaction
from tximport.importer.prop_types import (
    MULTI_SPLIT_EXCLUDED,
    PROP_TYPE_LABELS,
    PropertyType,
    is_multi_col_prop,
    is_split_prop,
    is_trans_prop,
    sanitize_trans_prop,
)


class TestPropertyTypeCatalog:
    """Test ordering and labels of property types."""

    def test_scopes_partition_the_catalog(self):
        """Test every type except NONE is either a transaction or a split type."""
        for prop_type in PropertyType:
            if prop_type == PropertyType.NONE:
                assert not is_trans_prop(prop_type)
                assert not is_split_prop(prop_type)
            else:
                assert is_trans_prop(prop_type) != is_split_prop(prop_type)

    def test_scope_boundaries(self):
        """Test the last transaction type and first split type."""
        assert is_trans_prop(PropertyType.VOID_REASON)
        assert is_split_prop(PropertyType.ACTION)
        assert is_split_prop(PropertyType.TREC_DATE)

    def test_every_type_has_a_unique_label(self):
        """Test labels are complete and distinct."""
        assert set(PROP_TYPE_LABELS) == set(PropertyType)
        assert len(set(PROP_TYPE_LABELS.values())) == len(PropertyType)

    def test_from_label(self):
        """Test finding a type by its label."""
        assert PropertyType.from_label("Transfer Amount (Negated)") == PropertyType.T_AMOUNT_NEG
        assert PropertyType.COMMODITY.label == "Transaction Commodity"
        with pytest.raises(ValueError):
            PropertyType.from_label("Balance")

    def test_multi_column_types(self):
        """Test only the amount types may span several columns."""
        multi = {p for p in PropertyType if is_multi_col_prop(p)}
        assert multi == {
            PropertyType.AMOUNT,
            PropertyType.AMOUNT_NEG,
            PropertyType.T_AMOUNT,
            PropertyType.T_AMOUNT_NEG,
        }


class TestSanitize:
    """Test filtering types through the import mode."""

    @pytest.mark.parametrize("prop_type", sorted(MULTI_SPLIT_EXCLUDED))
    def test_transfer_types_dropped_in_multi_split(self, prop_type):
        """Test transfer types are not available in multi-split mode."""
        assert sanitize_trans_prop(prop_type, multi_split=True) == PropertyType.NONE
        assert sanitize_trans_prop(prop_type, multi_split=False) == prop_type

    def test_unique_id_dropped_in_two_split(self):
        """Test transaction IDs are only available in multi-split mode."""
        assert sanitize_trans_prop(PropertyType.UNIQUE_ID, multi_split=False) == PropertyType.NONE
        assert sanitize_trans_prop(PropertyType.UNIQUE_ID, multi_split=True) == PropertyType.UNIQUE_ID

    def test_other_types_pass(self):
        """Test ordinary types are kept in both modes."""
        for multi_split in (True, False):
            assert sanitize_trans_prop(PropertyType.AMOUNT, multi_split) == PropertyType.AMOUNT
            assert sanitize_trans_prop(PropertyType.NONE, multi_split) == PropertyType.NONE


class TestDispatchCoverage:
    """Test both accumulators know every property type."""

    def test_transaction_dispatch_complete(self):
        """Test every type has an entry in the transaction dispatch table."""
        assert set(PreTransaction._SETTERS) == set(PropertyType)

    def test_split_dispatch_complete(self):
        """Test every type has an entry in the split dispatch table."""
        assert set(PreSplit._SETTERS) == set(PropertyType)
