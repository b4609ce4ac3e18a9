#!/usr/bin/env python3
"""
Commodity Table

Lookup of commodities by unique name or by (namespace, mnemonic).
"""

from .models import Commodity


class CommodityTable:
    """
    Commodities of a book, grouped by namespace.

    Namespaces are enumerated in the order they were first used so lookups
    that walk all namespaces are deterministic.
    """

    def __init__(self) -> None:
        self._namespaces: dict[str, dict[str, Commodity]] = {}

    def insert(self, commodity: Commodity) -> Commodity:
        """
        Add a commodity, returning the already known one if it exists.

        Args:
            commodity: Commodity to add

        Returns:
            The commodity stored in the table
        """
        mnemonics = self._namespaces.setdefault(commodity.namespace, {})
        return mnemonics.setdefault(commodity.mnemonic, commodity)

    def lookup(self, namespace: str, mnemonic: str) -> Commodity | None:
        """Find a commodity by namespace and mnemonic."""
        return self._namespaces.get(namespace, {}).get(mnemonic)

    def lookup_unique(self, unique_name: str) -> Commodity | None:
        """Find a commodity by its 'NAMESPACE::MNEMONIC' unique name."""
        namespace, sep, mnemonic = unique_name.partition("::")
        if not sep:
            return None
        return self.lookup(namespace, mnemonic)

    def namespaces(self) -> list[str]:
        """Get all namespaces in insertion order."""
        return list(self._namespaces)

    def __len__(self) -> int:
        return sum(len(m) for m in self._namespaces.values())
