#!/usr/bin/env python3
"""
Import Account Mapping

Maps account strings found in import files to accounts in the book.
Users confirm mappings interactively; confirmed mappings are kept in an
AccountMap and consulted before falling back to a full name lookup.
"""

import logging

from ..book.models import Account

logger = logging.getLogger(__name__)


class AccountMap:
    """Import string to account cache for an import session."""

    def __init__(self) -> None:
        self._mappings: dict[str, Account] = {}

    def add(self, import_name: str, account: Account) -> None:
        """Remember that import_name stands for account."""
        logger.debug("Mapping import account %r to %s", import_name, account.full_name)
        self._mappings[import_name] = account

    def remove(self, import_name: str) -> None:
        """Forget the mapping for import_name, if any."""
        self._mappings.pop(import_name, None)

    def search(self, import_name: str) -> Account | None:
        """Get the account mapped to import_name."""
        return self._mappings.get(import_name)

    def __len__(self) -> int:
        return len(self._mappings)

    def __contains__(self, import_name: object) -> bool:
        return import_name in self._mappings


class AccountResolver:
    """
    Resolve import account strings to accounts.

    Tries the session's account map first, then the account's full name
    below the root account.
    """

    def __init__(self, root: Account, account_map: AccountMap | None = None):
        self.root = root
        self.account_map = account_map if account_map is not None else AccountMap()

    def resolve(self, name: str) -> Account | None:
        """
        Find the account an import string refers to.

        Args:
            name: Account string from the import file

        Returns:
            Matching account, or None if neither lookup finds one
        """
        account = self.account_map.search(name)
        if account is None:
            account = self.root.lookup_by_full_name(name)
        return account
