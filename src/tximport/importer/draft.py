#!/usr/bin/env python3
"""
Draft Transaction

Holder for a transaction that is still being assembled from import data.

The holder exclusively owns the transaction's open edit. Unless the
transaction is committed or handed off, closing or discarding the holder
destroys it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from ..book.models import Account, ReconcileState, Transaction
from ..core.numeric import Numeric

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class DraftTransaction:
    """
    A possibly incomplete transaction and what is known about its transfer split.

    The transfer fields are only filled in when import data described a
    transfer split that could not be created yet (no transfer account, or no
    usable price). A downstream matcher can use them to complete the
    balancing split.

    Usage:
        with pre_trans.materialize(book, usd) as draft:
            pre_split.materialize(draft)
            trans = draft.release()
    """

    _trans: Transaction | None = field(repr=False)

    price: Numeric | None = None
    taction: str | None = None
    tmemo: str | None = None
    tamount: Numeric | None = None
    taccount: Account | None = None
    trec_state: ReconcileState | None = None
    trec_date: date | None = None

    void_reason: str | None = None

    @property
    def transaction(self) -> Transaction:
        """
        Get the owned transaction.

        Raises:
            RuntimeError: If ownership has already ended
        """
        if self._trans is None:
            raise RuntimeError("Draft transaction no longer owns a transaction")
        return self._trans

    @property
    def owns_transaction(self) -> bool:
        """True until the transaction is committed, released or destroyed."""
        return self._trans is not None

    def commit(self) -> Transaction:
        """Commit the open edit and give up ownership."""
        self.transaction.commit_edit()
        return self.release()

    def release(self) -> Transaction:
        """Hand the still open transaction to the caller and give up ownership."""
        trans = self.transaction
        self._trans = None
        return trans

    def close(self) -> None:
        """Destroy the transaction unless ownership already ended."""
        trans, self._trans = self._trans, None
        if trans is not None:
            logger.debug("Discarding uncommitted draft transaction %r", trans)
            trans.destroy()

    def __enter__(self) -> DraftTransaction:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        # Attributes may be gone if __init__ never finished
        if getattr(self, "_trans", None) is not None:
            self.close()
