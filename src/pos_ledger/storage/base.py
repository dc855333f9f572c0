"""Base interface for sale collection stores.

This module defines the abstract base class that every persistence backend
implements, so the ledger depends on the interface and not on a concrete
storage mechanism (JSON file, in-memory fake, ...).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pos_ledger.sales.models import SaleRecord


class SalesStore(ABC):
    """Abstract durable slot holding one full sale collection snapshot.

    Stores never write partially: ``save`` replaces the whole snapshot.
    """

    @abstractmethod
    def load(self) -> list[SaleRecord]:
        """Read the stored collection.

        Returns:
            Sale records in stored order; empty list if the slot is absent.

        Raises:
            PersistenceCorruptionError: If the slot content does not parse.
            PersistenceError: If the slot exists but cannot be read.
        """
        pass

    @abstractmethod
    def save(self, sales: Sequence[SaleRecord]) -> None:
        """Overwrite the slot with the given collection.

        Args:
            sales: Full collection to persist, in order.

        Raises:
            PersistenceWriteError: If the slot cannot be written.
        """
        pass
