"""In-memory sale store, mainly for tests."""

from __future__ import annotations

from collections.abc import Sequence

from pos_ledger.exceptions import PersistenceWriteError
from pos_ledger.sales.models import SaleRecord
from pos_ledger.storage.base import SalesStore
from pos_ledger.storage.snapshot import dump_snapshot, parse_snapshot


class InMemoryStore(SalesStore):
    """Keep the snapshot text in memory.

    The text goes through the same codec as the file store, so loading
    returns fresh records equal to the saved ones.

    Attributes:
        text: Current snapshot text, or None if nothing was saved yet.
        fail_writes: When True, ``save`` raises PersistenceWriteError.
        save_count: Number of successful saves.
    """

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.fail_writes = False
        self.save_count = 0

    def load(self) -> list[SaleRecord]:
        if self.text is None:
            return []
        return parse_snapshot(self.text)

    def save(self, sales: Sequence[SaleRecord]) -> None:
        if self.fail_writes:
            raise PersistenceWriteError("In-memory slot is not writable")
        self.text = dump_snapshot(sales)
        self.save_count += 1
