"""File-backed sale store: one JSON snapshot file per slot."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from pos_ledger.exceptions import (
    PersistenceCorruptionError,
    PersistenceError,
    PersistenceWriteError,
)
from pos_ledger.sales.models import SaleRecord
from pos_ledger.storage.base import SalesStore
from pos_ledger.storage.snapshot import dump_snapshot, parse_snapshot

if TYPE_CHECKING:
    from pos_ledger.config import LedgerPaths

logger = logging.getLogger(__name__)


class JsonFileStore(SalesStore):
    """Persist the sale collection as a JSON file.

    Writes go to a temporary file in the target directory which then
    replaces the slot with ``os.replace``, so readers only ever see a
    complete snapshot.

    Example:
        >>> from pos_ledger import LedgerPaths
        >>> store = JsonFileStore.from_paths(LedgerPaths.from_root("data"))
        >>> store.load()
        []

    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Args:
            path: Snapshot file. Need not exist yet.

        """
        self.path = Path(path)

    @classmethod
    def from_paths(cls, paths: LedgerPaths) -> JsonFileStore:
        """Build the store for the slot configured in ``paths``."""
        return cls(paths.sales_slot)

    def load(self) -> list[SaleRecord]:
        if not self.path.exists():
            logger.debug("No snapshot at %s, starting empty", self.path)
            return []

        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PersistenceCorruptionError(f"Snapshot {self.path} is not UTF-8: {e}") from e
        except OSError as e:
            # Unreadable, not corrupt: the stored data may still be intact
            logger.error("Failed to read snapshot %s: %s", self.path, e)
            raise PersistenceError(f"Cannot read snapshot {self.path}: {e}") from e

        return parse_snapshot(text)

    def save(self, sales: Sequence[SaleRecord]) -> None:
        text = dump_snapshot(sales)
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(prefix=".tmp_", dir=self.path.parent)
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            logger.error("Failed to write snapshot %s: %s", self.path, e)
            raise PersistenceWriteError(f"Cannot write snapshot {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.debug("Wrote snapshot %s with %d sale(s)", self.path, len(sales))
