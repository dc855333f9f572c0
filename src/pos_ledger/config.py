"""Configuration for POS Ledger.

This module provides the filesystem configuration used by the file-backed
store, plus the few constants shared across modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Name of the single durable slot holding the sale collection
DEFAULT_SLOT_NAME = "salesData"

# Label shown for top product/category when there are no sales
EMPTY_LABEL = "None"

# Keys of one persisted sale object, in write order
SNAPSHOT_FIELDS = ("id", "date", "productName", "price", "quantity", "category", "total")


@dataclass
class LedgerPaths:
    """All filesystem paths used by the ledger.

    Attributes:
        data_root: Directory holding the snapshot file.
        slot_name: Name of the durable slot (file stem).

    Directory Structure:
        data_root/
        └── salesData.json   # full sale collection snapshot
    """

    data_root: Path
    slot_name: str = DEFAULT_SLOT_NAME

    @classmethod
    def from_root(
        cls,
        data_root: str | Path,
        slot_name: str = DEFAULT_SLOT_NAME,
    ) -> LedgerPaths:
        """Create LedgerPaths from a root directory.

        Args:
            data_root: Directory for the snapshot file.
            slot_name: Name of the durable slot.

        Returns:
            LedgerPaths instance.

        Examples:
            >>> paths = LedgerPaths.from_root("data")
            >>> paths.sales_slot
            PosixPath('data/salesData.json')
        """
        if isinstance(data_root, str):
            data_root = Path(data_root)

        return cls(data_root=data_root, slot_name=slot_name)

    @property
    def sales_slot(self) -> Path:
        """JSON file holding the sale collection."""
        return self.data_root / f"{self.slot_name}.json"

    def ensure_dirs(self) -> None:
        """Create the data root directory."""
        self.data_root.mkdir(parents=True, exist_ok=True)
