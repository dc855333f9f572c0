"""Persistence for the sale collection.

Stores load and save the full collection as one snapshot:

- **JsonFileStore**: JSON file slot with atomic replace.
- **InMemoryStore**: snapshot text kept in memory, for tests.

Example:
    >>> from pos_ledger import LedgerPaths
    >>> from pos_ledger.storage import JsonFileStore
    >>>
    >>> store = JsonFileStore.from_paths(LedgerPaths.from_root("data"))
    >>> sales = store.load()
    >>> store.save(sales)
"""

from pos_ledger.storage.base import SalesStore
from pos_ledger.storage.json_store import JsonFileStore
from pos_ledger.storage.memory import InMemoryStore
from pos_ledger.storage.snapshot import dump_snapshot, parse_snapshot

__all__ = ["InMemoryStore", "JsonFileStore", "SalesStore", "dump_snapshot", "parse_snapshot"]
