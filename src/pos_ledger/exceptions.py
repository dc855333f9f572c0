"""Domain-specific exceptions for POS Ledger.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PosLedgerError for easy catching.
"""


class PosLedgerError(Exception):
    """Base exception for all POS Ledger errors.

    This is the base class for all domain-specific exceptions in the package.
    Users can catch this exception to handle any POS Ledger error.
    """

    pass


class ValidationError(PosLedgerError, ValueError):
    """Raised when a sale input is rejected.

    This exception is raised when:
    - Product name or category is empty or blank
    - Price is not a positive, finite decimal
    - Quantity is not a positive integer

    The collection and the durable slot are left untouched.
    """

    pass


class LedgerStateError(PosLedgerError):
    """Raised when the ledger is used before its collection was loaded."""

    pass


class PersistenceError(PosLedgerError):
    """Base class for failures of the durable sales slot."""

    pass


class PersistenceCorruptionError(PersistenceError):
    """Raised when the stored snapshot cannot be parsed.

    This exception is raised when:
    - The slot does not contain valid JSON
    - The top-level value is not a list of sale objects
    - A sale object is missing fields or holds values of the wrong type
    """

    pass


class PersistenceWriteError(PersistenceError):
    """Raised when the snapshot cannot be written to the slot.

    The in-memory mutation that triggered the write is not rolled back.
    """

    pass
