"""Domain-specific exceptions for the expense ledger."""


class ExpenseLedgerError(Exception):
    """Base class for errors raised by this package."""


class ValidationError(ExpenseLedgerError, ValueError):
    """Raised when form input does not satisfy an expense rule.

    ``field`` names the offending input so the UI can point at it,
    ``reason`` is a short machine-friendly tag ("missing title", ...).
    """

    def __init__(self, field: str, reason: str, message: str):
        super().__init__(message)
        self.field = field
        self.reason = reason
        self.message = message


class PersistenceReadError(ExpenseLedgerError, ValueError):
    """Raised when the stored expense list cannot be decoded."""


class RecordNotFoundError(ExpenseLedgerError, LookupError):
    """Raised when an expense id is not present in the ledger."""
