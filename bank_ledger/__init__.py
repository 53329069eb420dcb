"""In-memory banking ledger: clients, accounts and ledger operations."""

from bank_ledger.facade import Bank

__version__ = "0.1.0"

__all__ = ["Bank", "__version__"]
