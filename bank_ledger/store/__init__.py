"""In-memory repositories for clients and accounts."""

from bank_ledger.store.accounts import AccountRepositoryArray
from bank_ledger.store.base import AccountRepository, ClientRepository
from bank_ledger.store.clients import ClientRepositoryArray, ClientRepositoryMap

__all__ = [
    "AccountRepository",
    "AccountRepositoryArray",
    "ClientRepository",
    "ClientRepositoryArray",
    "ClientRepositoryMap",
]
