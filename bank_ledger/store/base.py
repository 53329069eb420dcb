"""Repository contracts for clients and accounts.

Any backing store (array, dict, SQL table, document store) implements these
with the same error semantics: lookups, updates and removals of an absent key
raise the matching ``*NotFoundError``; ``insert`` performs no uniqueness
check, which is the registrar's job.
"""

from abc import ABC, abstractmethod

from bank_ledger.models import Account, Client


class ClientRepository(ABC):
    """Store of clients keyed by CPF."""

    @abstractmethod
    def insert(self, client: Client) -> None:
        """Store a client without checking for duplicates."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, cpf: str) -> bool:
        """Return whether a client is stored under ``cpf``."""
        raise NotImplementedError

    @abstractmethod
    def find(self, cpf: str) -> Client:
        """Return the client stored under ``cpf``.

        Raises ``ClientNotFoundError`` if absent.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, client: Client) -> None:
        """Replace the stored client with the same CPF.

        Raises ``ClientNotFoundError`` if absent.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, cpf: str) -> None:
        """Delete the client stored under ``cpf``.

        Raises ``ClientNotFoundError`` if absent.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Client]:
        """Return all stored clients."""
        raise NotImplementedError


class AccountRepository(ABC):
    """Store of accounts keyed by account number."""

    @abstractmethod
    def insert(self, account: Account) -> None:
        """Store an account without checking for duplicates."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, number: str) -> bool:
        """Return whether an account is stored under ``number``."""
        raise NotImplementedError

    @abstractmethod
    def find(self, number: str) -> Account:
        """Return the account stored under ``number``.

        Raises ``AccountNotFoundError`` if absent.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, account: Account) -> None:
        """Replace the stored account with the same number.

        Raises ``AccountNotFoundError`` if absent.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, number: str) -> None:
        """Delete the account stored under ``number``.

        Raises ``AccountNotFoundError`` if absent.
        """
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Account]:
        """Return all stored accounts."""
        raise NotImplementedError
