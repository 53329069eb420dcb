"""Single coordinating entry point over the client and account registrars."""

from __future__ import annotations

import logging

from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import InvalidClientError
from bank_ledger.models import Account, Client
from bank_ledger.registrars import AccountRegistrar, ClientRegistrar
from bank_ledger.store import (
    AccountRepositoryArray,
    ClientRepository,
    ClientRepositoryArray,
    ClientRepositoryMap,
)

logger = logging.getLogger(__name__)


class Bank:
    """Facade over the client and account registrars.

    A ``Bank`` is built explicitly by the process entry point and handed to
    whoever needs it; there is no module-level instance.

    Parameters
    ----------
    clients : ClientRegistrar
        Client registrar.
    accounts : AccountRegistrar
        Account registrar.
    """

    def __init__(self, clients: ClientRegistrar, accounts: AccountRegistrar) -> None:
        self.clients = clients
        self.accounts = accounts

    @classmethod
    def from_config(cls, config: LedgerConfig | None = None) -> Bank:
        """Build a bank over the repositories selected by ``config``."""
        config = config or LedgerConfig()
        config.validate()

        store = config.store
        client_repository: ClientRepository
        if store.client_backend == "array":
            client_repository = ClientRepositoryArray(store.client_capacity)
        else:
            client_repository = ClientRepositoryMap()
        account_repository = AccountRepositoryArray(store.account_capacity)

        logger.info(
            "Bank ready: %s client store, %d account slots",
            store.client_backend,
            store.account_capacity,
        )
        return cls(ClientRegistrar(client_repository), AccountRegistrar(account_repository))

    # Clients
    def register_client(self, client: Client) -> None:
        self.clients.register(client)

    def update_client(self, client: Client) -> None:
        self.clients.update(client)

    def find_client(self, cpf: str) -> Client:
        return self.clients.find(cpf)

    def unregister_client(self, cpf: str) -> None:
        self.clients.unregister(cpf)

    def list_clients(self) -> list[Client]:
        return self.clients.list()

    # Accounts
    def register_account(self, account: Account) -> None:
        """Register an account owned by an already registered client.

        Raises
        ------
        InvalidClientError
            If the account has no owner.
        ClientNotFoundError
            If the owner is not registered.
        AccountAlreadyExistsError
            If the account number is taken.
        """
        if account.owner is None:
            raise InvalidClientError(f"Account {account.number} has no owning client")
        self.clients.find(account.owner.cpf)
        self.accounts.register(account)

    def update_account(self, account: Account) -> None:
        self.accounts.update(account)

    def find_account(self, number: str) -> Account:
        return self.accounts.find(number)

    def remove_account(self, number: str) -> None:
        self.accounts.remove(number)

    def list_accounts(self) -> list[Account]:
        return self.accounts.list()

    # Ledger operations
    def credit(self, number: str, amount: float) -> None:
        self.accounts.credit(number, amount)

    def debit(self, number: str, amount: float) -> None:
        self.accounts.debit(number, amount)

    def transfer(self, from_number: str, to_number: str, amount: float) -> None:
        self.accounts.transfer(from_number, to_number, amount)

    def apply_interest(self, number: str, rate: float) -> float:
        return self.accounts.apply_interest(number, rate)

    def apply_bonus(self, number: str) -> float:
        return self.accounts.apply_bonus(number)

    def summary(self) -> dict[str, int]:
        """Return counts of registered clients and accounts."""
        return {
            "clients": len(self.list_clients()),
            "accounts": len(self.list_accounts()),
        }
