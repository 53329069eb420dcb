"""Tests for the Bank facade."""

import pytest

from bank_ledger.config import LedgerConfig, StoreConfig
from bank_ledger.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    CapacityExceededError,
    ClientAlreadyExistsError,
    ClientNotFoundError,
    ConfigurationError,
    InsufficientBalanceError,
    InvalidAccountKindError,
    InvalidClientError,
)
from bank_ledger.facade import Bank
from bank_ledger.models import (
    BonusAccount,
    CheckingAccount,
    Client,
    SavingsAccount,
    TaxedAccount,
)
from bank_ledger.store import ClientRepositoryArray, ClientRepositoryMap


class TestBankConstruction:
    """Tests for building a Bank."""

    def test_default_config(self, bank: Bank) -> None:
        assert isinstance(bank.clients.repository, ClientRepositoryMap)
        assert bank.accounts.repository.capacity == 100
        assert bank.summary() == {"clients": 0, "accounts": 0}

    def test_array_client_store(self) -> None:
        config = LedgerConfig(
            store=StoreConfig(client_backend="array", client_capacity=3, account_capacity=5)
        )

        bank = Bank.from_config(config)

        assert isinstance(bank.clients.repository, ClientRepositoryArray)
        assert bank.clients.repository.capacity == 3
        assert bank.accounts.repository.capacity == 5

    def test_invalid_config(self) -> None:
        config = LedgerConfig(store=StoreConfig(client_backend="sql"))

        with pytest.raises(ConfigurationError, match="sql"):
            Bank.from_config(config)

    def test_independent_instances(self, ana: Client) -> None:
        first = Bank.from_config()
        second = Bank.from_config()

        first.register_client(ana)

        assert second.list_clients() == []


class TestBankClients:
    """Client pass-through operations."""

    def test_register_and_find(self, bank: Bank, ana: Client) -> None:
        bank.register_client(ana)
        assert bank.find_client("111") is ana

    def test_register_duplicate(self, bank: Bank, ana: Client) -> None:
        bank.register_client(ana)
        with pytest.raises(ClientAlreadyExistsError):
            bank.register_client(Client(cpf="111", name="Ana Clone"))

    def test_update_client(self, bank: Bank, ana: Client) -> None:
        bank.register_client(ana)
        bank.update_client(Client(cpf="111", name="Ana Souza"))
        assert bank.find_client("111").name == "Ana Souza"

    def test_unregister_client(self, bank: Bank, ana: Client, bruno: Client) -> None:
        bank.register_client(ana)
        bank.register_client(bruno)

        bank.unregister_client("111")

        assert bank.list_clients() == [bruno]
        with pytest.raises(ClientNotFoundError):
            bank.find_client("111")


class TestBankRegisterAccount:
    """Account registration through the facade."""

    def test_requires_owner(self, bank: Bank) -> None:
        with pytest.raises(InvalidClientError):
            bank.register_account(CheckingAccount("A1"))
        assert bank.list_accounts() == []

    def test_requires_registered_owner(self, bank: Bank, ana: Client) -> None:
        with pytest.raises(ClientNotFoundError) as exc_info:
            bank.register_account(CheckingAccount("A1", owner=ana))

        assert exc_info.value.cpf == "111"
        assert bank.list_accounts() == []

    def test_duplicate_number(self, bank_with_ana: Bank, ana: Client) -> None:
        with pytest.raises(AccountAlreadyExistsError):
            bank_with_ana.register_account(SavingsAccount("A1", owner=ana))

        assert isinstance(bank_with_ana.find_account("A1"), CheckingAccount)

    def test_capacity_exceeded(self, ana: Client) -> None:
        bank = Bank.from_config(LedgerConfig(store=StoreConfig(account_capacity=1)))
        bank.register_client(ana)
        bank.register_account(CheckingAccount("A1", owner=ana))

        with pytest.raises(CapacityExceededError):
            bank.register_account(CheckingAccount("A2", owner=ana))

    def test_update_and_remove_account(self, bank_with_ana: Bank, ana: Client) -> None:
        bank_with_ana.update_account(CheckingAccount("A1", owner=ana, balance=5.0))
        assert bank_with_ana.find_account("A1").balance == 5.0

        bank_with_ana.remove_account("A1")

        with pytest.raises(AccountNotFoundError):
            bank_with_ana.find_account("A1")


class TestBankLedger:
    """End-to-end ledger behavior through the facade."""

    def test_overdraft_is_rejected(self, bank_with_ana: Bank) -> None:
        with pytest.raises(InsufficientBalanceError) as exc_info:
            bank_with_ana.debit("A1", 150.0)

        assert exc_info.value.number == "A1"
        assert exc_info.value.balance == 100.0
        assert bank_with_ana.find_account("A1").balance == 100.0

    def test_credit_then_debit(self, bank_with_ana: Bank) -> None:
        bank_with_ana.credit("A1", 50.0)
        bank_with_ana.debit("A1", 150.0)

        assert bank_with_ana.find_account("A1").balance == 0.0

    def test_transfer(self, bank_with_ana: Bank, ana: Client) -> None:
        bank_with_ana.register_account(CheckingAccount("A2", owner=ana))

        bank_with_ana.transfer("A1", "A2", 60.0)

        assert bank_with_ana.find_account("A1").balance == 40.0
        assert bank_with_ana.find_account("A2").balance == 60.0

    def test_transfer_to_unknown_account(self, bank_with_ana: Bank) -> None:
        with pytest.raises(AccountNotFoundError):
            bank_with_ana.transfer("A1", "ZZ", 10.0)
        assert bank_with_ana.find_account("A1").balance == 100.0

    def test_taxed_account_fee(self, bank: Bank, ana: Client) -> None:
        bank.register_client(ana)
        bank.register_account(TaxedAccount("T1", owner=ana, balance=10.0))

        bank.debit("T1", 9.0)

        assert bank.find_account("T1").balance == pytest.approx(0.991)

    def test_bonus_lifecycle(self, bank: Bank, ana: Client) -> None:
        bank.register_client(ana)
        bank.register_account(BonusAccount("B1", owner=ana))

        bank.credit("B1", 100.0)
        account = bank.find_account("B1")
        assert account.balance == 100.0
        assert account.bonus == pytest.approx(1.0)

        bank.apply_bonus("B1")
        account = bank.find_account("B1")
        assert account.balance == pytest.approx(101.0)
        assert account.bonus == 0.0

    def test_interest(self, bank: Bank, ana: Client) -> None:
        bank.register_client(ana)
        bank.register_account(SavingsAccount("S1", owner=ana, balance=1000.0))

        assert bank.apply_interest("S1", 0.02) == pytest.approx(20.0)
        assert bank.find_account("S1").balance == pytest.approx(1020.0)

    def test_interest_on_wrong_kind(self, bank_with_ana: Bank) -> None:
        with pytest.raises(InvalidAccountKindError):
            bank_with_ana.apply_interest("A1", 0.02)

    def test_summary(self, bank_with_ana: Bank, ana: Client, bruno: Client) -> None:
        bank_with_ana.register_client(bruno)
        bank_with_ana.register_account(SavingsAccount("S1", owner=bruno))

        assert bank_with_ana.summary() == {"clients": 2, "accounts": 2}
