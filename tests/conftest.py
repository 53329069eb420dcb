"""Pytest configuration and fixtures."""

import pytest

from bank_ledger.facade import Bank
from bank_ledger.models import Address, CheckingAccount, Client


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ana() -> Client:
    """Client Ana with CPF 111."""
    return Client(cpf="111", name="Ana")


@pytest.fixture
def bruno() -> Client:
    """Client Bruno with an address."""
    return Client(
        cpf="222",
        name="Bruno",
        address=Address(postal_code="01310-100", number="1000", complement="Apto 12"),
    )


@pytest.fixture
def bank() -> Bank:
    """Bank with default configuration (map client store, 100 account slots)."""
    return Bank.from_config()


@pytest.fixture
def bank_with_ana(bank: Bank, ana: Client) -> Bank:
    """Bank with Ana registered and a checking account A1 holding 100.0."""
    bank.register_client(ana)
    bank.register_account(CheckingAccount("A1", owner=ana, balance=100.0))
    return bank
