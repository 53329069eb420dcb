"""Domain models for the banking ledger."""

from bank_ledger.models.account import (
    ACCOUNT_TYPES,
    Account,
    BonusAccount,
    CheckingAccount,
    SavingsAccount,
    TaxedAccount,
    open_account,
)
from bank_ledger.models.base import Address
from bank_ledger.models.client import Client
from bank_ledger.models.enums import AccountKind

__all__ = [
    "ACCOUNT_TYPES",
    "Account",
    "AccountKind",
    "Address",
    "BonusAccount",
    "CheckingAccount",
    "Client",
    "SavingsAccount",
    "TaxedAccount",
    "open_account",
]
