"""Account models for the banking ledger.

Every account shares ``number``, ``balance`` and ``owner``. The concrete
classes differ only in how ``credit`` and ``debit`` move the balance:

- CHECKING: plain credit and debit.
- SAVINGS: plain credit and debit, plus ``apply_interest(rate)``.
- TAXED: each debit costs ``amount * FEE_RATE`` on top of the amount.
- BONUS: each credit accrues ``amount * BONUS_RATE`` into ``bonus``,
  folded into the balance by ``apply_bonus()``.

All variants derive directly from ``Account``; none extends another.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from bank_ledger.exceptions import InsufficientBalanceError
from bank_ledger.models.client import Client
from bank_ledger.models.enums import AccountKind


@dataclass
class Account:
    """Base bank account with plain credit/debit behavior."""

    number: str
    owner: Client | None = None
    balance: float = 0.0

    kind: ClassVar[AccountKind] = AccountKind.CHECKING

    def credit(self, amount: float) -> None:
        """Add ``amount`` to the balance."""
        self.balance += amount

    def debit_cost(self, amount: float) -> float:
        """Return how much a debit of ``amount`` removes from the balance."""
        return amount

    def debit(self, amount: float) -> None:
        """Remove ``amount`` (plus any variant cost) from the balance.

        Raises
        ------
        InsufficientBalanceError
            If the required amount exceeds the current balance. The balance
            is left untouched.
        """
        required = self.debit_cost(amount)
        if required > self.balance:
            raise InsufficientBalanceError(self.number, self.balance)
        self.balance -= required


@dataclass
class CheckingAccount(Account):
    """Plain checking account (conta corrente)."""

    kind: ClassVar[AccountKind] = AccountKind.CHECKING


@dataclass
class SavingsAccount(Account):
    """Savings account (poupança); interest is applied on demand."""

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS

    def apply_interest(self, rate: float) -> float:
        """Credit ``balance * rate`` and return the credited interest."""
        interest = self.balance * rate
        self.credit(interest)
        return interest


@dataclass
class TaxedAccount(Account):
    """Account charging a fixed fee rate on every debit."""

    FEE_RATE: ClassVar[float] = 0.001
    kind: ClassVar[AccountKind] = AccountKind.TAXED

    def debit_cost(self, amount: float) -> float:
        return amount + amount * self.FEE_RATE


@dataclass
class BonusAccount(Account):
    """Account accruing a bonus on every credit."""

    bonus: float = 0.0

    BONUS_RATE: ClassVar[float] = 0.01
    kind: ClassVar[AccountKind] = AccountKind.BONUS

    def credit(self, amount: float) -> None:
        self.bonus += amount * self.BONUS_RATE
        super().credit(amount)

    def apply_bonus(self) -> float:
        """Fold the accrued bonus into the balance and return it."""
        bonus = self.bonus
        self.balance += bonus
        self.bonus = 0.0
        return bonus


ACCOUNT_TYPES: dict[AccountKind, type[Account]] = {
    AccountKind.CHECKING: CheckingAccount,
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.TAXED: TaxedAccount,
    AccountKind.BONUS: BonusAccount,
}


def open_account(
    kind: AccountKind | str,
    number: str,
    owner: Client | None = None,
    balance: float = 0.0,
) -> Account:
    """Build an account of the given kind.

    Parameters
    ----------
    kind : AccountKind | str
        Account kind, as enum member or its string value.
    number : str
        Account number.
    owner : Client | None
        Owning client.
    balance : float
        Opening balance.

    Returns
    -------
    Account
        A new account of the matching concrete class.
    """
    account_cls = ACCOUNT_TYPES[AccountKind(kind)]
    return account_cls(number=number, owner=owner, balance=balance)
