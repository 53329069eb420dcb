"""Account registrar: uniqueness rules and ledger operations."""

from __future__ import annotations

import logging

from bank_ledger.exceptions import (
    AccountAlreadyExistsError,
    InsufficientBalanceError,
    InvalidAccountKindError,
)
from bank_ledger.models import Account, BonusAccount, SavingsAccount
from bank_ledger.store.base import AccountRepository

logger = logging.getLogger(__name__)


class AccountRegistrar:
    """Register accounts and move money between them.

    Every balance change is written back with ``repository.update`` after
    the account has been mutated, so repositories that hand out copies
    behave the same as ones that hand out the stored object.

    Parameters
    ----------
    repository : AccountRepository
        Backing account store.
    """

    def __init__(self, repository: AccountRepository) -> None:
        self.repository = repository

    def register(self, account: Account) -> None:
        """Register a new account.

        Raises
        ------
        AccountAlreadyExistsError
            If an account with the same number is already registered.
        CapacityExceededError
            If the backing store is full.
        """
        if self.repository.exists(account.number):
            logger.warning("Rejected duplicate account %s", account.number)
            raise AccountAlreadyExistsError(account.number)
        self.repository.insert(account)
        logger.info(
            "Registered %s account %s (balance: %.2f)",
            account.kind.value,
            account.number,
            account.balance,
        )

    def update(self, account: Account) -> None:
        self.repository.update(account)

    def find(self, number: str) -> Account:
        return self.repository.find(number)

    def remove(self, number: str) -> None:
        self.repository.remove(number)
        logger.info("Removed account %s", number)

    def credit(self, number: str, amount: float) -> None:
        """Credit ``amount`` using the account's own credit rule."""
        account = self.repository.find(number)
        account.credit(amount)
        self.repository.update(account)
        logger.info(
            "Credited %.2f to account %s",
            amount,
            number,
            extra={"account": number, "amount": amount, "balance": account.balance},
        )

    def debit(self, number: str, amount: float) -> None:
        """Debit ``amount`` using the account's own debit rule.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist.
        InsufficientBalanceError
            If the account cannot cover the debit; the balance is unchanged.
        """
        account = self.repository.find(number)
        try:
            account.debit(amount)
        except InsufficientBalanceError:
            logger.warning(
                "Rejected debit of %.2f from account %s (balance: %.2f)",
                amount,
                number,
                account.balance,
                extra={"account": number, "amount": amount, "balance": account.balance},
            )
            raise
        self.repository.update(account)
        logger.info(
            "Debited %.2f from account %s",
            amount,
            number,
            extra={"account": number, "amount": amount, "balance": account.balance},
        )

    def transfer(self, from_number: str, to_number: str, amount: float) -> None:
        """Debit ``from_number`` and then credit ``to_number``.

        Both accounts must exist before anything is debited. If the debit
        fails the credit never happens.
        """
        self.repository.find(from_number)
        self.repository.find(to_number)
        self.debit(from_number, amount)
        self.credit(to_number, amount)
        logger.info(
            "Transferred %.2f from %s to %s",
            amount,
            from_number,
            to_number,
            extra={"source": from_number, "destination": to_number, "amount": amount},
        )

    def apply_interest(self, number: str, rate: float) -> float:
        """Credit interest at ``rate`` to a savings account; return the interest."""
        account = self.repository.find(number)
        if not isinstance(account, SavingsAccount):
            raise InvalidAccountKindError(number, account.kind.value, "interest")
        interest = account.apply_interest(rate)
        self.repository.update(account)
        logger.info("Applied interest %.2f (rate %.4f) to account %s", interest, rate, number)
        return interest

    def apply_bonus(self, number: str) -> float:
        """Fold the accrued bonus of a bonus account into its balance."""
        account = self.repository.find(number)
        if not isinstance(account, BonusAccount):
            raise InvalidAccountKindError(number, account.kind.value, "bonus")
        bonus = account.apply_bonus()
        self.repository.update(account)
        logger.info("Applied bonus %.2f to account %s", bonus, number)
        return bonus

    def list(self) -> list[Account]:
        return self.repository.list()
