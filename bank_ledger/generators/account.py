"""Account generator."""

from __future__ import annotations

import random
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Account, AccountKind, Client, open_account


class AccountGenerator(BaseGenerator):
    """Generate synthetic accounts of every kind.

    Account kinds are drawn by weight (checking ~55%, savings ~25%,
    bonus ~12%, taxed ~8%). Numbers have the form ``NNNNN-D`` and are
    unique per generator.
    """

    ACCOUNT_KINDS = [
        AccountKind.CHECKING,
        AccountKind.SAVINGS,
        AccountKind.BONUS,
        AccountKind.TAXED,
    ]
    ACCOUNT_KIND_WEIGHTS = [0.55, 0.25, 0.12, 0.08]

    # Opening balance range (BRL)
    BALANCE_RANGE = (0.0, 5000.0)

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._issued: set[str] = set()

    def generate(self, owner: Client | None, kind: AccountKind | None = None) -> Account:
        """Generate a single account.

        Parameters
        ----------
        owner : Client | None
            Owning client.
        kind : AccountKind | None
            Account kind; drawn by weight when omitted.

        Returns
        -------
        Account
            Generated account.
        """
        if kind is None:
            kind = random.choices(self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1)[0]
        balance = round(random.uniform(*self.BALANCE_RANGE), 2)
        return open_account(kind, self._next_number(), owner=owner, balance=balance)

    def generate_for_client(self, owner: Client, count: int) -> Iterator[Account]:
        """Generate ``count`` accounts for ``owner``.

        The first account is always a checking account.
        """
        for i in range(count):
            yield self.generate(owner, AccountKind.CHECKING if i == 0 else None)

    def _next_number(self) -> str:
        number = f"{random.randint(1, 99999):05d}-{random.randint(0, 9)}"
        while number in self._issued:
            number = f"{random.randint(1, 99999):05d}-{random.randint(0, 9)}"
        self._issued.add(number)
        return number
