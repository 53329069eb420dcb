"""Array-backed account repository."""

import logging

from bank_ledger.exceptions import AccountNotFoundError
from bank_ledger.models import Account
from bank_ledger.store.array import DEFAULT_CAPACITY, SlotArray
from bank_ledger.store.base import AccountRepository

logger = logging.getLogger(__name__)


class AccountRepositoryArray(AccountRepository):
    """Fixed-capacity account store with linear search and swap-delete removal.

    ``find`` returns the stored object itself, so mutating it changes the
    repository state directly. ``insert`` raises ``CapacityExceededError``
    once ``capacity`` accounts are stored.

    Parameters
    ----------
    capacity : int
        Maximum number of live accounts (default 100).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._accounts: SlotArray[Account] = SlotArray(lambda a: a.number, capacity)

    @property
    def capacity(self) -> int:
        return self._accounts.capacity

    def __len__(self) -> int:
        return len(self._accounts)

    def insert(self, account: Account) -> None:
        """Store an account in the next free slot."""
        index = self._accounts.append(account)
        logger.debug("Inserted account %s at slot %d", account.number, index)

    def find_index(self, number: str) -> int | None:
        """Return the slot index holding ``number``, or ``None``."""
        return self._accounts.index_of(number)

    def exists(self, number: str) -> bool:
        return self.find_index(number) is not None

    def find(self, number: str) -> Account:
        index = self.find_index(number)
        if index is None:
            raise AccountNotFoundError(number)
        return self._accounts.get(index)

    def update(self, account: Account) -> None:
        index = self.find_index(account.number)
        if index is None:
            raise AccountNotFoundError(account.number)
        self._accounts.put(index, account)

    def remove(self, number: str) -> None:
        """Remove an account, moving the last stored account into its slot."""
        index = self.find_index(number)
        if index is None:
            raise AccountNotFoundError(number)
        self._accounts.swap_delete(index)
        logger.debug("Removed account %s from slot %d", number, index)

    def list(self) -> list[Account]:
        return self._accounts.items()
