"""Fixed-capacity slot store with linear-search indexing."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from bank_ledger.exceptions import CapacityExceededError

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class SlotArray(Generic[T]):
    """Fixed-length list of slots plus a live-count cursor.

    Slots ``[0, len(self))`` are occupied and slots ``[len(self), capacity)``
    are ``None``. Removal moves the last live entry into the freed slot, so
    insertion order is not preserved once anything has been removed.

    Parameters
    ----------
    key : Callable[[T], str]
        Extracts the lookup key from an item.
    capacity : int
        Number of slots (default 100).
    """

    __slots__ = ("_key", "_slots", "_count")

    def __init__(self, key: Callable[[T], str], capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._key = key
        self._slots: list[T | None] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def append(self, item: T) -> int:
        """Write ``item`` at the cursor and advance it; return the slot index."""
        if self._count == len(self._slots):
            raise CapacityExceededError(len(self._slots))
        index = self._count
        self._slots[index] = item
        self._count += 1
        return index

    def index_of(self, key: str) -> int | None:
        """Return the first live slot holding ``key``, or ``None``."""
        for i in range(self._count):
            if self._key(self._slots[i]) == key:
                return i
        return None

    def get(self, index: int) -> T:
        return self._slots[index]

    def put(self, index: int, item: T) -> None:
        self._slots[index] = item

    def swap_delete(self, index: int) -> None:
        """Free ``index`` by moving the last live entry into it."""
        last = self._count - 1
        self._slots[index] = self._slots[last]
        self._slots[last] = None
        self._count = last

    def items(self) -> list[T]:
        """Return live entries in slot order."""
        return self._slots[: self._count]
