"""Client repositories: dict-backed and fixed-capacity array-backed."""

import logging

from bank_ledger.exceptions import ClientNotFoundError
from bank_ledger.models import Client
from bank_ledger.store.array import DEFAULT_CAPACITY, SlotArray
from bank_ledger.store.base import ClientRepository

logger = logging.getLogger(__name__)


class ClientRepositoryMap(ClientRepository):
    """Unbounded client store keyed by CPF."""

    def __init__(self) -> None:
        self._clients: dict[str, Client] = {}

    def __len__(self) -> int:
        return len(self._clients)

    def insert(self, client: Client) -> None:
        self._clients[client.cpf] = client
        logger.debug("Inserted client %s", client.cpf)

    def exists(self, cpf: str) -> bool:
        return cpf in self._clients

    def find(self, cpf: str) -> Client:
        if not self.exists(cpf):
            raise ClientNotFoundError(cpf)
        return self._clients[cpf]

    def update(self, client: Client) -> None:
        if not self.exists(client.cpf):
            raise ClientNotFoundError(client.cpf)
        self._clients[client.cpf] = client

    def remove(self, cpf: str) -> None:
        if not self.exists(cpf):
            raise ClientNotFoundError(cpf)
        del self._clients[cpf]
        logger.debug("Removed client %s", cpf)

    def list(self) -> list[Client]:
        return list(self._clients.values())


class ClientRepositoryArray(ClientRepository):
    """Fixed-capacity client store with linear search and swap-delete removal.

    Parameters
    ----------
    capacity : int
        Maximum number of live clients (default 100).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._clients: SlotArray[Client] = SlotArray(lambda c: c.cpf, capacity)

    @property
    def capacity(self) -> int:
        return self._clients.capacity

    def __len__(self) -> int:
        return len(self._clients)

    def insert(self, client: Client) -> None:
        index = self._clients.append(client)
        logger.debug("Inserted client %s at slot %d", client.cpf, index)

    def exists(self, cpf: str) -> bool:
        return self._clients.index_of(cpf) is not None

    def find(self, cpf: str) -> Client:
        index = self._clients.index_of(cpf)
        if index is None:
            raise ClientNotFoundError(cpf)
        return self._clients.get(index)

    def update(self, client: Client) -> None:
        index = self._clients.index_of(client.cpf)
        if index is None:
            raise ClientNotFoundError(client.cpf)
        self._clients.put(index, client)

    def remove(self, cpf: str) -> None:
        index = self._clients.index_of(cpf)
        if index is None:
            raise ClientNotFoundError(cpf)
        self._clients.swap_delete(index)
        logger.debug("Removed client %s from slot %d", cpf, index)

    def list(self) -> list[Client]:
        return self._clients.items()
