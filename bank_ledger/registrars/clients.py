"""Client registrar: uniqueness rules on top of a client repository."""

from __future__ import annotations

import logging

from bank_ledger.exceptions import ClientAlreadyExistsError
from bank_ledger.models import Client
from bank_ledger.store.base import ClientRepository

logger = logging.getLogger(__name__)


class ClientRegistrar:
    """Register, update and remove clients.

    Repository errors (``ClientNotFoundError``) pass through unchanged.
    """

    def __init__(self, repository: ClientRepository) -> None:
        self.repository = repository

    def register(self, client: Client) -> None:
        """Register a new client.

        Raises
        ------
        ClientAlreadyExistsError
            If a client with the same CPF is already registered.
        """
        if self.repository.exists(client.cpf):
            logger.warning("Rejected duplicate client %s", client.cpf)
            raise ClientAlreadyExistsError(client.cpf)
        self.repository.insert(client)
        logger.info("Registered client %s (%s)", client.cpf, client.name)

    def update(self, client: Client) -> None:
        self.repository.update(client)
        logger.info("Updated client %s", client.cpf)

    def unregister(self, cpf: str) -> None:
        self.repository.remove(cpf)
        logger.info("Unregistered client %s", cpf)

    def find(self, cpf: str) -> Client:
        return self.repository.find(cpf)

    def list(self) -> list[Client]:
        return self.repository.list()
