"""Client generator."""

from __future__ import annotations

from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Address, Client


class ClientGenerator(BaseGenerator):
    """Generate synthetic clients with unique CPFs."""

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._issued: set[str] = set()

    def generate(self) -> Client:
        """Generate a single client.

        Returns
        -------
        Client
            Client with a formatted CPF (XXX.XXX.XXX-XX) not issued before
            by this generator.
        """
        cpf = self.fake.cpf()
        while cpf in self._issued:
            cpf = self.fake.cpf()
        self._issued.add(cpf)

        return Client(cpf=cpf, name=self.fake.name(), address=self._generate_address())

    def generate_batch(self, count: int) -> Iterator[Client]:
        """Generate ``count`` clients."""
        for _ in range(count):
            yield self.generate()

    def _generate_address(self) -> Address:
        return Address(
            postal_code=self.fake.postcode(),
            number=self.fake.building_number(),
            street=self.fake.street_name(),
            neighborhood=self.fake.bairro(),
            city=self.fake.city(),
            state=self.fake.estado_sigla(),
        )
