"""Client model."""

from dataclasses import dataclass

from bank_ledger.models.base import Address


@dataclass
class Client:
    """Bank client, keyed by CPF.

    The CPF is the immutable registration key; only ``name`` and
    ``address`` are expected to change after registration.
    """

    cpf: str
    name: str
    address: Address | None = None
