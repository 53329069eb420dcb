"""Base models shared across the ledger."""

from dataclasses import dataclass


@dataclass
class Address:
    """Postal address of a client.

    Only ``postal_code`` (CEP) and ``number`` are required; the remaining
    fields default to empty strings so partially known addresses can be
    recorded.
    """

    postal_code: str
    number: str
    complement: str = ""
    street: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    country: str = "BR"
