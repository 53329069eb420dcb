"""Business rules on top of the client and account repositories."""

from bank_ledger.registrars.accounts import AccountRegistrar
from bank_ledger.registrars.clients import ClientRegistrar

__all__ = ["AccountRegistrar", "ClientRegistrar"]
