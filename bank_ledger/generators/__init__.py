"""Synthetic data generators for clients and accounts."""

from bank_ledger.generators.account import AccountGenerator
from bank_ledger.generators.client import ClientGenerator

__all__ = ["AccountGenerator", "ClientGenerator"]
