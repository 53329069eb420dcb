"""Enumeration types for ledger entities."""

from enum import Enum


class AccountKind(str, Enum):
    """Account variant tag."""

    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    TAXED = "TAXED"
    BONUS = "BONUS"
