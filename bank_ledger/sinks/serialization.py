"""Shared serialization utilities for sinks."""

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

from bank_ledger.models import Account, Client


def to_dict(obj: Any) -> dict:
    """Convert a ledger entity (or any dataclass) to a JSON-ready dict."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif isinstance(obj, Client):
        return client_to_dict(obj)
    elif is_dataclass(obj):
        return {key: serialize_value(value) for key, value in asdict(obj).items()}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def client_to_dict(client: Client) -> dict:
    """Serialize a client with its address flattened to a dict (or None)."""
    return {
        "cpf": client.cpf,
        "name": client.name,
        "address": asdict(client.address) if client.address is not None else None,
    }


def account_to_dict(account: Account) -> dict:
    """Serialize an account.

    The owner is reduced to its CPF and the account kind, a class-level
    attribute, is added explicitly. Variant fields (e.g. ``bonus``) are kept.
    """
    data = {"number": account.number, "kind": account.kind.value}
    for key, value in asdict(account).items():
        if key == "owner":
            data["owner_cpf"] = account.owner.cpf if account.owner is not None else None
        elif key != "number":
            data[key] = serialize_value(value)
    return data


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
