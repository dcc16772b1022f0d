"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from typing import Any

from iban_gen.models import Iban


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Iban):
        return iban_to_dict(obj)
    elif is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in fields(obj)}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def iban_to_dict(iban: Iban) -> dict:
    """Convert an Iban to a dict with both display formats."""
    return {
        "iban": iban.electronic,
        "formatted": iban.formatted,
        "country_code": iban.country_code,
        "checksum": iban.checksum,
        "bank_code": iban.bank_code,
        "account_number": iban.account_number,
    }
