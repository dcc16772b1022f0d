"""Synthetic Dutch IBAN generation."""

from iban_gen.generators import (
    AccountNumberGenerator,
    IbanGenerator,
    check_digit,
    generate_account_number,
    generate_iban,
)
from iban_gen.models import Iban

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AccountNumberGenerator",
    "Iban",
    "IbanGenerator",
    "check_digit",
    "generate_account_number",
    "generate_iban",
]
