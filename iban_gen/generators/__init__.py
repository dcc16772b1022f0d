"""IBAN and account-number generators."""

from iban_gen.generators.account_number import (
    AccountNumberGenerator,
    check_digit,
    generate_account_number,
)
from iban_gen.generators.iban import (
    IbanGenerator,
    compute_checksum,
    generate_iban,
    to_numeric,
    validate_bank_code,
)
from iban_gen.generators.modulo import bigint_mod, chunked_mod, mod

__all__ = [
    "AccountNumberGenerator",
    "IbanGenerator",
    "bigint_mod",
    "check_digit",
    "chunked_mod",
    "compute_checksum",
    "generate_account_number",
    "generate_iban",
    "mod",
    "to_numeric",
    "validate_bank_code",
]
