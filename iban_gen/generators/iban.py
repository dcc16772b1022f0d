"""IBAN generator: elfproef account number plus ISO 13616 mod-97 checksum."""

from __future__ import annotations

import random
import re
import string
from typing import Iterator

from iban_gen.config import NL_SCHEME, CountryScheme
from iban_gen.exceptions import (
    InvalidBankCodeError,
    InvariantViolationError,
    MalformedInputError,
)
from iban_gen.generators.account_number import AccountNumberGenerator
from iban_gen.generators.base import BaseGenerator
from iban_gen.generators.modulo import mod
from iban_gen.logging import get_logger
from iban_gen.models import Iban

logger = get_logger(__name__)

# A=10 ... Z=35, digits unchanged
_CHAR_VALUES: dict[str, str] = {
    **{d: d for d in string.digits},
    **{c: str(i) for i, c in enumerate(string.ascii_uppercase, start=10)},
}


def to_numeric(text: str) -> str:
    """Replace every letter of an IBAN body by its two-digit value.

    >>> to_numeric("INGB")
    '18231611'
    """
    try:
        return "".join(_CHAR_VALUES[char] for char in text)
    except KeyError as exc:
        raise MalformedInputError(
            f"Unexpected character {exc.args[0]!r} in {text!r}; "
            "only digits and uppercase A-Z are allowed"
        ) from None


def validate_bank_code(bank_code: str, scheme: CountryScheme = NL_SCHEME) -> str:
    """Ensure ``bank_code`` is exactly ``bank_code_length`` uppercase ASCII letters."""
    pattern = rf"[A-Z]{{{scheme.bank_code_length}}}"
    if not isinstance(bank_code, str) or not re.fullmatch(pattern, bank_code):
        raise InvalidBankCodeError(
            f"Bank code must be {scheme.bank_code_length} uppercase letters, got {bank_code!r}"
        )
    return bank_code


def compute_checksum(
    bank_code: str,
    account_number: str,
    scheme: CountryScheme = NL_SCHEME,
    *,
    chunked: bool = False,
) -> str:
    """Compute the two IBAN check digits.

    The country code and a ``"00"`` placeholder are moved behind the BBAN,
    the result is converted to digits and reduced mod 97; the check digits
    are ``98 - remainder``, zero-padded to two characters.

    Parameters
    ----------
    bank_code : str
        Bank identifier (letters).
    account_number : str
        Account number (digits).
    scheme : CountryScheme
        Country layout.
    chunked : bool
        Use the digit-folding modulo instead of big integers.

    Returns
    -------
    str
        Check digits, e.g. ``"91"`` or ``"02"``.
    """
    rearranged = bank_code + account_number + scheme.country_code + scheme.checksum_placeholder
    remainder = mod(to_numeric(rearranged), scheme.iban_modulus, chunked=chunked)
    checksum = scheme.iban_modulus + 1 - remainder
    if not 0 <= checksum <= 99:
        raise InvariantViolationError(f"Checksum {checksum} out of range for {rearranged}")
    return f"{checksum:02d}"


class IbanGenerator(BaseGenerator):
    """Generate synthetic IBANs with valid national and international checks.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    rng : random.Random | None
        Explicit random source. The account-number generator shares it
        and the Faker instance.
    scheme : CountryScheme
        Country layout (default ``NL_SCHEME``).
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        scheme: CountryScheme = NL_SCHEME,
    ) -> None:
        super().__init__(seed, rng=rng, scheme=scheme)
        self._account_gen = AccountNumberGenerator(
            rng=self.random, scheme=scheme, fake=self.fake
        )

    def generate(self, bank_code: str | None = None) -> Iban:
        """Generate a single IBAN.

        Parameters
        ----------
        bank_code : str | None
            Four-letter bank code; the scheme default (``INGB``) when None.

        Returns
        -------
        Iban
            Generated IBAN.
        """
        if bank_code is None:
            bank_code = self.scheme.default_bank_code
        validate_bank_code(bank_code, self.scheme)

        account_number = self._account_gen.generate()
        return Iban(
            country_code=self.scheme.country_code,
            checksum=compute_checksum(bank_code, account_number, self.scheme),
            bank_code=bank_code,
            account_number=account_number,
        )

    def generate_batch(self, count: int, bank_code: str | None = None) -> Iterator[Iban]:
        """Generate multiple IBANs for the same bank.

        Parameters
        ----------
        count : int
            Number of IBANs to generate.
        bank_code : str | None
            Four-letter bank code shared by the batch.

        Yields
        ------
        Iban
            Generated IBAN.
        """
        if bank_code is None:
            bank_code = self.scheme.default_bank_code
        logger.debug(
            "Generating %d IBANs for bank %s",
            count,
            bank_code,
            extra={"extra": {"bank_code": bank_code, "count": count}},
        )
        for _ in range(count):
            yield self.generate(bank_code)

    def generate_random_bank(self, count: int) -> Iterator[Iban]:
        """Generate IBANs spread over the scheme's known banks."""
        bank_codes = sorted(self.scheme.bank_codes)
        if not bank_codes:
            bank_codes = [self.scheme.default_bank_code]
        logger.debug(
            "Generating %d IBANs across %d banks",
            count,
            len(bank_codes),
            extra={"extra": {"bank_codes": bank_codes, "count": count}},
        )
        for _ in range(count):
            yield self.generate(self.random.choice(bank_codes))


def generate_iban(
    bank_code: str = NL_SCHEME.default_bank_code,
    rng: random.Random | None = None,
) -> str:
    """Generate one Dutch IBAN in electronic format (18 characters)."""
    return str(IbanGenerator(rng=rng).generate(bank_code))
