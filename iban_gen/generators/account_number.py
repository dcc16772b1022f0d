"""Dutch bank account number generator (elfproef)."""

from __future__ import annotations

import random
from typing import Iterator, Sequence

from faker import Faker

from iban_gen.config import NL_SCHEME, CountryScheme
from iban_gen.exceptions import InvariantViolationError, MalformedInputError
from iban_gen.generators.base import BaseGenerator
from iban_gen.logging import get_logger

logger = get_logger(__name__)


def check_digit(
    account_number: str,
    weights: Sequence[int] = NL_SCHEME.weights,
    modulus: int = NL_SCHEME.check_modulus,
) -> int:
    """Weighted digit sum of an account number modulo 11.

    Digits are multiplied left to right by ``10, 9, ..., 1``. A result of
    0 means the number passes the elfproef.

    Parameters
    ----------
    account_number : str
        Decimal digits, exactly ``len(weights)`` of them.
    weights : Sequence[int]
        Positional weights.
    modulus : int
        Check modulus (11).

    Returns
    -------
    int
        Remainder in ``[0, modulus)``.
    """
    if (
        not isinstance(account_number, str)
        or len(account_number) != len(weights)
        or not account_number.isascii()
        or not account_number.isdigit()
    ):
        raise MalformedInputError(
            f"Expected {len(weights)} decimal digits, got {account_number!r}"
        )
    total = sum(int(d) * w for d, w in zip(account_number, weights))
    return total % modulus


class AccountNumberGenerator(BaseGenerator):
    """Generate 10-digit account numbers that pass the elfproef.

    A random candidate always ends in ``0``; when it fails the check it is
    nudged by a small delta chosen from the remainder, which fixes it in
    one step:

    - remainder 10: +1 (last digit 0 -> 1)
    - remainder 1, second-to-last digit < 9: +18 (weights 2 and 1 add 10)
    - remainder 1, second-to-last digit 9: -9 (borrow keeps 10 digits)
    - remainder 2..9: ``+(11 - remainder)`` on the last digit
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        scheme: CountryScheme = NL_SCHEME,
        fake: Faker | None = None,
    ) -> None:
        super().__init__(seed, rng=rng, scheme=scheme, fake=fake)
        # n in [1, upper] followed by a literal 0 fills account_number_length digits
        self._upper = 10 ** (scheme.account_number_length - 2)

    def generate(self) -> str:
        """Generate a single valid account number.

        Returns
        -------
        str
            Zero-padded decimal string of ``account_number_length`` digits.
        """
        candidate = self._pad(f"{self.random.randint(1, self._upper)}0")

        remainder = check_digit(candidate, self.scheme.weights, self.scheme.check_modulus)
        if remainder == 0:
            return candidate

        corrected = self.correct(candidate, remainder)
        if check_digit(corrected, self.scheme.weights, self.scheme.check_modulus) != 0:
            raise InvariantViolationError(
                f"Correction of {candidate} (remainder {remainder}) produced "
                f"invalid account number {corrected}"
            )
        logger.debug(
            "Corrected %s -> %s (remainder %d)",
            candidate,
            corrected,
            remainder,
            extra={"extra": {"remainder": remainder}},
        )
        return corrected

    def generate_batch(self, count: int) -> Iterator[str]:
        """Generate multiple account numbers.

        Parameters
        ----------
        count : int
            Number of account numbers to generate.

        Yields
        ------
        str
            Valid account number.
        """
        for _ in range(count):
            yield self.generate()

    def correct(self, account_number: str, remainder: int) -> str:
        """Apply the one-step correction for a failing candidate."""
        value = int(account_number)
        if remainder == 10:
            value += 1
        elif remainder == 1 and int(account_number[8]) < 9:
            value += 18
        elif remainder == 1:
            value -= 9
        else:
            value += 11 - remainder
        return self._pad(str(value))

    def _pad(self, number: str) -> str:
        return number.zfill(self.scheme.account_number_length)


def generate_account_number(rng: random.Random | None = None) -> str:
    """Generate one valid Dutch account number."""
    return AccountNumberGenerator(rng=rng).generate()
