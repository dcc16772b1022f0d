"""Remainder of very large decimal numbers.

Python integers are arbitrary precision, so :func:`bigint_mod` is the
default path. :func:`chunked_mod` folds the digit string through a small
accumulator instead, the way it is done where only machine-word integers
exist; both must agree on every input.

Usage::

    mod("3214282912345698765432161182", 97)            # 1
    mod("3214282912345698765432161182", 97, chunked=True)
"""

from __future__ import annotations

import re

from iban_gen.exceptions import ConfigurationError, MalformedInputError

DEFAULT_CHUNK_SIZE = 5

_DIGITS = re.compile(r"[0-9]+")


def _check_operands(digits: str, modulus: int) -> None:
    if not isinstance(digits, str) or not _DIGITS.fullmatch(digits):
        raise MalformedInputError(f"Expected a non-empty decimal digit string, got {digits!r}")
    if modulus < 1:
        raise ConfigurationError(f"Modulus must be a positive integer, got {modulus}")


def bigint_mod(digits: str, modulus: int) -> int:
    """Compute ``digits mod modulus`` with a single big-integer operation."""
    _check_operands(digits, modulus)
    return int(digits) % modulus


def chunked_mod(digits: str, modulus: int, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Compute ``digits mod modulus`` by digit folding.

    The string is consumed left to right in windows of ``chunk_size``
    digits. Each step reduces ``remainder`` followed by the next window,
    so no intermediate value exceeds ``modulus * 10**chunk_size``. The
    last window may be shorter.

    Parameters
    ----------
    digits : str
        Non-negative integer as ASCII decimal digits (leading zeros allowed).
    modulus : int
        Positive modulus.
    chunk_size : int
        Digits consumed per step.

    Returns
    -------
    int
        Remainder in ``[0, modulus)``.
    """
    _check_operands(digits, modulus)
    if chunk_size < 1:
        raise ConfigurationError(f"Chunk size must be at least 1, got {chunk_size}")

    remainder = 0
    for start in range(0, len(digits), chunk_size):
        window = digits[start : start + chunk_size]
        remainder = int(f"{remainder}{window}") % modulus
    return remainder


def mod(
    digits: str,
    modulus: int,
    *,
    chunked: bool = False,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Remainder of a decimal digit string, via big integers or folding."""
    if chunked:
        return chunked_mod(digits, modulus, chunk_size)
    return bigint_mod(digits, modulus)
