"""Pytest configuration and fixtures."""

import random

import pytest

from iban_gen.models import Iban


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(seed: int) -> random.Random:
    """Seeded random source for injection into generators."""
    return random.Random(seed)


@pytest.fixture
def sample_iban() -> Iban:
    """Published ABN AMRO example IBAN NL91 ABNA 0417 1643 00."""
    return Iban(
        country_code="NL",
        checksum="91",
        bank_code="ABNA",
        account_number="0417164300",
    )


class FixedRandom(random.Random):
    """Random source whose ``randint`` always returns ``value``."""

    def __init__(self, value: int) -> None:
        super().__init__(0)
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom instances."""
    return FixedRandom
