"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from iban_gen.config import NL_SCHEME, CountryScheme


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation, seed-based
    reproducibility and an injectable random source. Generators draw
    every random value from ``self.random`` and never touch the
    module-level ``random`` state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    rng : random.Random | None
        Explicit random source. Takes precedence over ``seed``.
    scheme : CountryScheme
        Country layout (default ``NL_SCHEME``).
    fake : Faker | None
        Existing Faker instance to reuse instead of building a new one.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        scheme: CountryScheme = NL_SCHEME,
        fake: Faker | None = None,
    ) -> None:
        self.scheme = scheme
        if fake is None:
            fake = Faker(scheme.faker_locale)
            # Without a seed Faker shares one module-level Random across instances
            fake.seed_instance(seed)
        self.fake = fake
        self.random: random.Random = rng if rng is not None else self.fake.random
