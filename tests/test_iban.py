"""Tests for the IBAN generator."""

import random

import pytest
from faker import Faker

from iban_gen import generate_iban
from iban_gen.config import NL_BANK_CODES, NL_SCHEME
from iban_gen.exceptions import InvalidBankCodeError, InvariantViolationError, MalformedInputError
from iban_gen.generators import base as base_module
from iban_gen.generators.account_number import check_digit
from iban_gen.generators.iban import (
    IbanGenerator,
    compute_checksum,
    to_numeric,
    validate_bank_code,
)
from iban_gen.generators.modulo import bigint_mod
from iban_gen.models import Iban


def rearranged_remainder(iban: str) -> int:
    """Remainder of the full rearranged IBAN (1 for correct check digits)."""
    return bigint_mod(to_numeric(iban[4:] + iban[:4]), 97)


class TestToNumeric:
    """Tests for to_numeric."""

    def test_letter_bounds(self) -> None:
        assert to_numeric("A") == "10"
        assert to_numeric("Z") == "35"

    def test_digits_unchanged(self) -> None:
        assert to_numeric("7") == "7"
        assert to_numeric("0123456789") == "0123456789"

    def test_mixed(self) -> None:
        assert to_numeric("INGB") == "18231611"
        assert to_numeric("NL00") == "232100"

    def test_letters_past_p(self) -> None:
        assert to_numeric("QRSTUVWXYZ") == "26272829303132333435"

    @pytest.mark.parametrize("text", ["a", "ingb", "NL 00", "É", "-"])
    def test_rejects_other_characters(self, text: str) -> None:
        with pytest.raises(MalformedInputError):
            to_numeric(text)


class TestValidateBankCode:
    """Tests for validate_bank_code."""

    @pytest.mark.parametrize("bank_code", ["INGB", "ABNA", "RABO", "ZZZZ"])
    def test_accepts_four_uppercase_letters(self, bank_code: str) -> None:
        assert validate_bank_code(bank_code) == bank_code

    @pytest.mark.parametrize(
        "bank_code", ["", "ING", "INGBX", "ingb", "1NGB", "IN B", "ÄBNA", "INGB\n", None]
    )
    def test_rejects_malformed(self, bank_code) -> None:
        with pytest.raises(InvalidBankCodeError):
            validate_bank_code(bank_code)


class TestComputeChecksum:
    """Tests for compute_checksum."""

    def test_published_example(self) -> None:
        assert compute_checksum("ABNA", "0417164300") == "91"

    def test_chunked_path_agrees(self) -> None:
        assert compute_checksum("ABNA", "0417164300", chunked=True) == "91"

    def test_zero_padded(self) -> None:
        # Find an account number whose checksum is a single digit
        rnd = random.Random(0)
        for _ in range(10_000):
            account = f"{rnd.randint(0, 9_999_999_999):010d}"
            checksum = compute_checksum("INGB", account)
            if int(checksum) < 10:
                assert len(checksum) == 2
                assert checksum.startswith("0")
                break
        else:
            pytest.fail("no single-digit checksum found")

    def test_range(self) -> None:
        rnd = random.Random(1)
        for _ in range(2000):
            account = f"{rnd.randint(0, 9_999_999_999):010d}"
            assert 2 <= int(compute_checksum("RABO", account)) <= 98

    def test_out_of_range_raises(self, monkeypatch) -> None:
        monkeypatch.setattr("iban_gen.generators.iban.mod", lambda *a, **kw: -5)

        with pytest.raises(InvariantViolationError):
            compute_checksum("INGB", "0417164300")

    def test_matches_faker_iban_provider(self, seed: int) -> None:
        fake = Faker("nl_NL")
        fake.seed_instance(seed)

        for _ in range(200):
            iban = fake.iban()
            assert iban.startswith("NL")
            assert compute_checksum(iban[4:8], iban[8:]) == iban[2:4], iban


class TestIbanGenerator:
    """Tests for IbanGenerator."""

    def test_generate_default_bank(self, seed: int) -> None:
        gen = IbanGenerator(seed=seed)
        iban = gen.generate()

        assert isinstance(iban, Iban)
        assert iban.country_code == "NL"
        assert iban.bank_code == "INGB"
        assert len(iban.checksum) == 2
        assert check_digit(iban.account_number) == 0

    def test_generate_layout(self, seed: int) -> None:
        value = str(IbanGenerator(seed=seed).generate("INGB"))

        assert len(value) == 18
        assert value.startswith("NL")
        assert value[2:4].isdigit()
        assert value[4:8] == "INGB"
        assert value[8:18].isdigit()

    def test_checksum_invariant(self, seed: int) -> None:
        gen = IbanGenerator(seed=seed)

        for iban in gen.generate_batch(1000, "RABO"):
            body = to_numeric(iban.bban + iban.country_code + "00")
            assert bigint_mod(body, 97) == 98 - int(iban.checksum)
            assert rearranged_remainder(str(iban)) == 1
            assert check_digit(iban.account_number) == 0

    def test_generate_batch_count(self, seed: int) -> None:
        ibans = list(IbanGenerator(seed=seed).generate_batch(25, "ABNA"))

        assert len(ibans) == 25
        assert all(i.bank_code == "ABNA" for i in ibans)

    def test_generate_random_bank(self, seed: int) -> None:
        ibans = list(IbanGenerator(seed=seed).generate_random_bank(200))

        banks = {i.bank_code for i in ibans}
        assert banks <= set(NL_BANK_CODES)
        assert len(banks) > 1
        for iban in ibans:
            assert rearranged_remainder(str(iban)) == 1

    def test_invalid_bank_code(self, seed: int) -> None:
        gen = IbanGenerator(seed=seed)

        with pytest.raises(InvalidBankCodeError):
            gen.generate("ing")

    def test_invalid_bank_code_in_batch(self, seed: int) -> None:
        gen = IbanGenerator(seed=seed)

        with pytest.raises(InvalidBankCodeError):
            list(gen.generate_batch(3, "IN6B"))

    def test_seed_reproducibility(self) -> None:
        first = list(IbanGenerator(seed=2024).generate_batch(10))
        second = list(IbanGenerator(seed=2024).generate_batch(10))

        assert first == second

    def test_injected_rng(self) -> None:
        first = IbanGenerator(rng=random.Random(5)).generate()
        second = IbanGenerator(rng=random.Random(5)).generate()

        assert first == second

    def test_scheme_length(self, seed: int) -> None:
        iban = IbanGenerator(seed=seed).generate()
        assert len(iban.electronic) == NL_SCHEME.iban_length

    def test_unseeded_generators_have_own_random(self) -> None:
        first, second = IbanGenerator(), IbanGenerator()

        assert first.random is not second.random
        assert first.fake.random is not second.fake.random

    def test_unseeded_output_ignores_global_faker_seed(self) -> None:
        gen = IbanGenerator()
        state = gen.random.getstate()

        Faker.seed(0)

        assert gen.random.getstate() == state

    def test_account_generator_shares_faker_and_random(self, seed: int) -> None:
        gen = IbanGenerator(seed=seed)

        assert gen._account_gen.fake is gen.fake
        assert gen._account_gen.random is gen.random

    def test_single_faker_per_generator(self, monkeypatch) -> None:
        created = []
        original = base_module.Faker

        def counting_faker(*args, **kwargs):
            created.append(args)
            return original(*args, **kwargs)

        monkeypatch.setattr(base_module, "Faker", counting_faker)

        generate_iban()

        assert len(created) == 1


class TestGenerateIban:
    """Tests for the module-level generate_iban."""

    def test_default(self) -> None:
        value = generate_iban()

        assert len(value) == 18
        assert value.startswith("NL")
        assert value[4:8] == "INGB"
        assert value[8:].isdigit()
        assert rearranged_remainder(value) == 1

    def test_custom_bank(self, rng: random.Random) -> None:
        value = generate_iban("TRIO", rng=rng)

        assert value[4:8] == "TRIO"
        assert rearranged_remainder(value) == 1

    def test_two_calls_independently_valid(self) -> None:
        first = generate_iban()
        second = generate_iban()

        assert rearranged_remainder(first) == 1
        assert rearranged_remainder(second) == 1

    def test_rejects_malformed_bank_code(self) -> None:
        with pytest.raises(InvalidBankCodeError):
            generate_iban("INGB1")
