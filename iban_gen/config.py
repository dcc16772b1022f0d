"""Configuration management for iban-gen."""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from iban_gen.exceptions import ConfigurationError

# Dutch bank identifiers (first four letters of the BIC)
NL_BANK_CODES: Mapping[str, str] = MappingProxyType(
    {
        "INGB": "ING Bank",
        "ABNA": "ABN AMRO",
        "RABO": "Rabobank",
        "SNSB": "SNS Bank",
        "TRIO": "Triodos Bank",
        "ASNB": "ASN Bank",
        "RBRB": "RegioBank",
        "KNAB": "Knab",
        "BUNQ": "bunq",
    }
)


@dataclass(frozen=True)
class CountryScheme:
    """National account-number and IBAN layout for one country."""

    country_code: str
    account_number_length: int
    weights: tuple[int, ...]
    bank_code_length: int = 4
    check_modulus: int = 11
    iban_modulus: int = 97
    checksum_placeholder: str = "00"
    default_bank_code: str = ""
    faker_locale: str = "en_US"
    bank_codes: Mapping[str, str] = field(default_factory=dict, compare=False)

    @property
    def iban_length(self) -> int:
        """Total length of the electronic IBAN."""
        return (
            len(self.country_code)
            + len(self.checksum_placeholder)
            + self.bank_code_length
            + self.account_number_length
        )


NL_SCHEME = CountryScheme(
    country_code="NL",
    account_number_length=10,
    weights=tuple(range(10, 0, -1)),
    default_bank_code="INGB",
    faker_locale="nl_NL",
    bank_codes=NL_BANK_CODES,
)


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path | None = None
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Main configuration for iban-gen."""

    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    bank_code: str = NL_SCHEME.default_bank_code
    count: int = 1

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Create config from environment variables."""
        import os

        output_dir = os.getenv("OUTPUT_DIR")
        output = OutputConfig(
            json_output_dir=Path(output_dir) if output_dir else None,
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed = os.getenv("SEED")

        return cls(
            output=output,
            seed=_parse_int("SEED", seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            bank_code=os.getenv("BANK_CODE", NL_SCHEME.default_bank_code),
            count=_parse_int("IBAN_COUNT", os.getenv("IBAN_COUNT", "1")),
        )


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
