"""IBAN value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Iban:
    """International Bank Account Number.

    Dutch layout (18 characters):
    - country_code: ISO 3166-1 alpha-2 code, always ``"NL"``
    - checksum: 2 digits, zero-padded, ``98 - (body mod 97)``
    - bank_code: 4 uppercase letters (BIC prefix, e.g. ``INGB``)
    - account_number: 10 digits passing the elfproef
    """

    country_code: str
    checksum: str
    bank_code: str
    account_number: str

    def __str__(self) -> str:
        return self.electronic

    @property
    def bban(self) -> str:
        """Basic Bank Account Number (everything after the checksum)."""
        return self.bank_code + self.account_number

    @property
    def electronic(self) -> str:
        """Electronic format without spaces (``NL91INGB0001234567``)."""
        return self.country_code + self.checksum + self.bban

    @property
    def formatted(self) -> str:
        """Print format in groups of four (``NL91 INGB 0001 2345 67``)."""
        value = self.electronic
        return " ".join(value[i : i + 4] for i in range(0, len(value), 4))
