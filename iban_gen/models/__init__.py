"""Domain models for IBAN generation."""

from iban_gen.models.iban import Iban

__all__ = ["Iban"]
