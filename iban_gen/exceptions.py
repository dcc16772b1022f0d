"""Custom exception hierarchy for iban-gen."""


class IbanGenError(Exception):
    """Base exception for all iban-gen errors."""


class MalformedInputError(IbanGenError):
    """Raised when a digit string or IBAN body contains unexpected characters."""


class InvalidBankCodeError(MalformedInputError):
    """Raised when a bank code does not match the scheme's shape."""


class InvariantViolationError(IbanGenError):
    """Raised when a generated value fails its own check.

    Never expected in practice: the account-number correction and the
    mod-97 checksum are closed-form.
    """


class ConfigurationError(IbanGenError):
    """Raised when configuration is invalid or missing."""
