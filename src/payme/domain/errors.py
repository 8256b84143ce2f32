"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """A PayMe link field failed validation.

    Attributes:
        field: Name of the builder field that was rejected, if known
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def unsupported_version(version: int) -> str:
    """Return message for a link version other than 1."""
    return f"Only version 1 is supported (got {version})"


def invalid_iban() -> str:
    """Return message for an IBAN that does not match the pattern."""
    return "IBAN incorrect format"


def unsupported_currency(version: int) -> str:
    """Return message for a currency code the link version does not allow."""
    return f"In version {version}, only EUR as currency code is supported"


def field_too_long(label: str, max_length: int) -> str:
    """Return message for a value exceeding its maximum length."""
    return f"{label} cannot be longer than {max_length} characters"


def message_too_long(max_length: int) -> str:
    """Return message for an oversized payment note."""
    return f"Message can be maximum {max_length} characters long"
